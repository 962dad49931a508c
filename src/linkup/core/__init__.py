"""Configuration, persistence, sessions and security primitives."""
