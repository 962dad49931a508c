"""LinkUp campus platform API."""
