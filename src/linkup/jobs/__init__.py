"""Background jobs."""

from .session_purge import register_scheduler

__all__ = ["register_scheduler"]
