"""Background scheduler for expired-session purges."""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI

from ..core.config import get_settings
from ..core.sessions import get_session_store
from ..services.session_purge_service import run_session_purge

logger = logging.getLogger(__name__)

_scheduler = AsyncIOScheduler(timezone="UTC")


async def _execute_session_purge() -> None:
    try:
        summary = run_session_purge(get_session_store())
        logger.debug("session purge completed: %s", summary)
    except Exception:  # pragma: no cover - safeguard for background job
        logger.exception("session purge job failed")
        raise


def register_scheduler(app: FastAPI) -> None:
    """Attach APScheduler lifecycle hooks to the FastAPI app."""

    settings = get_settings()
    if not settings.session_purge_enabled:
        return

    @app.on_event("startup")
    async def start_scheduler() -> None:
        if not _scheduler.running:
            _scheduler.add_job(
                _execute_session_purge,
                "interval",
                minutes=settings.session_purge_interval_minutes,
                id="session_purge",
                replace_existing=True,
                misfire_grace_time=300,
            )
            _scheduler.start()
            logger.info("session purge scheduler started")

    @app.on_event("shutdown")
    async def shutdown_scheduler() -> None:
        if _scheduler.running:
            _scheduler.shutdown(wait=False)
            logger.info("session purge scheduler stopped")


def run_purge_once() -> dict[str, int]:
    """Convenience helper to run the purge synchronously for manual testing."""

    return run_session_purge(get_session_store())
