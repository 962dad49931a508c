"""Memory hygiene for the in-process session store."""

from __future__ import annotations

import logging

from ..core.sessions import PrincipalKind, SessionStore

logger = logging.getLogger(__name__)


def run_session_purge(store: SessionStore) -> dict[str, int]:
    """Drop expired sessions and return summary statistics useful for logging/testing."""

    removed = store.purge_expired()
    summary = {
        "expired_removed": removed,
        "student_sessions": store.active_count(PrincipalKind.STUDENT),
        "admin_sessions": store.active_count(PrincipalKind.ADMIN),
    }
    if removed:
        logger.info("purged %d expired sessions", removed)
    return summary
