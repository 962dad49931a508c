"""Primary API router definition."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...utils.datetime import utcnow
from . import (
    auth,
    badges,
    catalog,
    classes,
    dashboard,
    events,
    groups,
    links,
    notifications,
    posts,
    ratings,
    students,
)

logger = logging.getLogger(__name__)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(students.router)
api_router.include_router(catalog.router)
api_router.include_router(groups.router)
api_router.include_router(links.router)
api_router.include_router(events.router)
api_router.include_router(classes.router)
api_router.include_router(posts.router)
api_router.include_router(badges.router)
api_router.include_router(notifications.router)
api_router.include_router(ratings.router)
api_router.include_router(dashboard.router)


@api_router.get("/health", tags=["health"])
def healthcheck(db: Session = Depends(get_db)) -> dict[str, str]:
    """Health probe that also pings the database."""
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        logger.warning("health check could not reach the database", exc_info=True)
        database = "unavailable"
    return {
        "status": "ok" if database == "connected" else "degraded",
        "timestamp": utcnow().isoformat(),
        "database": database,
    }
