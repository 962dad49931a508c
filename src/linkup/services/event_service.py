"""Domain logic for campus events."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import InvalidRequest, NotFound
from ..models import Event
from ..utils.datetime import to_naive_utc, utcnow
from .common import ensure_owner, flush_or_raise


def _ensure_event(session: Session, event_id: int) -> Event:
    event = session.get(Event, event_id)
    if event is None:
        raise NotFound("Event not found")
    return event


def list_events(session: Session) -> Sequence[Event]:
    stmt = select(Event).options(joinedload(Event.creator)).order_by(Event.event_datetime.desc(), Event.id.desc())
    return session.execute(stmt).scalars().all()


def upcoming_events(session: Session, *, now: Optional[datetime] = None, limit: int = 5) -> Sequence[Event]:
    """Return the next ``limit`` events at or after ``now``, soonest first."""

    cutoff = to_naive_utc(now) if now else utcnow()
    stmt = (
        select(Event)
        .options(joinedload(Event.creator))
        .where(Event.event_datetime >= cutoff)
        .order_by(Event.event_datetime.asc(), Event.id.asc())
        .limit(limit)
    )
    return session.execute(stmt).scalars().all()


def create_event(
    session: Session,
    *,
    creator: str,
    name: str,
    location: str,
    event_datetime: datetime,
    description: Optional[str] = None,
) -> Event:
    event = Event(
        name=name,
        description=description,
        location=location,
        event_datetime=to_naive_utc(event_datetime),
        created_by=creator,
    )
    session.add(event)
    flush_or_raise(session, conflict="Event already exists", invalid="Invalid event data")
    return event


def update_event(session: Session, *, event_id: int, actor: str, changes: Dict[str, Any]) -> Event:
    event = _ensure_event(session, event_id)
    ensure_owner(event.created_by, actor, "Only event creator can update the event")

    for field_name in ("name", "location", "event_datetime"):
        if field_name in changes and changes[field_name] is None:
            raise InvalidRequest(f"{field_name} cannot be empty")
    if changes.get("event_datetime") is not None:
        changes = {**changes, "event_datetime": to_naive_utc(changes["event_datetime"])}

    for field_name, value in changes.items():
        setattr(event, field_name, value)
    flush_or_raise(session, conflict="Event already exists", invalid="Invalid event data")
    return event


def delete_event(session: Session, *, event_id: int, actor: str) -> None:
    event = _ensure_event(session, event_id)
    ensure_owner(event.created_by, actor, "Only event creator can delete the event")
    session.delete(event)
    session.flush()
