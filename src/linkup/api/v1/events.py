"""Event endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import EventCreate, EventEnvelope, EventList, EventUpdate, MessageResponse
from ...services import event_service
from ..deps import Principal, require_student

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=EventList, summary="List events, latest first")
def list_events(db: Session = Depends(get_db)) -> EventList:
    return EventList(events=event_service.list_events(db))


@router.post(
    "",
    response_model=EventEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create an event",
)
def create_event(
    payload: EventCreate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> EventEnvelope:
    """Publish an event owned by the caller.

    Example request body::

        {
            "name": "Hackathon",
            "description": "24h build sprint",
            "location": "Engineering Building",
            "event_datetime": "2025-04-12T09:00:00"
        }
    """

    try:
        event = event_service.create_event(db, creator=student["student_number"], **payload.model_dump())
        db.commit()
        db.refresh(event)
        return EventEnvelope(message="Event created successfully", event=event)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/{event_id}",
    response_model=EventEnvelope,
    summary="Update an event (creator only)",
    responses={403: {"description": "Caller is not the creator"}, 404: {"description": "Event not found"}},
)
def update_event(
    event_id: int,
    payload: EventUpdate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> EventEnvelope:
    try:
        event = event_service.update_event(
            db,
            event_id=event_id,
            actor=student["student_number"],
            changes=payload.model_dump(exclude_unset=True),
        )
        db.commit()
        db.refresh(event)
        return EventEnvelope(message="Event updated successfully", event=event)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/{event_id}",
    response_model=MessageResponse,
    summary="Delete an event (creator only)",
    responses={403: {"description": "Caller is not the creator"}, 404: {"description": "Event not found"}},
)
def delete_event(
    event_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        event_service.delete_event(db, event_id=event_id, actor=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Event deleted successfully")
