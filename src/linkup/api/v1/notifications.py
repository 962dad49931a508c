"""Notification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import NotificationCreate, NotificationEnvelope, NotificationList
from ...services import notification_service
from ..deps import Principal, require_admin, require_student

router = APIRouter(tags=["notifications"])


@router.get("/notifications", response_model=NotificationList, summary="Caller's notifications")
def list_my_notifications(
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> NotificationList:
    return NotificationList(
        notifications=notification_service.list_for_student(db, student_number=student["student_number"])
    )


@router.get("/admin/notifications", response_model=NotificationList, summary="Admin's notifications")
def list_admin_notifications(
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> NotificationList:
    return NotificationList(notifications=notification_service.list_for_admin(db, admin_id=admin["admin_id"]))


@router.post(
    "/notifications",
    response_model=NotificationEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Send a notification (admin)",
    responses={
        400: {"description": "Target missing, mismatched or doubled"},
        404: {"description": "Target not found"},
    },
)
def create_notification(
    payload: NotificationCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> NotificationEnvelope:
    """Queue a notification for exactly one student or admin.

    Example request body::

        {
            "name": "Timetable change",
            "description": "CS101 moves to Friday",
            "target_type": "student",
            "target_student": "123456789"
        }
    """

    try:
        notification = notification_service.create_notification(db, **payload.model_dump())
        db.commit()
        db.refresh(notification)
        return NotificationEnvelope(message="Notification created successfully", notification=notification)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
