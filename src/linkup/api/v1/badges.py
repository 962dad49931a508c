"""Badge endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import BadgeCreate, BadgeEnvelope, BadgeList
from ...services import badge_service
from ..deps import Principal, require_admin

router = APIRouter(prefix="/badges", tags=["badges"])


@router.get("/{student_number}", response_model=BadgeList, summary="Badges held by a student")
def list_badges(student_number: str, db: Session = Depends(get_db)) -> BadgeList:
    return BadgeList(badges=badge_service.list_badges(db, student_number=student_number))


@router.post(
    "",
    response_model=BadgeEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Award a badge (admin)",
    responses={404: {"description": "Student not found"}},
)
def award_badge(
    payload: BadgeCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> BadgeEnvelope:
    try:
        badge = badge_service.award_badge(db, **payload.model_dump())
        db.commit()
        db.refresh(badge)
        return BadgeEnvelope(message="Badge awarded successfully", badge=badge)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
