"""Platform rating endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import RatingCreate, RatingEnvelope, RatingList
from ...services import rating_service
from ..deps import Principal, require_admin, require_student

router = APIRouter(tags=["ratings"])


@router.get("/ratings", response_model=RatingList, summary="All platform ratings, newest first")
def list_ratings(db: Session = Depends(get_db)) -> RatingList:
    return RatingList(ratings=rating_service.list_ratings(db))


@router.post(
    "/ratings",
    response_model=RatingEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Rate the platform as a student",
)
def rate_as_student(
    payload: RatingCreate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> RatingEnvelope:
    try:
        rating = rating_service.rate_as_student(db, student_number=student["student_number"], **payload.model_dump())
        db.commit()
        db.refresh(rating)
        return RatingEnvelope(message="Rating submitted successfully", rating=rating)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post(
    "/admin/ratings",
    response_model=RatingEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Rate the platform as an admin",
)
def rate_as_admin(
    payload: RatingCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> RatingEnvelope:
    try:
        rating = rating_service.rate_as_admin(db, admin_id=admin["admin_id"], **payload.model_dump())
        db.commit()
        db.refresh(rating)
        return RatingEnvelope(message="Rating submitted successfully", rating=rating)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
