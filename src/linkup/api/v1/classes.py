"""Class timetable and enrollment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import ClassCreate, ClassEnvelope, ClassList, MessageResponse
from ...services import class_service
from ..deps import Principal, require_admin, require_student

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=ClassList, summary="List scheduled classes")
def list_classes(db: Session = Depends(get_db)) -> ClassList:
    return ClassList(classes=class_service.list_classes(db))


@router.get("/mine", response_model=ClassList, summary="Classes the caller is enrolled in")
def list_my_classes(
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> ClassList:
    return ClassList(classes=class_service.list_enrolled_classes(db, student_number=student["student_number"]))


@router.post(
    "",
    response_model=ClassEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a class (admin)",
    responses={404: {"description": "Module not found"}},
)
def create_class(
    payload: ClassCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> ClassEnvelope:
    try:
        klass = class_service.create_class(db, **payload.model_dump())
        db.commit()
        db.refresh(klass)
        return ClassEnvelope(message="Class created successfully", class_=klass)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post(
    "/{class_id}/enroll",
    response_model=MessageResponse,
    summary="Enroll the caller in a class",
    responses={404: {"description": "Class not found"}, 409: {"description": "Already enrolled"}},
)
def enroll(
    class_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        class_service.enroll(db, class_id=class_id, student_number=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Successfully enrolled in class")


@router.delete(
    "/{class_id}/enroll",
    response_model=MessageResponse,
    summary="Withdraw the caller from a class",
    responses={404: {"description": "Enrollment not found"}},
)
def unenroll(
    class_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        class_service.unenroll(db, class_id=class_id, student_number=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Successfully unenrolled from class")
