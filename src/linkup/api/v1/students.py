"""Student profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...core.sessions import SessionStore, get_session_store
from ...schemas import MessageResponse, StudentEnvelope, StudentList, StudentProfile, StudentUpdate
from ...services import student_service
from ..deps import Principal, require_admin, require_student

router = APIRouter(tags=["students"])


@router.get("/students", response_model=StudentList, summary="List students")
def list_students(db: Session = Depends(get_db)) -> StudentList:
    return StudentList(students=student_service.list_students(db))


@router.get(
    "/students/{student_number}",
    response_model=StudentProfile,
    summary="Fetch a student profile",
    responses={404: {"description": "Student not found"}},
)
def get_student(student_number: str, db: Session = Depends(get_db)) -> StudentProfile:
    try:
        return StudentProfile(student=student_service.get_student(db, student_number))
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/students/{student_number}",
    response_model=StudentEnvelope,
    summary="Update own profile",
    responses={
        401: {"description": "Missing or invalid session"},
        403: {"description": "Cannot update other student profiles"},
        404: {"description": "Student not found"},
        409: {"description": "Email already exists"},
    },
)
def update_student(
    student_number: str,
    payload: StudentUpdate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> StudentEnvelope:
    """Update name, surname, email, phone number or year of study.

    Example request body::

        {
            "phone_number": "0821234567",
            "year_of_study": "third year"
        }
    """

    try:
        student_service.update_student(
            db,
            student_number=student_number,
            actor=student["student_number"],
            changes=payload.model_dump(exclude_unset=True),
        )
        db.commit()
        updated = student_service.get_student(db, student_number)
        return StudentEnvelope(message="Student updated successfully", student=updated)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/students/{student_number}",
    response_model=MessageResponse,
    summary="Delete a student (admin)",
    responses={404: {"description": "Student not found"}},
)
def delete_student(
    student_number: str,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> MessageResponse:
    try:
        student_service.delete_student(db, store, student_number=student_number)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Student deleted successfully")


@router.get(
    "/search/students",
    response_model=StudentList,
    summary="Substring search over students",
    responses={400: {"description": "Search query required"}},
)
def search_students(
    query: str = Query("", description="Text matched against name, surname, email and student number"),
    db: Session = Depends(get_db),
) -> StudentList:
    try:
        return StudentList(students=student_service.search_students(db, query=query))
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
