"""Registration, login and logout endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...core.guards import extract_token
from ...core.sessions import SessionStore, get_session_store
from ...schemas import (
    AdminLoginResponse,
    LoginRequest,
    MessageResponse,
    StudentEnvelope,
    StudentLoginResponse,
    StudentRegister,
)
from ...services import auth_service, student_service

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=StudentEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Register a student",
    responses={
        201: {
            "description": "Student registered",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Student registered successfully",
                        "student": {
                            "student_number": "123456789",
                            "name": "Thandi",
                            "surname": "Mokoena",
                            "email": "thandi@students.jsj.ac.za",
                            "year_of_study": "second year",
                            "course_id": 1,
                            "faculty_id": 1,
                            "campus_id": 1,
                            "phone_number": "0821234567",
                            "course_name": "Computer Science",
                            "faculty_name": "Faculty of Science",
                            "campus_name": "Main Campus",
                        },
                    }
                }
            },
        },
        400: {"description": "Invalid registration data"},
        404: {"description": "Referenced course, faculty or campus not found"},
        409: {"description": "Student number or email already exists"},
    },
)
def register(payload: StudentRegister, db: Session = Depends(get_db)) -> StudentEnvelope:
    """Create a student account.

    Example request body::

        {
            "student_number": "123456789",
            "name": "Thandi",
            "surname": "Mokoena",
            "email": "thandi@students.jsj.ac.za",
            "password": "s3cret",
            "year_of_study": "second year",
            "course_id": 1
        }
    """

    try:
        student = auth_service.register_student(db, **payload.model_dump())
        db.commit()
        student = student_service.get_student(db, student.student_number)
        return StudentEnvelope(message="Student registered successfully", student=student)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post(
    "/login",
    response_model=StudentLoginResponse,
    summary="Student login",
    responses={401: {"description": "Invalid credentials"}},
)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> StudentLoginResponse:
    """Exchange student credentials for a session token."""

    try:
        token, student = auth_service.login_student(db, store, email=payload.email, password=payload.password)
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return StudentLoginResponse(message="Login successful", sessionId=token, student=student)


@router.post(
    "/admin/login",
    response_model=AdminLoginResponse,
    summary="Admin login",
    responses={401: {"description": "Invalid credentials"}},
)
def admin_login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> AdminLoginResponse:
    """Exchange admin credentials for a session token."""

    try:
        token, admin = auth_service.login_admin(db, store, email=payload.email, password=payload.password)
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return AdminLoginResponse(message="Admin login successful", sessionId=token, admin=admin)


@router.post("/logout", response_model=MessageResponse, summary="End the presented session")
def logout(request: Request, store: SessionStore = Depends(get_session_store)) -> MessageResponse:
    """Revoke the token from both namespaces; unknown tokens are ignored."""

    auth_service.logout(store, extract_token(request.headers))
    return MessageResponse(message="Logout successful")
