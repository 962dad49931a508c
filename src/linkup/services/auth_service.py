"""Registration, login and logout workflows."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from ..core.errors import Conflict, NotFound, Unauthenticated
from ..core.security import hash_password, verify_password
from ..core.sessions import PrincipalKind, SessionStore
from ..models import Admin, Campus, Course, Faculty, Student, YearOfStudy
from .common import flush_or_raise

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def student_snapshot(student: Student) -> Dict[str, Any]:
    return {
        "student_number": student.student_number,
        "email": student.email,
        "name": student.name,
        "surname": student.surname,
    }


def admin_snapshot(admin: Admin) -> Dict[str, Any]:
    return {
        "admin_id": admin.admin_id,
        "email": admin.email,
        "name": admin.name,
        "surname": admin.surname,
    }


def _ensure_reference(session: Session, model, key: Optional[int], label: str) -> None:
    if key is not None and session.get(model, key) is None:
        raise NotFound(f"{label} {key} not found")


def register_student(
    session: Session,
    *,
    student_number: str,
    name: str,
    surname: str,
    email: str,
    password: str,
    year_of_study: YearOfStudy = YearOfStudy.FIRST_YEAR,
    course_id: Optional[int] = None,
    faculty_id: Optional[int] = None,
    campus_id: Optional[int] = None,
    phone_number: Optional[str] = None,
) -> Student:
    """Create a student account with a hashed password."""

    existing_stmt = select(Student.student_number).where(
        or_(Student.student_number == student_number, Student.email == email)
    )
    if session.execute(existing_stmt).first() is not None:
        raise Conflict("Student number or email already exists")

    _ensure_reference(session, Course, course_id, "Course")
    _ensure_reference(session, Faculty, faculty_id, "Faculty")
    _ensure_reference(session, Campus, campus_id, "Campus")

    student = Student(
        student_number=student_number,
        name=name,
        surname=surname,
        email=email,
        password_hash=hash_password(password),
        course_id=course_id,
        year_of_study=year_of_study,
        faculty_id=faculty_id,
        campus_id=campus_id,
        phone_number=phone_number,
    )
    session.add(student)
    flush_or_raise(session, conflict="Student number or email already exists", invalid="Invalid registration data")
    logger.info("registered student %s", student_number)
    return student


def authenticate_student(session: Session, *, email: str, password: str) -> Student:
    student = session.execute(select(Student).where(Student.email == email)).scalar_one_or_none()
    if student is None or not verify_password(password, student.password_hash):
        logger.warning("rejected student login")
        raise Unauthenticated(INVALID_CREDENTIALS)
    return student


def authenticate_admin(session: Session, *, email: str, password: str) -> Admin:
    admin = session.execute(select(Admin).where(Admin.email == email)).scalar_one_or_none()
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("rejected admin login")
        raise Unauthenticated(INVALID_CREDENTIALS)
    return admin


def login_student(session: Session, store: SessionStore, *, email: str, password: str) -> tuple[str, Student]:
    """Verify credentials and open a student session."""

    student = authenticate_student(session, email=email, password=password)
    token = store.issue(PrincipalKind.STUDENT, student_snapshot(student))
    logger.info("student %s logged in", student.student_number)
    return token, student


def login_admin(session: Session, store: SessionStore, *, email: str, password: str) -> tuple[str, Admin]:
    """Verify credentials and open an admin session."""

    admin = authenticate_admin(session, email=email, password=password)
    token = store.issue(PrincipalKind.ADMIN, admin_snapshot(admin))
    logger.info("admin %s logged in", admin.admin_id)
    return token, admin


def logout(store: SessionStore, token: Optional[str]) -> None:
    if token:
        store.revoke(token)
        logger.info("session %s revoked", token.split("_", 1)[0])
