"""Domain logic for classes and enrollments."""

from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import Conflict, NotFound
from ..models import Class, Module, StudentClass
from .common import flush_or_raise

ALREADY_ENROLLED = "Already enrolled in this class"


def _ensure_class(session: Session, class_id: int) -> Class:
    klass = session.get(Class, class_id)
    if klass is None:
        raise NotFound("Class not found")
    return klass


def list_classes(session: Session) -> Sequence[Class]:
    stmt = (
        select(Class)
        .options(joinedload(Class.module))
        .order_by(Class.class_date, Class.class_time, Class.id)
    )
    return session.execute(stmt).scalars().all()


def list_enrolled_classes(session: Session, *, student_number: str) -> Sequence[Class]:
    stmt = (
        select(Class)
        .join(StudentClass, StudentClass.class_id == Class.id)
        .options(joinedload(Class.module))
        .where(StudentClass.student_number == student_number)
        .order_by(Class.class_date, Class.class_time, Class.id)
    )
    return session.execute(stmt).scalars().all()


def create_class(
    session: Session,
    *,
    class_name: str,
    class_time: time,
    class_date: date,
    duration_minutes: int,
    location: str,
    instructor: str,
    module_id: Optional[int] = None,
) -> Class:
    if module_id is not None and session.get(Module, module_id) is None:
        raise NotFound("Module not found")
    klass = Class(
        class_name=class_name,
        module_id=module_id,
        class_time=class_time,
        class_date=class_date,
        duration_minutes=duration_minutes,
        location=location,
        instructor=instructor,
    )
    session.add(klass)
    flush_or_raise(session, conflict="Class already exists", invalid="Invalid class data")
    return klass


def enroll(session: Session, *, class_id: int, student_number: str) -> StudentClass:
    """Enroll a student once; the composite primary key backs the duplicate check."""

    _ensure_class(session, class_id)
    if session.get(StudentClass, (student_number, class_id)) is not None:
        raise Conflict(ALREADY_ENROLLED)

    enrollment = StudentClass(student_number=student_number, class_id=class_id)
    session.add(enrollment)
    flush_or_raise(session, conflict=ALREADY_ENROLLED)
    return enrollment


def unenroll(session: Session, *, class_id: int, student_number: str) -> None:
    enrollment = session.get(StudentClass, (student_number, class_id))
    if enrollment is None:
        raise NotFound("Enrollment not found")
    session.delete(enrollment)
    session.flush()
