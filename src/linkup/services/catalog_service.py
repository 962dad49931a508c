"""Campuses, faculties, courses and modules."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import NotFound
from ..models import Campus, Course, Faculty, Module
from .common import flush_or_raise


def _ensure(session: Session, model, key: int, label: str):
    instance = session.get(model, key)
    if instance is None:
        raise NotFound(f"{label} not found")
    return instance


def list_campuses(session: Session) -> Sequence[Campus]:
    return session.execute(select(Campus).order_by(Campus.campus_name)).scalars().all()


def create_campus(
    session: Session,
    *,
    campus_name: str,
    location: str,
    campus_size: Optional[Decimal] = None,
) -> Campus:
    campus = Campus(campus_name=campus_name, location=location, campus_size=campus_size)
    session.add(campus)
    flush_or_raise(session, conflict="Campus already exists", invalid="Invalid campus data")
    return campus


def update_campus(session: Session, *, campus_id: int, changes: Dict[str, Any]) -> Campus:
    campus = _ensure(session, Campus, campus_id, "Campus")
    for field_name, value in changes.items():
        setattr(campus, field_name, value)
    flush_or_raise(session, conflict="Campus already exists", invalid="Invalid campus data")
    return campus


def delete_campus(session: Session, *, campus_id: int) -> None:
    campus = _ensure(session, Campus, campus_id, "Campus")
    session.delete(campus)
    flush_or_raise(session, conflict="Campus is still referenced by students")


def list_faculties(session: Session) -> Sequence[Faculty]:
    return session.execute(select(Faculty).order_by(Faculty.faculty_name)).scalars().all()


def create_faculty(
    session: Session,
    *,
    faculty_name: str,
    office_address: Optional[str] = None,
    description: Optional[str] = None,
) -> Faculty:
    faculty = Faculty(faculty_name=faculty_name, office_address=office_address, description=description)
    session.add(faculty)
    flush_or_raise(session, conflict="Faculty name already exists")
    return faculty


def list_courses(session: Session, *, faculty_id: Optional[int] = None) -> Sequence[Course]:
    """Return courses with their faculty, optionally scoped to one faculty."""

    stmt = select(Course).options(joinedload(Course.faculty)).order_by(Course.course_name)
    if faculty_id is not None:
        _ensure(session, Faculty, faculty_id, "Faculty")
        stmt = stmt.where(Course.faculty_id == faculty_id)
    return session.execute(stmt).scalars().all()


def create_course(
    session: Session,
    *,
    course_name: str,
    credits: int,
    number_of_modules: int,
    course_code: str,
    faculty_id: Optional[int] = None,
) -> Course:
    if faculty_id is not None:
        _ensure(session, Faculty, faculty_id, "Faculty")
    course = Course(
        faculty_id=faculty_id,
        course_name=course_name,
        credits=credits,
        number_of_modules=number_of_modules,
        course_code=course_code,
    )
    session.add(course)
    flush_or_raise(session, conflict="Course code already exists", invalid="Invalid course data")
    return course


def list_modules(session: Session) -> Sequence[Module]:
    return session.execute(select(Module).order_by(Module.module_name)).scalars().all()


def create_module(
    session: Session,
    *,
    module_name: str,
    module_code: str,
    credits: int,
    module_cost: Optional[Decimal] = None,
) -> Module:
    module = Module(module_name=module_name, module_code=module_code, credits=credits, module_cost=module_cost)
    session.add(module)
    flush_or_raise(session, conflict="Module code already exists", invalid="Invalid module data")
    return module
