"""Student profile queries and mutations."""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import Conflict, InvalidRequest
from ..core.sessions import PrincipalKind, SessionStore
from ..models import (
    Badge,
    Comment,
    Event,
    Group,
    Like,
    Link,
    Notification,
    Post,
    Rating,
    Student,
    StudentClass,
)
from .common import ensure_owner, ensure_student, flush_or_raise

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 50
UPDATABLE_FIELDS = ("name", "surname", "email", "phone_number", "year_of_study")


def _with_references(stmt):
    return stmt.options(
        joinedload(Student.course),
        joinedload(Student.faculty),
        joinedload(Student.campus),
    )


def list_students(session: Session) -> Sequence[Student]:
    stmt = _with_references(select(Student)).order_by(Student.student_number)
    return session.execute(stmt).scalars().all()


def get_student(session: Session, student_number: str) -> Student:
    ensure_student(session, student_number)
    stmt = _with_references(select(Student)).where(Student.student_number == student_number)
    return session.execute(stmt).scalar_one()


def update_student(
    session: Session,
    *,
    student_number: str,
    actor: str,
    changes: Dict[str, Any],
) -> Student:
    """Apply a self-service profile update.

    The ownership check runs before the existence lookup: a student may only
    ever address their own profile, whether or not another number exists.
    """

    ensure_owner(student_number, actor, "Cannot update other student profiles")
    student = ensure_student(session, student_number)

    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise InvalidRequest(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

    for field_name in ("name", "surname", "email", "year_of_study"):
        if field_name in changes and changes[field_name] is None:
            raise InvalidRequest(f"{field_name} cannot be empty")

    new_email = changes.get("email")
    if new_email and new_email != student.email:
        taken = session.execute(
            select(Student.student_number).where(Student.email == new_email)
        ).first()
        if taken is not None:
            raise Conflict("Email already exists")

    for field_name, value in changes.items():
        setattr(student, field_name, value)
    flush_or_raise(session, conflict="Email already exists", invalid="Invalid profile data")
    return student


def delete_student(session: Session, store: SessionStore, *, student_number: str) -> None:
    """Remove a student and every row that references them, then end their sessions."""

    ensure_student(session, student_number)

    own_posts = select(Post.id).where(Post.created_by == student_number)
    statements = [
        delete(Like).where(or_(Like.student_number == student_number, Like.post_id.in_(own_posts))),
        delete(Comment).where(or_(Comment.student_number == student_number, Comment.post_id.in_(own_posts))),
        delete(Post).where(Post.created_by == student_number),
        delete(StudentClass).where(StudentClass.student_number == student_number),
        delete(Link).where(or_(Link.connector == student_number, Link.acceptor == student_number)),
        delete(Badge).where(Badge.student_number == student_number),
        delete(Group).where(Group.created_by == student_number),
        delete(Event).where(Event.created_by == student_number),
        delete(Notification).where(Notification.target_student == student_number),
        delete(Rating).where(Rating.rator_student == student_number),
        delete(Student).where(Student.student_number == student_number),
    ]
    for stmt in statements:
        session.execute(stmt, execution_options={"synchronize_session": False})
    session.expire_all()

    revoked = store.revoke_principal(PrincipalKind.STUDENT, "student_number", student_number)
    logger.info("deleted student %s (%d sessions revoked)", student_number, revoked)


def search_students(session: Session, *, query: str) -> Sequence[Student]:
    """Case-insensitive substring match on name, surname, email and student number."""

    term = query.strip().lower()
    if not term:
        raise InvalidRequest("Search query required")

    stmt = (
        _with_references(select(Student))
        .where(
            or_(
                func.lower(Student.name).contains(term, autoescape=True),
                func.lower(Student.surname).contains(term, autoescape=True),
                func.lower(Student.email).contains(term, autoescape=True),
                Student.student_number.contains(term, autoescape=True),
            )
        )
        .order_by(Student.name, Student.surname)
        .limit(SEARCH_LIMIT)
    )
    return session.execute(stmt).scalars().all()
