"""Helpers shared by the domain services."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.errors import Conflict, Forbidden, InvalidRequest, NotFound
from ..models import Student

logger = logging.getLogger(__name__)


def ensure_student(session: Session, student_number: str) -> Student:
    student = session.get(Student, student_number)
    if student is None:
        raise NotFound(f"Student {student_number} not found")
    return student


def ensure_owner(owner: str, actor: str, detail: str) -> None:
    """Raise ``Forbidden`` unless ``actor`` is the recorded owner."""

    if owner != actor:
        raise Forbidden(detail)


def require_text(value: str | None, detail: str) -> str:
    """Return ``value`` stripped, rejecting missing or whitespace-only input."""

    cleaned = (value or "").strip()
    if not cleaned:
        raise InvalidRequest(detail)
    return cleaned


def count_rows(session: Session, model, *criteria) -> int:
    stmt = select(func.count()).select_from(model)
    if criteria:
        stmt = stmt.where(*criteria)
    return int(session.execute(stmt).scalar_one() or 0)


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "pgcode", None) == "23505":
        return True
    return "unique" in str(orig).lower()


def flush_or_raise(session: Session, *, conflict: str, invalid: str | None = None) -> None:
    """Flush pending writes, translating constraint failures into service errors.

    Unique violations become ``Conflict(conflict)``. Other integrity failures
    (check or foreign-key constraints) become ``InvalidRequest(invalid)`` when
    ``invalid`` is given and ``Conflict(conflict)`` otherwise. The caller is
    responsible for rolling the session back.
    """

    try:
        session.flush()
    except IntegrityError as exc:
        logger.info("integrity error translated: %s", exc.orig)
        if is_unique_violation(exc) or invalid is None:
            raise Conflict(conflict) from exc
        raise InvalidRequest(invalid) from exc
