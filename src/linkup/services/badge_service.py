"""Badges awarded by admins."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Badge
from .common import ensure_student, flush_or_raise


def list_badges(session: Session, *, student_number: str) -> Sequence[Badge]:
    stmt = (
        select(Badge)
        .where(Badge.student_number == student_number)
        .order_by(Badge.awarded_at.desc(), Badge.id.desc())
    )
    return session.execute(stmt).scalars().all()


def award_badge(
    session: Session,
    *,
    student_number: str,
    badge_name: str,
    description: Optional[str] = None,
) -> Badge:
    ensure_student(session, student_number)
    badge = Badge(badge_name=badge_name, description=description, student_number=student_number)
    session.add(badge)
    flush_or_raise(session, conflict="Badge already awarded", invalid="Invalid badge data")
    return badge
