"""Pull-only notifications for students and admins."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidRequest, NotFound
from ..core.sessions import PrincipalKind
from ..models import Admin, Notification
from .common import ensure_student, flush_or_raise

logger = logging.getLogger(__name__)


def validate_target(
    target_type: PrincipalKind,
    target_student: Optional[str],
    target_admin: Optional[int],
) -> None:
    """Exactly one target must be set and it must match ``target_type``."""

    if target_student is not None and target_admin is not None:
        raise InvalidRequest("A notification targets either a student or an admin, not both")
    if target_type is PrincipalKind.STUDENT and target_student is None:
        raise InvalidRequest("target_student is required when target_type is 'student'")
    if target_type is PrincipalKind.ADMIN and target_admin is None:
        raise InvalidRequest("target_admin is required when target_type is 'admin'")


def list_for_student(session: Session, *, student_number: str) -> Sequence[Notification]:
    stmt = (
        select(Notification)
        .where(
            Notification.target_type == PrincipalKind.STUDENT,
            Notification.target_student == student_number,
        )
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return session.execute(stmt).scalars().all()


def list_for_admin(session: Session, *, admin_id: int) -> Sequence[Notification]:
    stmt = (
        select(Notification)
        .where(
            Notification.target_type == PrincipalKind.ADMIN,
            Notification.target_admin == admin_id,
        )
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return session.execute(stmt).scalars().all()


def create_notification(
    session: Session,
    *,
    name: str,
    target_type: PrincipalKind,
    target_student: Optional[str] = None,
    target_admin: Optional[int] = None,
    description: Optional[str] = None,
) -> Notification:
    target_type = PrincipalKind(target_type)
    validate_target(target_type, target_student, target_admin)
    if target_student is not None:
        ensure_student(session, target_student)
    if target_admin is not None and session.get(Admin, target_admin) is None:
        raise NotFound(f"Admin {target_admin} not found")

    notification = Notification(
        name=name,
        description=description,
        target_type=target_type,
        target_student=target_student,
        target_admin=target_admin,
    )
    session.add(notification)
    flush_or_raise(session, conflict="Notification already exists", invalid="Invalid notification target")
    logger.info("notification %r queued for %s", name, target_type.value)
    return notification
