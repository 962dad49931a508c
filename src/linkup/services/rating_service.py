"""Platform ratings from students and admins."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import InvalidRequest
from ..core.sessions import PrincipalKind
from ..models import Rating
from .common import flush_or_raise

MIN_RATING = 0
MAX_RATING = 5


def _check_value(rating_value: int) -> None:
    if not MIN_RATING <= rating_value <= MAX_RATING:
        raise InvalidRequest(f"rating_value must be between {MIN_RATING} and {MAX_RATING}")


def list_ratings(session: Session) -> Sequence[Rating]:
    stmt = (
        select(Rating)
        .options(joinedload(Rating.student), joinedload(Rating.admin))
        .order_by(Rating.rating_date.desc(), Rating.id.desc())
    )
    return session.execute(stmt).scalars().all()


def _create(session: Session, rating: Rating) -> Rating:
    _check_value(rating.rating_value)
    session.add(rating)
    flush_or_raise(session, conflict="Rating already exists", invalid="Invalid rating")
    return rating


def rate_as_student(
    session: Session,
    *,
    student_number: str,
    rating_value: int,
    rating_description: Optional[str] = None,
) -> Rating:
    return _create(
        session,
        Rating(
            rator_type=PrincipalKind.STUDENT,
            rator_student=student_number,
            rating_value=rating_value,
            rating_description=rating_description,
        ),
    )


def rate_as_admin(
    session: Session,
    *,
    admin_id: int,
    rating_value: int,
    rating_description: Optional[str] = None,
) -> Rating:
    return _create(
        session,
        Rating(
            rator_type=PrincipalKind.ADMIN,
            rator_admin=admin_id,
            rating_value=rating_value,
            rating_description=rating_description,
        ),
    )
