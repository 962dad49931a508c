"""Domain logic for mutual student links."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import Conflict, Forbidden, InvalidRequest, NotFound
from ..models import Link
from .common import ensure_student, flush_or_raise

logger = logging.getLogger(__name__)

LINK_EXISTS = "Link already exists"


def find_link(session: Session, first: str, second: str) -> Optional[Link]:
    """Return the link between two students regardless of who connected."""

    stmt = select(Link).where(
        or_(
            and_(Link.connector == first, Link.acceptor == second),
            and_(Link.connector == second, Link.acceptor == first),
        )
    )
    return session.execute(stmt).scalars().first()


def list_links(session: Session, *, student_number: str) -> Sequence[Link]:
    stmt = (
        select(Link)
        .options(joinedload(Link.connector_student), joinedload(Link.acceptor_student))
        .where(or_(Link.connector == student_number, Link.acceptor == student_number))
        .order_by(Link.created_at.desc(), Link.id.desc())
    )
    return session.execute(stmt).scalars().all()


def create_link(session: Session, *, connector: str, acceptor: str) -> Link:
    """Connect two distinct students at most once per unordered pair."""

    if connector == acceptor:
        raise InvalidRequest("Cannot link with yourself")
    ensure_student(session, acceptor)
    if find_link(session, connector, acceptor) is not None:
        raise Conflict(LINK_EXISTS)

    link = Link(connector=connector, acceptor=acceptor)
    session.add(link)
    flush_or_raise(session, conflict=LINK_EXISTS, invalid="Invalid link")
    logger.info("link %s <-> %s created", connector, acceptor)
    return link


def delete_link(session: Session, *, link_id: int, actor: str) -> None:
    link = session.get(Link, link_id)
    if link is None:
        raise NotFound("Link not found")
    if not link.involves(actor):
        raise Forbidden("Only a participant can delete the link")
    session.delete(link)
    session.flush()
