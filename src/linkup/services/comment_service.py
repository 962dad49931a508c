"""Domain logic for post comments."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import NotFound
from ..models import Comment
from ..utils.datetime import utcnow
from .common import ensure_owner, flush_or_raise, require_text
from .post_service import ensure_post

CONTENT_REQUIRED = "Comment content is required"


def _ensure_comment(session: Session, post_id: int, comment_id: int) -> Comment:
    comment = session.get(Comment, comment_id)
    if comment is None or comment.post_id != post_id:
        raise NotFound("Comment not found")
    return comment


def list_comments(session: Session, *, post_id: int) -> Sequence[Comment]:
    """Return a post's comments oldest first."""

    ensure_post(session, post_id)
    stmt = (
        select(Comment)
        .options(joinedload(Comment.author))
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
    )
    return session.execute(stmt).scalars().all()


def create_comment(session: Session, *, post_id: int, author: str, content: str) -> Comment:
    text = require_text(content, CONTENT_REQUIRED)
    ensure_post(session, post_id)
    now = utcnow()
    comment = Comment(post_id=post_id, student_number=author, content=text, created_at=now, updated_at=now)
    session.add(comment)
    flush_or_raise(session, conflict="Comment already exists", invalid="Invalid comment")
    return comment


def update_comment(session: Session, *, post_id: int, comment_id: int, actor: str, content: str) -> Comment:
    comment = _ensure_comment(session, post_id, comment_id)
    ensure_owner(comment.student_number, actor, "Only the comment author can edit the comment")
    comment.content = require_text(content, CONTENT_REQUIRED)
    comment.updated_at = utcnow()
    session.flush()
    return comment


def delete_comment(session: Session, *, post_id: int, comment_id: int, actor: str) -> None:
    comment = _ensure_comment(session, post_id, comment_id)
    ensure_owner(comment.student_number, actor, "Only the comment author can delete the comment")
    session.delete(comment)
    session.flush()
