"""Domain logic for posts and likes."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import Conflict, InvalidRequest, NotFound
from ..models import Comment, Like, Post
from .common import count_rows, ensure_owner, flush_or_raise

logger = logging.getLogger(__name__)

ALREADY_LIKED = "Post already liked"

PostWithCounts = Tuple[Post, int, int]


def ensure_post(session: Session, post_id: int) -> Post:
    post = session.get(Post, post_id)
    if post is None:
        raise NotFound("Post not found")
    return post


def like_count(session: Session, post_id: int) -> int:
    return count_rows(session, Like, Like.post_id == post_id)


def comment_count(session: Session, post_id: int) -> int:
    return count_rows(session, Comment, Comment.post_id == post_id)


def _posts_with_counts():
    likes = (
        select(Like.post_id, func.count(Like.id).label("like_count"))
        .group_by(Like.post_id)
        .subquery()
    )
    comments = (
        select(Comment.post_id, func.count(Comment.id).label("comment_count"))
        .group_by(Comment.post_id)
        .subquery()
    )
    return (
        select(
            Post,
            func.coalesce(likes.c.like_count, 0),
            func.coalesce(comments.c.comment_count, 0),
        )
        .outerjoin(likes, likes.c.post_id == Post.id)
        .outerjoin(comments, comments.c.post_id == Post.id)
        .options(joinedload(Post.creator))
    )


def list_posts(
    session: Session,
    *,
    created_by: Optional[str] = None,
    limit: Optional[int] = None,
) -> Sequence[PostWithCounts]:
    """Return posts newest first with like and comment counts (zero when none)."""

    stmt = _posts_with_counts().order_by(Post.created_at.desc(), Post.id.desc())
    if created_by is not None:
        stmt = stmt.where(Post.created_by == created_by)
    if limit is not None:
        stmt = stmt.limit(limit)
    return [(post, int(likes or 0), int(comments or 0)) for post, likes, comments in session.execute(stmt).all()]


def get_post(session: Session, post_id: int) -> PostWithCounts:
    ensure_post(session, post_id)
    post, likes, comments = session.execute(_posts_with_counts().where(Post.id == post_id)).one()
    return post, int(likes or 0), int(comments or 0)


def create_post(session: Session, *, creator: str, title: str, caption: Optional[str] = None) -> Post:
    post = Post(title=title, caption=caption, created_by=creator)
    session.add(post)
    flush_or_raise(session, conflict="Post already exists", invalid="Invalid post data")
    return post


def update_post(session: Session, *, post_id: int, actor: str, changes: Dict[str, Any]) -> Post:
    post = ensure_post(session, post_id)
    ensure_owner(post.created_by, actor, "Only post author can update the post")
    if "title" in changes and not (changes["title"] or "").strip():
        raise InvalidRequest("title cannot be empty")
    for field_name, value in changes.items():
        setattr(post, field_name, value)
    flush_or_raise(session, conflict="Post already exists", invalid="Invalid post data")
    return post


def delete_post(session: Session, *, post_id: int, actor: str) -> None:
    """Delete an own post together with its likes and comments."""

    post = ensure_post(session, post_id)
    ensure_owner(post.created_by, actor, "Only post author can delete the post")
    for stmt in (delete(Like).where(Like.post_id == post_id), delete(Comment).where(Comment.post_id == post_id)):
        session.execute(stmt, execution_options={"synchronize_session": False})
    session.delete(post)
    session.flush()


def _find_like(session: Session, post_id: int, student_number: str) -> Optional[Like]:
    stmt = select(Like).where(Like.post_id == post_id, Like.student_number == student_number)
    return session.execute(stmt).scalar_one_or_none()


def like_post(session: Session, *, post_id: int, student_number: str) -> int:
    """Record a like and return the recounted total.

    The pre-check gives the friendly error; the unique constraint on
    ``(post_id, student_number)`` settles concurrent duplicates.
    """

    ensure_post(session, post_id)
    if _find_like(session, post_id, student_number) is not None:
        raise Conflict(ALREADY_LIKED)

    session.add(Like(post_id=post_id, student_number=student_number))
    flush_or_raise(session, conflict=ALREADY_LIKED)
    return like_count(session, post_id)


def unlike_post(session: Session, *, post_id: int, student_number: str) -> int:
    like = _find_like(session, post_id, student_number)
    if like is None:
        raise NotFound("Like not found")
    session.delete(like)
    session.flush()
    return like_count(session, post_id)
