"""Post, like and comment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import (
    CommentDeleted,
    CommentEnvelope,
    CommentList,
    CommentWrite,
    LikeResult,
    MessageResponse,
    PostCreate,
    PostDetail,
    PostEnvelope,
    PostList,
    PostRead,
    PostUpdate,
)
from ...services import comment_service, post_service
from ...services.post_service import PostWithCounts
from ..deps import Principal, require_student

router = APIRouter(prefix="/posts", tags=["posts"])


def post_read(row: PostWithCounts) -> PostRead:
    post, likes, comments = row
    return PostRead.model_validate(post).model_copy(update={"like_count": likes, "comment_count": comments})


@router.get("", response_model=PostList, summary="Feed of posts, newest first")
def list_posts(db: Session = Depends(get_db)) -> PostList:
    return PostList(posts=[post_read(row) for row in post_service.list_posts(db)])


@router.get(
    "/{post_id}",
    response_model=PostDetail,
    summary="Fetch a single post",
    responses={404: {"description": "Post not found"}},
)
def get_post(post_id: int, db: Session = Depends(get_db)) -> PostDetail:
    try:
        return PostDetail(post=post_read(post_service.get_post(db, post_id)))
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post(
    "",
    response_model=PostEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a post",
)
def create_post(
    payload: PostCreate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> PostEnvelope:
    """Publish a post as the caller.

    Example request body::

        {"title": "Study group tonight", "caption": "Library level 3, 7pm"}
    """

    try:
        post = post_service.create_post(db, creator=student["student_number"], **payload.model_dump())
        db.commit()
        return PostEnvelope(message="Post created successfully", post=post_read(post_service.get_post(db, post.id)))
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/{post_id}",
    response_model=PostEnvelope,
    summary="Edit an own post",
    responses={403: {"description": "Caller is not the author"}, 404: {"description": "Post not found"}},
)
def update_post(
    post_id: int,
    payload: PostUpdate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> PostEnvelope:
    try:
        post_service.update_post(
            db,
            post_id=post_id,
            actor=student["student_number"],
            changes=payload.model_dump(exclude_unset=True),
        )
        db.commit()
        return PostEnvelope(message="Post updated successfully", post=post_read(post_service.get_post(db, post_id)))
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete an own post",
    responses={403: {"description": "Caller is not the author"}, 404: {"description": "Post not found"}},
)
def delete_post(
    post_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        post_service.delete_post(db, post_id=post_id, actor=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Post deleted successfully")


@router.post(
    "/{post_id}/like",
    response_model=LikeResult,
    summary="Like a post",
    responses={404: {"description": "Post not found"}, 409: {"description": "Post already liked"}},
)
def like_post(
    post_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> LikeResult:
    try:
        count = post_service.like_post(db, post_id=post_id, student_number=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return LikeResult(message="Post liked successfully", post_id=post_id, like_count=count)


@router.delete(
    "/{post_id}/like",
    response_model=LikeResult,
    summary="Remove a like",
    responses={404: {"description": "Like not found"}},
)
def unlike_post(
    post_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> LikeResult:
    try:
        count = post_service.unlike_post(db, post_id=post_id, student_number=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return LikeResult(message="Post unliked successfully", post_id=post_id, like_count=count)


@router.get(
    "/{post_id}/comments",
    response_model=CommentList,
    summary="Comments on a post, oldest first",
    responses={404: {"description": "Post not found"}},
)
def list_comments(post_id: int, db: Session = Depends(get_db)) -> CommentList:
    try:
        return CommentList(comments=comment_service.list_comments(db, post_id=post_id))
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post(
    "/{post_id}/comments",
    response_model=CommentEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
    responses={400: {"description": "Comment content is required"}, 404: {"description": "Post not found"}},
)
def create_comment(
    post_id: int,
    payload: CommentWrite,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> CommentEnvelope:
    try:
        comment = comment_service.create_comment(
            db, post_id=post_id, author=student["student_number"], content=payload.content
        )
        db.commit()
        db.refresh(comment)
        return CommentEnvelope(
            message="Comment added successfully",
            comment=comment,
            comment_count=post_service.comment_count(db, post_id),
        )
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/{post_id}/comments/{comment_id}",
    response_model=CommentEnvelope,
    summary="Edit an own comment",
    responses={403: {"description": "Caller is not the author"}, 404: {"description": "Comment not found"}},
)
def update_comment(
    post_id: int,
    comment_id: int,
    payload: CommentWrite,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> CommentEnvelope:
    try:
        comment = comment_service.update_comment(
            db,
            post_id=post_id,
            comment_id=comment_id,
            actor=student["student_number"],
            content=payload.content,
        )
        db.commit()
        db.refresh(comment)
        return CommentEnvelope(
            message="Comment updated successfully",
            comment=comment,
            comment_count=post_service.comment_count(db, post_id),
        )
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/{post_id}/comments/{comment_id}",
    response_model=CommentDeleted,
    summary="Delete an own comment",
    responses={403: {"description": "Caller is not the author"}, 404: {"description": "Comment not found"}},
)
def delete_comment(
    post_id: int,
    comment_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> CommentDeleted:
    try:
        comment_service.delete_comment(db, post_id=post_id, comment_id=comment_id, actor=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return CommentDeleted(message="Comment deleted successfully", comment_count=post_service.comment_count(db, post_id))
