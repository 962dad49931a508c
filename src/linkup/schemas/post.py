"""Pydantic schemas for posts, comments and likes."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    caption: Optional[str] = None


class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    caption: Optional[str] = None


class PostRead(BaseModel):
    """Post with derived engagement counts."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    caption: Optional[str] = None
    created_by: str
    created_at: datetime
    creator_name: Optional[str] = None
    creator_surname: Optional[str] = None
    like_count: int = Field(0, ge=0)
    comment_count: int = Field(0, ge=0)


class PostEnvelope(BaseModel):
    message: str
    post: PostRead


class PostDetail(BaseModel):
    post: PostRead


class PostList(BaseModel):
    posts: List[PostRead]


class LikeResult(BaseModel):
    message: str
    post_id: int
    like_count: int = Field(..., ge=0)


class CommentWrite(BaseModel):
    # Blank content is rejected by the service so it reports the domain message.
    content: str = Field(..., max_length=5000)


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    student_number: str
    content: str
    created_at: datetime
    updated_at: datetime
    author_name: Optional[str] = None
    author_surname: Optional[str] = None


class CommentEnvelope(BaseModel):
    message: str
    comment: CommentRead
    comment_count: int = Field(..., ge=0)


class CommentDeleted(BaseModel):
    message: str
    comment_count: int = Field(..., ge=0)


class CommentList(BaseModel):
    comments: List[CommentRead]
