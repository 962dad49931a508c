"""Posts, comments and likes."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.datetime import utcnow


class Post(Base):
    """Student post; engagement counts are always derived from rows."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    caption = Column(Text)
    created_by = Column(String(9), ForeignKey("students.student_number"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    creator = relationship("Student")
    likes = relationship("Like", back_populates="post")
    comments = relationship("Comment", back_populates="post")

    @property
    def creator_name(self):
        return self.creator.name if self.creator else None

    @property
    def creator_surname(self):
        return self.creator.surname if self.creator else None


class Comment(Base):
    """Comment left by a student on a post."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    student_number = Column(String(9), ForeignKey("students.student_number"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    post = relationship("Post", back_populates="comments")
    author = relationship("Student")

    @property
    def author_name(self):
        return self.author.name if self.author else None

    @property
    def author_surname(self):
        return self.author.surname if self.author else None


class Like(Base):
    """A student's like on a post; at most one per pair."""

    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("post_id", "student_number", name="likes_post_student_unique"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    student_number = Column(String(9), ForeignKey("students.student_number"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    post = relationship("Post", back_populates="likes")
