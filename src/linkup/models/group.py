"""Student-created group model."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.datetime import utcnow


class Group(Base):
    """Interest or study group owned by its creator."""

    __tablename__ = "groups"
    __table_args__ = (
        CheckConstraint("group_size >= 0", name="groups_size_non_negative"),
        CheckConstraint("max_size > 0", name="groups_max_size_positive"),
        CheckConstraint("group_size <= max_size", name="groups_size_within_max"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_name = Column(String(100), nullable=False)
    group_description = Column(Text)
    group_size = Column(Integer, nullable=False, default=0)
    max_size = Column(Integer, nullable=False)
    created_by = Column(String(9), ForeignKey("students.student_number"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    creator = relationship("Student")

    @property
    def creator_name(self):
        return self.creator.name if self.creator else None

    @property
    def creator_surname(self):
        return self.creator.surname if self.creator else None
