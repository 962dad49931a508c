"""Campus event model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..core.database import Base


class Event(Base):
    """Scheduled event published by a student."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    location = Column(String(200), nullable=False)
    event_datetime = Column(DateTime, nullable=False, index=True)
    created_by = Column(String(9), ForeignKey("students.student_number"), nullable=False)

    creator = relationship("Student")

    @property
    def creator_name(self):
        return self.creator.name if self.creator else None

    @property
    def creator_surname(self):
        return self.creator.surname if self.creator else None
