"""Badge awarded to a student by an admin."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from ..core.database import Base
from ..utils.datetime import utcnow


class Badge(Base):
    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    badge_name = Column(String(100), nullable=False)
    description = Column(Text)
    student_number = Column(String(9), ForeignKey("students.student_number"), nullable=False, index=True)
    awarded_at = Column(DateTime, default=utcnow, nullable=False)
