"""Scheduled classes and student enrollments."""

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String, Time
from sqlalchemy.orm import relationship

from ..core.database import Base


class Class(Base):
    """A single scheduled class for a module."""

    __tablename__ = "classes"
    __table_args__ = (
        CheckConstraint("duration_minutes > 0", name="classes_duration_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    class_name = Column(String(100), nullable=False)
    module_id = Column(Integer, ForeignKey("modules.id"))
    class_time = Column(Time, nullable=False)
    class_date = Column(Date, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    location = Column(String(200), nullable=False)
    instructor = Column(String(100), nullable=False)

    module = relationship("Module")

    @property
    def module_name(self):
        return self.module.module_name if self.module else None


class StudentClass(Base):
    """Enrollment of one student in one class."""

    __tablename__ = "student_classes"

    student_number = Column(String(9), ForeignKey("students.student_number"), primary_key=True)
    class_id = Column(Integer, ForeignKey("classes.id"), primary_key=True)
