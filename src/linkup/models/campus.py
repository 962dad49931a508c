"""Campus, faculty, course and module reference data."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ..core.database import Base


class Campus(Base):
    """Physical campus a student is based at."""

    __tablename__ = "campuses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    campus_name = Column(String(100), nullable=False)
    location = Column(String(200), nullable=False)
    campus_size = Column(Numeric(10, 2))


class Faculty(Base):
    """Academic faculty owning a set of courses."""

    __tablename__ = "faculty"

    id = Column(Integer, primary_key=True, autoincrement=True)
    faculty_name = Column(String(150), nullable=False, unique=True)
    office_address = Column(Text)
    description = Column(Text)

    courses = relationship("Course", back_populates="faculty")


class Course(Base):
    """Degree programme offered by a faculty."""

    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("credits > 0", name="courses_credits_positive"),
        CheckConstraint("number_of_modules > 0", name="courses_modules_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    faculty_id = Column(Integer, ForeignKey("faculty.id"))
    course_name = Column(String(200), nullable=False)
    credits = Column(Integer, nullable=False)
    number_of_modules = Column(Integer, nullable=False)
    course_code = Column(String(20), nullable=False, unique=True)

    faculty = relationship("Faculty", back_populates="courses")

    @property
    def faculty_name(self):
        return self.faculty.faculty_name if self.faculty else None


class Module(Base):
    """Teachable unit that classes are scheduled for."""

    __tablename__ = "modules"
    __table_args__ = (
        CheckConstraint("credits > 0", name="modules_credits_positive"),
        CheckConstraint("module_cost >= 0", name="modules_cost_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    module_name = Column(String(200), nullable=False)
    module_code = Column(String(20), nullable=False, unique=True)
    credits = Column(Integer, nullable=False)
    module_cost = Column(Numeric(10, 2))
