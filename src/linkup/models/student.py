"""Student and admin credential models."""

import enum

from sqlalchemy import Column, Enum as SAEnum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base


class YearOfStudy(str, enum.Enum):
    """Accepted study levels."""

    FIRST_YEAR = "first year"
    SECOND_YEAR = "second year"
    THIRD_YEAR = "third year"
    FOURTH_YEAR = "fourth year"
    POSTGRAD = "postgrad"


class Student(Base):
    """Registered student, identified by a nine digit student number."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("email", name="students_email_unique"),
    )

    student_number = Column(String(9), primary_key=True)
    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id"))
    year_of_study = Column(
        SAEnum(
            YearOfStudy,
            name="year_of_study",
            native_enum=False,
            length=20,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=YearOfStudy.FIRST_YEAR,
    )
    faculty_id = Column(Integer, ForeignKey("faculty.id"))
    campus_id = Column(Integer, ForeignKey("campuses.id"))
    phone_number = Column(String(20))

    course = relationship("Course")
    faculty = relationship("Faculty")
    campus = relationship("Campus")

    @property
    def course_name(self):
        return self.course.course_name if self.course else None

    @property
    def faculty_name(self):
        return self.faculty.faculty_name if self.faculty else None

    @property
    def campus_name(self):
        return self.campus.campus_name if self.campus else None


class Admin(Base):
    """Platform administrator; seeded at bootstrap, never self-registered."""

    __tablename__ = "admin"
    __table_args__ = (
        UniqueConstraint("email", name="admin_email_unique"),
    )

    admin_id = Column(Integer, primary_key=True, autoincrement=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
