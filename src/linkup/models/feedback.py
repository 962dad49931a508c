"""Notifications and ratings, both addressed to or from exactly one principal."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..core.sessions import PrincipalKind
from ..utils.datetime import utcnow


def _principal_kind_column(name: str) -> SAEnum:
    return SAEnum(
        PrincipalKind,
        name=name,
        native_enum=False,
        length=10,
        values_callable=lambda members: [member.value for member in members],
    )


class Notification(Base):
    """Pull-only notification for one student or one admin."""

    __tablename__ = "notifications"
    __table_args__ = (
        CheckConstraint(
            "(target_type = 'student' AND target_student IS NOT NULL AND target_admin IS NULL) "
            "OR (target_type = 'admin' AND target_admin IS NOT NULL AND target_student IS NULL)",
            name="notifications_single_target",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    target_type = Column(_principal_kind_column("notification_target_type"), nullable=False)
    target_student = Column(String(9), ForeignKey("students.student_number"), index=True)
    target_admin = Column(Integer, ForeignKey("admin.admin_id"), index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)


class Rating(Base):
    """Platform rating submitted by either a student or an admin."""

    __tablename__ = "ratings"
    __table_args__ = (
        CheckConstraint("rating_value >= 0 AND rating_value <= 5", name="ratings_value_range"),
        CheckConstraint(
            "(rator_type = 'student' AND rator_student IS NOT NULL AND rator_admin IS NULL) "
            "OR (rator_type = 'admin' AND rator_admin IS NOT NULL AND rator_student IS NULL)",
            name="ratings_single_rator",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    rator_type = Column(_principal_kind_column("rating_rator_type"), nullable=False)
    rator_student = Column(String(9), ForeignKey("students.student_number"))
    rator_admin = Column(Integer, ForeignKey("admin.admin_id"))
    rating_date = Column(DateTime, default=utcnow, nullable=False)
    rating_value = Column(Integer, nullable=False)
    rating_description = Column(Text)

    student = relationship("Student")
    admin = relationship("Admin")

    @property
    def student_name(self):
        return self.student.name if self.student else None

    @property
    def student_surname(self):
        return self.student.surname if self.student else None

    @property
    def admin_name(self):
        return self.admin.name if self.admin else None

    @property
    def admin_surname(self):
        return self.admin.surname if self.admin else None
