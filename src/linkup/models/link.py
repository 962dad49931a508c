"""Mutual connection between two students."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.datetime import utcnow


class Link(Base):
    """Undirected link; ``connector`` is whoever asked, ``acceptor`` the other side.

    The store only guarantees the ordered pair is unique; the reversed pair is
    rejected by ``link_service.create_link``.
    """

    __tablename__ = "links"
    __table_args__ = (
        CheckConstraint("connector <> acceptor", name="links_not_self"),
        UniqueConstraint("connector", "acceptor", name="links_pair_unique"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    connector = Column(String(9), ForeignKey("students.student_number"), nullable=False, index=True)
    acceptor = Column(String(9), ForeignKey("students.student_number"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    connector_student = relationship("Student", foreign_keys=[connector])
    acceptor_student = relationship("Student", foreign_keys=[acceptor])

    @property
    def connector_name(self):
        return self.connector_student.name if self.connector_student else None

    @property
    def connector_surname(self):
        return self.connector_student.surname if self.connector_student else None

    @property
    def acceptor_name(self):
        return self.acceptor_student.name if self.acceptor_student else None

    @property
    def acceptor_surname(self):
        return self.acceptor_student.surname if self.acceptor_student else None

    def involves(self, student_number: str) -> bool:
        return student_number in (self.connector, self.acceptor)
