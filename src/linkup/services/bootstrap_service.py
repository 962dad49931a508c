"""Schema creation and first-run seed data."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..core.database import Base
from ..core.security import hash_password
from ..models import Admin, Campus, Course, Faculty, Module
from .common import count_rows

logger = logging.getLogger(__name__)

CAMPUSES = [
    ("Main Campus", "123 University Ave, Johannesburg", Decimal("50.5")),
    ("City Campus", "456 Downtown St, Johannesburg", Decimal("25.3")),
    ("Science Campus", "789 Research Park, Johannesburg", Decimal("35.7")),
]

FACULTIES = [
    ("Faculty of Science", "Science Building, Room 101", "Science and Technology programs"),
    ("Faculty of Arts", "Arts Building, Room 201", "Humanities and Arts programs"),
    ("Faculty of Engineering", "Engineering Building, Room 301", "Engineering and Technology programs"),
    ("Faculty of Business", "Business Building, Room 401", "Business and Management programs"),
]

# (faculty name, course name, credits, modules, code)
COURSES = [
    ("Faculty of Science", "Computer Science", 120, 8, "CS101"),
    ("Faculty of Science", "Information Technology", 120, 8, "IT101"),
    ("Faculty of Arts", "Business Administration", 120, 8, "BA101"),
    ("Faculty of Engineering", "Electrical Engineering", 140, 10, "EE101"),
    ("Faculty of Business", "Accounting", 120, 8, "ACC101"),
]

MODULES = [
    ("Introduction to Programming", "CS101", 15, Decimal("1500.00")),
    ("Database Systems", "CS102", 15, Decimal("1600.00")),
    ("Web Development", "CS103", 15, Decimal("1700.00")),
    ("Business Management", "BA101", 15, Decimal("1400.00")),
    ("Financial Accounting", "ACC101", 15, Decimal("1550.00")),
]


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def seed_reference_data(session: Session) -> bool:
    """Insert the sample catalogue when no campus exists yet. Returns whether it seeded."""

    if count_rows(session, Campus):
        return False

    session.add_all(Campus(campus_name=n, location=loc, campus_size=size) for n, loc, size in CAMPUSES)
    faculties = {name: Faculty(faculty_name=name, office_address=addr, description=desc) for name, addr, desc in FACULTIES}
    session.add_all(faculties.values())
    session.add_all(
        Course(faculty=faculties[faculty], course_name=name, credits=credits, number_of_modules=modules, course_code=code)
        for faculty, name, credits, modules, code in COURSES
    )
    session.add_all(
        Module(module_name=name, module_code=code, credits=credits, module_cost=cost) for name, code, credits, cost in MODULES
    )
    session.flush()
    return True


def ensure_admin(session: Session, *, email: str, password: str) -> Admin:
    """Create the default administrator unless one with ``email`` exists."""

    admin = session.execute(select(Admin).where(Admin.email == email)).scalar_one_or_none()
    if admin is None:
        admin = Admin(email=email, password_hash=hash_password(password), name="System", surname="Administrator")
        session.add(admin)
        session.flush()
        logger.info("seeded default admin %s", email)
    return admin


def bootstrap(engine: Engine, session: Session, *, admin_email: str, admin_password: str) -> None:
    create_schema(engine)
    if seed_reference_data(session):
        logger.info("seeded reference catalogue")
    ensure_admin(session, email=admin_email, password=admin_password)
