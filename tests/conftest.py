import os

# Settings are read once per process, so the overrides must land before linkup is imported.
os.environ["LINKUP_DATABASE_URL"] = "sqlite://"
os.environ["LINKUP_BCRYPT_ROUNDS"] = "4"
os.environ["LINKUP_BOOTSTRAP_ON_STARTUP"] = "false"
os.environ["LINKUP_SESSION_PURGE_ENABLED"] = "false"

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from linkup.core.database import Base, get_db
from linkup.core.sessions import SessionStore, get_session_store
from linkup.main import app
from linkup.services.bootstrap_service import ensure_admin

ADMIN_EMAIL = "admin@jsjlinkup.com"
ADMIN_PASSWORD = "admin123"


class FakeClock:
    """Manually advanced UTC clock for session expiry tests."""

    def __init__(self, start=None):
        self.now = start or datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(ttl=timedelta(hours=24), clock=clock)


@pytest.fixture
def client(session_factory, store):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a student through the API and return the response."""

    def _register(student_number, email, password="s3cret", **extra):
        payload = {
            "student_number": student_number,
            "name": extra.pop("name", "Student"),
            "surname": extra.pop("surname", student_number[-3:]),
            "email": email,
            "password": password,
        }
        payload.update(extra)
        return client.post("/api/v1/register", json=payload)

    return _register


@pytest.fixture
def student_headers(client, register):
    """Register and log in a student, returning ready-to-use auth headers."""

    def _login(student_number, email=None, password="s3cret", **extra):
        email = email or f"s{student_number}@x.com"
        assert register(student_number, email, password, **extra).status_code == 201
        response = client.post("/api/v1/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return {"authorization": response.json()["sessionId"]}

    return _login


@pytest.fixture
def admin_headers(client, db):
    ensure_admin(db, email=ADMIN_EMAIL, password=ADMIN_PASSWORD)
    db.commit()
    response = client.post("/api/v1/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"authorization": response.json()["sessionId"]}
