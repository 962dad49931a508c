from datetime import timedelta

import pytest

from linkup.core.errors import Unauthenticated
from linkup.core.guards import Authorized, Denied, authorize, extract_token
from linkup.core.sessions import PrincipalKind, SessionStore
from linkup.jobs.session_purge import run_purge_once
from linkup.services.session_purge_service import run_session_purge

STUDENT = {"student_number": "123456789", "email": "a@x.com"}
ADMIN = {"admin_id": 1, "email": "admin@jsjlinkup.com"}


def test_issue_and_resolve_student_session(store):
    token = store.issue(PrincipalKind.STUDENT, STUDENT)

    assert token.startswith("student_")
    assert store.resolve(token, PrincipalKind.STUDENT) == STUDENT


def test_tokens_are_unique(store):
    tokens = {store.issue(PrincipalKind.STUDENT, STUDENT) for _ in range(20)}
    assert len(tokens) == 20


def test_namespaces_are_disjoint(store):
    student_token = store.issue(PrincipalKind.STUDENT, STUDENT)
    admin_token = store.issue(PrincipalKind.ADMIN, ADMIN)

    with pytest.raises(Unauthenticated) as excinfo:
        store.resolve(student_token, PrincipalKind.ADMIN)
    assert excinfo.value.detail == "Invalid admin session"

    with pytest.raises(Unauthenticated) as excinfo:
        store.resolve(admin_token, PrincipalKind.STUDENT)
    assert excinfo.value.detail == "Invalid session"


def test_session_expires_after_ttl(store, clock):
    token = store.issue(PrincipalKind.STUDENT, STUDENT)

    clock.advance(hours=23, minutes=59, seconds=59)
    assert store.resolve(token, PrincipalKind.STUDENT)["student_number"] == "123456789"

    clock.advance(seconds=1)
    with pytest.raises(Unauthenticated):
        store.resolve(token, PrincipalKind.STUDENT)
    assert store.active_count(PrincipalKind.STUDENT) == 0


def test_resolve_does_not_extend_expiry(store, clock):
    token = store.issue(PrincipalKind.STUDENT, STUDENT)
    for _ in range(3):
        clock.advance(hours=6)
        store.resolve(token, PrincipalKind.STUDENT)

    clock.advance(hours=6)
    with pytest.raises(Unauthenticated):
        store.resolve(token, PrincipalKind.STUDENT)


def test_custom_ttl(clock):
    store = SessionStore(ttl=timedelta(minutes=5), clock=clock)
    token = store.issue(PrincipalKind.ADMIN, ADMIN)
    clock.advance(minutes=5)

    with pytest.raises(Unauthenticated):
        store.resolve(token, PrincipalKind.ADMIN)


def test_revoke_is_idempotent(store):
    token = store.issue(PrincipalKind.ADMIN, ADMIN)

    store.revoke(token)
    store.revoke(token)
    store.revoke("never-issued")

    with pytest.raises(Unauthenticated):
        store.resolve(token, PrincipalKind.ADMIN)


def test_revoke_principal_only_drops_that_student(store):
    first = store.issue(PrincipalKind.STUDENT, STUDENT)
    second = store.issue(PrincipalKind.STUDENT, STUDENT)
    other = store.issue(PrincipalKind.STUDENT, {"student_number": "987654321"})

    assert store.revoke_principal(PrincipalKind.STUDENT, "student_number", "123456789") == 2
    for token in (first, second):
        with pytest.raises(Unauthenticated):
            store.resolve(token, PrincipalKind.STUDENT)
    assert store.resolve(other, PrincipalKind.STUDENT)["student_number"] == "987654321"


def test_resolved_snapshot_is_a_copy(store):
    token = store.issue(PrincipalKind.STUDENT, STUDENT)
    store.resolve(token, PrincipalKind.STUDENT)["student_number"] = "000000000"

    assert store.resolve(token, PrincipalKind.STUDENT)["student_number"] == "123456789"


def test_purge_removes_only_expired_sessions(store, clock):
    store.issue(PrincipalKind.STUDENT, STUDENT)
    store.issue(PrincipalKind.ADMIN, ADMIN)
    clock.advance(hours=12)
    fresh = store.issue(PrincipalKind.STUDENT, STUDENT)
    clock.advance(hours=12)

    summary = run_session_purge(store)

    assert summary == {"expired_removed": 2, "student_sessions": 1, "admin_sessions": 0}
    assert store.resolve(fresh, PrincipalKind.STUDENT) == STUDENT


def test_extract_token_prefers_authorization_header():
    assert extract_token({"authorization": "a", "session-id": "b"}) == "a"
    assert extract_token({"session-id": "b"}) == "b"
    assert extract_token({}) is None


def test_authorize_without_token_is_denied(store):
    assert authorize(store, PrincipalKind.STUDENT, {}) == Denied("Session ID required")


def test_authorize_uses_matching_namespace(store):
    token = store.issue(PrincipalKind.STUDENT, STUDENT)

    result = authorize(store, PrincipalKind.STUDENT, {"session-id": token})
    assert isinstance(result, Authorized)
    assert result.principal == STUDENT

    assert authorize(store, PrincipalKind.ADMIN, {"session-id": token}) == Denied("Invalid admin session")


def test_run_purge_once_uses_process_store():
    summary = run_purge_once()

    assert summary["expired_removed"] == 0
    assert set(summary) == {"expired_removed", "student_sessions", "admin_sessions"}
