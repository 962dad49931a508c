"""Service-level error taxonomy shared by every domain service."""

from __future__ import annotations


class ServiceError(Exception):
    """Raised when a request cannot be honoured; carries the HTTP status to report."""

    status_code = 500

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class InvalidRequest(ServiceError):
    """Malformed input, e.g. self-linking or blank comment content."""

    status_code = 400


class Unauthenticated(ServiceError):
    """Missing, unknown or expired session token, or bad credentials."""

    status_code = 401


class Forbidden(ServiceError):
    """Valid session, but the principal does not own the resource."""

    status_code = 403


class NotFound(ServiceError):
    status_code = 404


class Conflict(ServiceError):
    """Uniqueness violation."""

    status_code = 409


class Internal(ServiceError):
    status_code = 500
