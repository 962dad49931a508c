"""Framework-independent authorization predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .errors import Unauthenticated
from .sessions import PrincipalKind, SessionStore

TOKEN_HEADERS = ("authorization", "session-id")


@dataclass(frozen=True)
class Authorized:
    kind: PrincipalKind
    principal: Dict[str, Any]
    token: str


@dataclass(frozen=True)
class Denied:
    reason: str


AuthResult = Union[Authorized, Denied]


def extract_token(headers: Mapping[str, str]) -> Optional[str]:
    """Return the first non-empty token among the accepted headers."""

    for name in TOKEN_HEADERS:
        value = headers.get(name)
        if value:
            return value.strip() or None
    return None


def authorize(store: SessionStore, kind: PrincipalKind, headers: Mapping[str, str]) -> AuthResult:
    """Resolve the presented token against the ``kind`` namespace only."""

    token = extract_token(headers)
    if token is None:
        return Denied("Session ID required")
    try:
        principal = store.resolve(token, kind)
    except Unauthenticated as exc:
        return Denied(exc.detail)
    return Authorized(kind=PrincipalKind(kind), principal=principal, token=token)
