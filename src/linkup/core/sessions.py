"""In-memory session store for student and admin principals.

Sessions live only in this process. Each principal kind has its own namespace,
so a token issued to a student never resolves as an admin session and vice
versa. Expiry is checked lazily on :meth:`SessionStore.resolve`; the optional
purge job only frees memory held by tokens that are never presented again.
"""

from __future__ import annotations

import enum
import logging
import secrets
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Mapping

from .config import get_settings
from .errors import Unauthenticated

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class PrincipalKind(str, enum.Enum):
    """Kinds of authenticated actors."""

    STUDENT = "student"
    ADMIN = "admin"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SessionRecord:
    """Principal snapshot captured at login."""

    kind: PrincipalKind
    identity: Mapping[str, Any]
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass
class SessionStore:
    """Thread-safe token registry exposing issue/resolve/revoke."""

    ttl: timedelta = timedelta(hours=24)
    clock: Clock = _utcnow
    _namespaces: Dict[PrincipalKind, Dict[str, SessionRecord]] = field(default_factory=dict, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self._namespaces = {kind: {} for kind in PrincipalKind}

    def issue(self, kind: PrincipalKind, identity: Mapping[str, Any]) -> str:
        """Store ``identity`` under a fresh token in the ``kind`` namespace."""

        kind = PrincipalKind(kind)
        now = self.clock()
        token = f"{kind.value}_{time.time_ns()}_{secrets.token_urlsafe(9)}"
        record = SessionRecord(kind=kind, identity=dict(identity), issued_at=now, expires_at=now + self.ttl)
        with self._lock:
            self._namespaces[kind][token] = record
        logger.info("issued %s session expiring at %s", kind.value, record.expires_at.isoformat())
        return token

    def resolve(self, token: str, kind: PrincipalKind) -> Dict[str, Any]:
        """Return the identity snapshot behind ``token`` or raise ``Unauthenticated``."""

        kind = PrincipalKind(kind)
        now = self.clock()
        with self._lock:
            namespace = self._namespaces[kind]
            record = namespace.get(token)
            if record is not None and record.is_expired(now):
                del namespace[token]
                record = None
        if record is None:
            raise Unauthenticated("Invalid admin session" if kind is PrincipalKind.ADMIN else "Invalid session")
        return dict(record.identity)

    def revoke(self, token: str) -> None:
        """Remove ``token`` from both namespaces. Unknown tokens are ignored."""

        with self._lock:
            for namespace in self._namespaces.values():
                namespace.pop(token, None)

    def revoke_principal(self, kind: PrincipalKind, key: str, value: Any) -> int:
        """Drop every session of the principal whose ``identity[key] == value``."""

        kind = PrincipalKind(kind)
        with self._lock:
            namespace = self._namespaces[kind]
            doomed = [token for token, record in namespace.items() if record.identity.get(key) == value]
            for token in doomed:
                del namespace[token]
        return len(doomed)

    def purge_expired(self) -> int:
        """Delete expired sessions from every namespace and return how many went."""

        now = self.clock()
        removed = 0
        with self._lock:
            for namespace in self._namespaces.values():
                expired = [token for token, record in namespace.items() if record.is_expired(now)]
                for token in expired:
                    del namespace[token]
                removed += len(expired)
        return removed

    def active_count(self, kind: PrincipalKind) -> int:
        with self._lock:
            return len(self._namespaces[PrincipalKind(kind)])


_store: SessionStore | None = None
_store_lock = threading.Lock()


def get_session_store() -> SessionStore:
    """Return the process-wide session store, creating it from settings on first use."""

    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = SessionStore(ttl=timedelta(hours=get_settings().session_ttl_hours))
    return _store
