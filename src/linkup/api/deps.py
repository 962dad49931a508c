"""Request-scoped dependencies: authentication guards."""

from __future__ import annotations

from typing import Any, Callable, Dict

from fastapi import Depends, HTTPException, Request, status

from ..core.guards import Denied, authorize
from ..core.sessions import PrincipalKind, SessionStore, get_session_store

Principal = Dict[str, Any]


def _guard(kind: PrincipalKind) -> Callable[..., Principal]:
    def dependency(request: Request, store: SessionStore = Depends(get_session_store)) -> Principal:
        result = authorize(store, kind, request.headers)
        if isinstance(result, Denied):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.reason)
        request.state.principal = result.principal
        request.state.principal_kind = result.kind
        return result.principal

    dependency.__name__ = f"require_{kind.value}"
    return dependency


require_student = _guard(PrincipalKind.STUDENT)
require_admin = _guard(PrincipalKind.ADMIN)
