"""Request Dependencies — authentication, role gating, and app-scoped services.

Invariants:
    - get_current_identity runs before any handler logic on protected routes
    - Missing bearer token -> UnauthenticatedError (401);
      bad/expired token -> InvalidTokenError (401); wrong role -> ForbiddenError (403)
    - TokenIssuer, MaterialFileStore and AttendancePolicy are built once in the
      lifespan and read from app.state (never from module globals)

Design Decisions:
    - HTTPBearer(auto_error=False): we raise our own errors so every failure
      goes through the MakestaError handler and shares one JSON shape
"""

from collections.abc import Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from makesta.core.attendance_rules import AttendancePolicy
from makesta.core.authorization import authorize
from makesta.core.domain_types import Identity, Role
from makesta.core.errors import UnauthenticatedError
from makesta.core.token_issuer import TokenIssuer
from makesta.infrastructure.file_store import MaterialFileStore

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_file_store(request: Request) -> MaterialFileStore:
    return request.app.state.file_store


def get_attendance_policy(request: Request) -> AttendancePolicy:
    return request.app.state.attendance_policy


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Identity:
    """Authenticate the request from its `Authorization: Bearer <token>` header."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    return issuer.verify(credentials.credentials)


def require_roles(*roles: Role) -> Callable:
    """Build a dependency that authenticates and then checks role membership."""
    allowed = frozenset(roles)

    async def _guard(
        identity: Identity = Depends(get_current_identity),
    ) -> Identity:
        return authorize(identity, allowed)

    return _guard
