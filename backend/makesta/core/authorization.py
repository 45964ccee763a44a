"""Authorization Guard (pure part) — role membership check.

Invariants:
    - The declared allowed-role set is the only access-control mechanism
    - No per-resource ownership checks: any organizer may modify any grade
"""

from collections.abc import Iterable

from makesta.core.domain_types import Identity, Role
from makesta.core.errors import ErrorContext, ForbiddenError


def authorize(identity: Identity, allowed_roles: Iterable[Role]) -> Identity:
    """Return identity unchanged if its role is allowed, else raise ForbiddenError."""
    if identity.role not in frozenset(allowed_roles):
        raise ForbiddenError(
            identity.role.value,
            ErrorContext(user_id=identity.user_id),
        )
    return identity
