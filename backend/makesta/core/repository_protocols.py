"""Boundary Protocols — contracts between core/services and the persistence shell.

Invariants:
    - Core never imports repositories/ — dependency arrows point inward only
    - Implementations live in repositories/ and are injected per request

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Only the seams used outside the route layer are declared here
"""

from typing import Protocol, runtime_checkable

from makesta.core.domain_types import Role


@runtime_checkable
class UserLike(Protocol):
    """Structural contract for User rows handed to services."""
    id: int
    username: str
    role: str


@runtime_checkable
class UserStore(Protocol):
    """Contract for account persistence — implemented by UserRepository."""
    async def get_by_username(self, username: str) -> UserLike | None: ...
    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        role: Role,
        full_name: str,
        email: str,
        phone: str,
    ) -> UserLike: ...
