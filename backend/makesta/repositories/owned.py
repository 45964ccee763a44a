"""Owned — a joined row: an entity plus the User that owns it."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from makesta.models.user import User

T = TypeVar("T")


@dataclass(frozen=True)
class Owned(Generic[T]):
    entity: T
    owner: User | None


def owned_rows(rows) -> list[Owned]:
    """Convert (entity, user) result tuples into Owned values."""
    return [Owned(entity=entity, owner=owner) for entity, owner in rows]
