"""Schema base classes — camelCase aliasing and ORM attribute loading."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from makesta.core.domain_types import Role


class CamelModel(BaseModel):
    """Response base: reads ORM attributes, serializes camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class CamelRequest(BaseModel):
    """Request base: accepts camelCase or snake_case, strips strings."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True,
    )


class UserSummary(CamelModel):
    """Owner User nested inside joined responses."""
    id: int
    username: str
    full_name: str
    email: str
    phone: str
    role: Role
    created_at: datetime | None = None


class MessageResponse(CamelModel):
    message: str


def summarize(owner) -> UserSummary | None:
    return UserSummary.model_validate(owner) if owner is not None else None
