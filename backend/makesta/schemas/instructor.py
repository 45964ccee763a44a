"""Instructor Schemas — promotion request, partial update, responses."""

from datetime import datetime

from pydantic import Field, model_validator

from makesta.core.domain_types import InstructorStatus
from makesta.schemas.base import CamelModel, CamelRequest, UserSummary, summarize


class InstructorCreate(CamelRequest):
    user_id: int = Field(gt=0)
    specialization: str = Field(min_length=1, max_length=200)
    cv: str | None = None


class InstructorUpdate(CamelRequest):
    specialization: str | None = Field(None, min_length=1, max_length=200)
    cv: str | None = None
    status: InstructorStatus | None = None

    @model_validator(mode="after")
    def require_some_field(self):
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        if "specialization" in self.model_fields_set and self.specialization is None:
            raise ValueError("specialization cannot be null")
        if "status" in self.model_fields_set and self.status is None:
            raise ValueError("status cannot be null")
        return self

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if "status" in data:
            data["status"] = data["status"].value
        return data


class InstructorProfile(CamelModel):
    id: int
    user_id: int
    specialization: str
    cv: str | None = None
    status: InstructorStatus
    created_at: datetime | None = None


class InstructorResponse(InstructorProfile):
    user: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "InstructorResponse":
        resp = cls.model_validate(row.entity)
        resp.user = summarize(row.owner)
        return resp
