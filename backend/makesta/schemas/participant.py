"""Participant Schemas — biographical profile and the joined listing row."""

from datetime import datetime

from makesta.schemas.base import CamelModel, UserSummary, summarize


class ParticipantProfile(CamelModel):
    id: int
    user_id: int
    birth_place: str
    address: str
    elementary_school: str
    junior_high_school: str | None = None
    senior_high_school: str | None = None
    purpose: str
    organization_experience: str | None = None
    interests: str
    talents: str
    motto: str | None = None
    created_at: datetime | None = None


class ParticipantResponse(ParticipantProfile):
    user: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "ParticipantResponse":
        resp = cls.model_validate(row.entity)
        resp.user = summarize(row.owner)
        return resp
