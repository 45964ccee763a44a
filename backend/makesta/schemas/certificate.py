"""Certificate Schemas."""

from datetime import datetime

from pydantic import Field

from makesta.core.domain_types import CertificateStatus
from makesta.schemas.base import CamelModel, CamelRequest, UserSummary, summarize


class CertificateCreate(CamelRequest):
    participant_id: int = Field(gt=0)
    certificate_type: str = Field("completion", min_length=1, max_length=50)
    notes: str | None = None
    status: CertificateStatus = CertificateStatus.DRAFT


class CertificateUpdate(CamelRequest):
    status: CertificateStatus


class CertificateResponse(CamelModel):
    id: int
    participant_id: int
    certificate_type: str
    status: CertificateStatus
    notes: str | None = None
    issued_at: datetime | None = None
    participant: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "CertificateResponse":
        resp = cls.model_validate(row.entity)
        resp.participant = summarize(row.owner)
        return resp
