"""Attendance Schemas — sessions and check-in records."""

from datetime import datetime

from pydantic import Field

from makesta.core.domain_types import AttendanceStatus
from makesta.schemas.base import CamelModel, CamelRequest, UserSummary, summarize


class AttendanceSessionCreate(CamelRequest):
    title: str = Field(min_length=1, max_length=300)
    description: str | None = None


class AttendanceSessionResponse(CamelModel):
    id: int
    title: str
    description: str | None = None
    instructor_id: int
    is_active: bool
    created_at: datetime | None = None
    closed_at: datetime | None = None
    instructor: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "AttendanceSessionResponse":
        resp = cls.model_validate(row.entity)
        resp.instructor = summarize(row.owner)
        return resp


class AttendanceRecordCreate(CamelRequest):
    session_id: int = Field(gt=0)
    # Ignored for participants (self check-in); required for staff
    participant_id: int | None = Field(None, gt=0)
    status: AttendanceStatus = AttendanceStatus.PRESENT
    notes: str | None = None


class AttendanceRecordResponse(CamelModel):
    id: int
    session_id: int
    participant_id: int
    status: AttendanceStatus
    check_in_time: datetime | None = None
    notes: str | None = None
    participant: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "AttendanceRecordResponse":
        resp = cls.model_validate(row.entity)
        resp.participant = summarize(row.owner)
        return resp
