"""Grade Schemas — score bounds enforced here, at the boundary.

Invariants:
    - Every score is an integer in [0, 100] or omitted/null
    - GradeUpdate applies only the fields that were sent
"""

from datetime import datetime

from pydantic import Field, model_validator

from makesta.core.grading import SCORE_MAX, SCORE_MIN, average_score
from makesta.schemas.base import CamelModel, CamelRequest, UserSummary, summarize


class GradeCreate(CamelRequest):
    participant_id: int = Field(gt=0)
    assignment_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    exam_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    final_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)


class GradeUpdate(CamelRequest):
    assignment_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    exam_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    final_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)

    @model_validator(mode="after")
    def require_some_score(self):
        if not self.model_fields_set:
            raise ValueError("at least one score must be provided")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class GradeResponse(CamelModel):
    id: int
    participant_id: int
    assignment_score: int | None = None
    exam_score: int | None = None
    final_score: int | None = None
    average_score: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    participant: UserSummary | None = None

    @classmethod
    def from_owned(cls, row) -> "GradeResponse":
        grade = row.entity
        resp = cls.model_validate(grade)
        resp.average_score = average_score(
            grade.assignment_score, grade.exam_score, grade.final_score,
        )
        resp.participant = summarize(row.owner)
        return resp
