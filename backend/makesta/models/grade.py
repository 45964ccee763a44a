"""Grade ORM — three integer scores for a participant.

Invariants:
    - Each score is null or within [0, 100] (route validation + check constraints)
    - updated_at refreshed on every mutation
    - Multiple rows per participant are allowed by the schema
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from makesta.db.base import Base, utcnow


class Grade(Base):
    __tablename__ = "grades"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    participant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    assignment_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    exam_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    final_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    __table_args__ = tuple(
        CheckConstraint(
            f"{col} IS NULL OR ({col} >= 0 AND {col} <= 100)",
            name=f"ck_grades_{col}_range",
        )
        for col in ("assignment_score", "exam_score", "final_score")
    )
