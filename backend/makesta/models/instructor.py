"""Instructor ORM — profile attached to a User promoted by an organizer.

Invariants:
    - At most one per User (user_id unique)
    - status is active | inactive, default active
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from makesta.core.domain_types import InstructorStatus
from makesta.db.base import Base, utcnow


class Instructor(Base):
    __tablename__ = "instructors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, unique=True,
    )
    specialization: Mapped[str] = mapped_column(String(200), nullable=False)
    cv: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=InstructorStatus.ACTIVE.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'inactive')", name="ck_instructors_status",
        ),
    )
