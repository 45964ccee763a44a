"""AttendanceRecord ORM — one participant's check-in for one session.

Invariants:
    - Belongs to exactly one AttendanceSession and one participant User
    - status is present | absent | late
    - Closing the session leaves existing records untouched
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from makesta.db.base import Base, utcnow


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    session_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("attendance_sessions.id"), nullable=False, index=True,
    )
    participant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    check_in_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "status IN ('present', 'absent', 'late')",
            name="ck_attendance_records_status",
        ),
    )
