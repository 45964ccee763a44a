"""Participant ORM — biographical profile created together with its User at registration.

Invariants:
    - Exactly one per participant User (user_id unique)
    - Never created on its own: see UserRepository.register
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from makesta.db.base import Base, utcnow


class Participant(Base):
    __tablename__ = "participants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, unique=True,
    )
    birth_place: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    # Education history
    elementary_school: Mapped[str] = mapped_column(String(200), nullable=False)
    junior_high_school: Mapped[str | None] = mapped_column(String(200), nullable=True)
    senior_high_school: Mapped[str | None] = mapped_column(String(200), nullable=True)

    purpose: Mapped[str] = mapped_column(Text, nullable=False)
    organization_experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    interests: Mapped[str] = mapped_column(Text, nullable=False)
    talents: Mapped[str] = mapped_column(Text, nullable=False)
    motto: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
