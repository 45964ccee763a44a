"""User ORM — account row shared by all three roles.

Invariants:
    - username and email are unique at the store level (constraint-driven,
      not check-then-insert)
    - role is one of participant | instructor | organizer (check constraint)
    - password_hash only; plaintext never persisted

Design Decisions:
    - Role stored as String + CheckConstraint rather than a DB enum type:
      same DDL on SQLite and PostgreSQL
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from makesta.core.domain_types import Role
from makesta.db.base import Base, utcnow


class User(Base):
    """Account — owns at most one Participant and one Instructor profile."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.PARTICIPANT.value,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    __table_args__ = (
        CheckConstraint(
            "role IN ('participant', 'instructor', 'organizer')",
            name="ck_users_role",
        ),
    )
