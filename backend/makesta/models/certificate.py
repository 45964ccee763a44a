"""Certificate ORM — credential record for a participant.

Invariants:
    - status is draft | issued | revoked, default draft
    - issued_at defaults to creation time
    - Several certificates of the same type per participant are permitted (reissue)
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from makesta.core.domain_types import CertificateStatus
from makesta.db.base import Base, utcnow


class Certificate(Base):
    __tablename__ = "certificates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    participant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    certificate_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default="completion",
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CertificateStatus.DRAFT.value,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    file_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    issued_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'issued', 'revoked')",
            name="ck_certificates_status",
        ),
    )
