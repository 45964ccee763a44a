"""Certificate Repository — issuance records.

Invariants:
    - Duplicate certificates (same participant, same type) are allowed
    - Listing is newest issued_at first
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.core.domain_types import CertificateStatus
from makesta.models.certificate import Certificate
from makesta.models.user import User
from makesta.repositories.owned import Owned, owned_rows


class CertificateRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> list[Owned[Certificate]]:
        result = await self._db.execute(
            select(Certificate, User)
            .outerjoin(User, User.id == Certificate.participant_id)
            .order_by(Certificate.issued_at.desc(), Certificate.id.desc()),
        )
        return owned_rows(result.all())

    async def get(self, certificate_id: int) -> Certificate | None:
        return await self._db.get(Certificate, certificate_id)

    async def create(
        self,
        participant_id: int,
        certificate_type: str = "completion",
        notes: str | None = None,
        status: CertificateStatus = CertificateStatus.DRAFT,
    ) -> Certificate:
        certificate = Certificate(
            participant_id=participant_id,
            certificate_type=certificate_type,
            notes=notes,
            status=CertificateStatus(status).value,
        )
        self._db.add(certificate)
        await self._db.commit()
        await self._db.refresh(certificate)
        return certificate

    async def update_status(
        self, certificate_id: int, status: CertificateStatus,
    ) -> Certificate | None:
        certificate = await self._db.get(Certificate, certificate_id)
        if certificate is None:
            return None
        certificate.status = CertificateStatus(status).value
        await self._db.commit()
        await self._db.refresh(certificate)
        return certificate

    async def delete(self, certificate_id: int) -> bool:
        result = await self._db.execute(
            delete(Certificate).where(Certificate.id == certificate_id),
        )
        await self._db.commit()
        return result.rowcount > 0
