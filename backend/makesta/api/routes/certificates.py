"""Certificate Routes — organizer-only issuance records.

Invariants:
    - Duplicates per participant and type are accepted (reissue)
    - PATCH changes only the status (draft | issued | revoked)
    - Certificates are issued to participant accounts only (400 otherwise)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import require_roles
from makesta.core.domain_types import ORGANIZER_ONLY
from makesta.core.errors import ResourceNotFoundError
from makesta.infrastructure.database import get_db
from makesta.repositories.certificates import CertificateRepository
from makesta.repositories.owned import Owned
from makesta.repositories.users import UserRepository
from makesta.schemas.base import MessageResponse
from makesta.schemas.certificate import (
    CertificateCreate, CertificateResponse, CertificateUpdate,
)

router = APIRouter(
    prefix="/api/v1/certificates", tags=["certificates"],
    dependencies=[Depends(require_roles(*ORGANIZER_ONLY))],
)


@router.get("", response_model=list[CertificateResponse])
async def list_certificates(db: AsyncSession = Depends(get_db)):
    rows = await CertificateRepository(db).list()
    return [CertificateResponse.from_owned(row) for row in rows]


@router.post(
    "", response_model=CertificateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_certificate(
    body: CertificateCreate, db: AsyncSession = Depends(get_db),
):
    participant = await UserRepository(db).get_participant(body.participant_id)

    certificate = await CertificateRepository(db).create(
        participant_id=body.participant_id,
        certificate_type=body.certificate_type,
        notes=body.notes,
        status=body.status,
    )
    return CertificateResponse.from_owned(Owned(certificate, participant))


@router.patch("/{certificate_id}", response_model=CertificateResponse)
async def update_certificate(
    certificate_id: int,
    body: CertificateUpdate,
    db: AsyncSession = Depends(get_db),
):
    certificate = await CertificateRepository(db).update_status(
        certificate_id, body.status,
    )
    if certificate is None:
        raise ResourceNotFoundError("Certificate", certificate_id)
    participant = await UserRepository(db).get_by_id(certificate.participant_id)
    return CertificateResponse.from_owned(Owned(certificate, participant))


@router.delete("/{certificate_id}", response_model=MessageResponse)
async def delete_certificate(
    certificate_id: int, db: AsyncSession = Depends(get_db),
):
    if not await CertificateRepository(db).delete(certificate_id):
        raise ResourceNotFoundError("Certificate", certificate_id)
    return MessageResponse(message="Certificate deleted")
