"""Participant Routes — staff view of registered participants."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import require_roles
from makesta.core.domain_types import STAFF_ROLES
from makesta.infrastructure.database import get_db
from makesta.repositories.participants import ParticipantRepository
from makesta.schemas.participant import ParticipantResponse

router = APIRouter(prefix="/api/v1/participants", tags=["participants"])


@router.get(
    "", response_model=list[ParticipantResponse],
    dependencies=[Depends(require_roles(*STAFF_ROLES))],
)
async def list_participants(db: AsyncSession = Depends(get_db)):
    rows = await ParticipantRepository(db).list()
    return [ParticipantResponse.from_owned(row) for row in rows]
