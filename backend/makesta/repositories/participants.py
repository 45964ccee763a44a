"""Participant Repository — read side of participant profiles."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.models.participant import Participant
from makesta.models.user import User
from makesta.repositories.owned import Owned, owned_rows


class ParticipantRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> list[Owned[Participant]]:
        result = await self._db.execute(
            select(Participant, User)
            .outerjoin(User, User.id == Participant.user_id)
            .order_by(Participant.created_at.desc(), Participant.id.desc()),
        )
        return owned_rows(result.all())

    async def get_by_user_id(self, user_id: int) -> Participant | None:
        result = await self._db.execute(
            select(Participant).where(Participant.user_id == user_id),
        )
        return result.scalar_one_or_none()
