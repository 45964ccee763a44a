"""Grade Repository — participant scores.

Invariants:
    - No range validation here; the route schema rejects scores outside [0, 100]
    - update() refreshes updated_at and returns None for a missing id
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.db.base import utcnow
from makesta.models.grade import Grade
from makesta.models.user import User
from makesta.repositories.owned import Owned, owned_rows

_SCORE_FIELDS = ("assignment_score", "exam_score", "final_score")


class GradeRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> list[Owned[Grade]]:
        result = await self._db.execute(
            select(Grade, User)
            .outerjoin(User, User.id == Grade.participant_id)
            .order_by(Grade.created_at.desc(), Grade.id.desc()),
        )
        return owned_rows(result.all())

    async def get(self, grade_id: int) -> Grade | None:
        return await self._db.get(Grade, grade_id)

    async def get_with_participant(self, grade_id: int) -> Owned[Grade] | None:
        result = await self._db.execute(
            select(Grade, User)
            .outerjoin(User, User.id == Grade.participant_id)
            .where(Grade.id == grade_id),
        )
        row = result.first()
        return Owned(entity=row[0], owner=row[1]) if row else None

    async def create(
        self,
        participant_id: int,
        assignment_score: int | None = None,
        exam_score: int | None = None,
        final_score: int | None = None,
    ) -> Grade:
        now = utcnow()
        grade = Grade(
            participant_id=participant_id,
            assignment_score=assignment_score,
            exam_score=exam_score,
            final_score=final_score,
            created_at=now,
            updated_at=now,
        )
        self._db.add(grade)
        await self._db.commit()
        await self._db.refresh(grade)
        return grade

    async def update(self, grade_id: int, **scores: int | None) -> Grade | None:
        grade = await self._db.get(Grade, grade_id)
        if grade is None:
            return None
        for name, value in scores.items():
            if name not in _SCORE_FIELDS:
                raise ValueError(f"unknown grade field: {name}")
            setattr(grade, name, value)
        grade.updated_at = utcnow()
        await self._db.commit()
        await self._db.refresh(grade)
        return grade
