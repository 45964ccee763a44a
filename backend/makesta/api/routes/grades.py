"""Grade Routes — organizer-only score management.

Invariants:
    - Scores outside [0, 100] are rejected with 400 before reaching the repository
    - The graded user must exist (404) and hold the participant role (400)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import require_roles
from makesta.core.domain_types import ORGANIZER_ONLY
from makesta.core.errors import ResourceNotFoundError
from makesta.infrastructure.database import get_db
from makesta.repositories.grades import GradeRepository
from makesta.repositories.users import UserRepository
from makesta.schemas.grade import GradeCreate, GradeResponse, GradeUpdate

router = APIRouter(
    prefix="/api/v1/grades", tags=["grades"],
    dependencies=[Depends(require_roles(*ORGANIZER_ONLY))],
)


@router.get("", response_model=list[GradeResponse])
async def list_grades(db: AsyncSession = Depends(get_db)):
    rows = await GradeRepository(db).list()
    return [GradeResponse.from_owned(row) for row in rows]


@router.post(
    "", response_model=GradeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_grade(body: GradeCreate, db: AsyncSession = Depends(get_db)):
    await UserRepository(db).get_participant(body.participant_id)

    repo = GradeRepository(db)
    grade = await repo.create(
        participant_id=body.participant_id,
        assignment_score=body.assignment_score,
        exam_score=body.exam_score,
        final_score=body.final_score,
    )
    return GradeResponse.from_owned(await repo.get_with_participant(grade.id))


@router.patch("/{grade_id}", response_model=GradeResponse)
async def update_grade(
    grade_id: int, body: GradeUpdate, db: AsyncSession = Depends(get_db),
):
    repo = GradeRepository(db)
    if await repo.update(grade_id, **body.changes()) is None:
        raise ResourceNotFoundError("Grade", grade_id)
    return GradeResponse.from_owned(await repo.get_with_participant(grade_id))
