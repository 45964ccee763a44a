"""Instructor Routes — organizer-only management of instructor profiles.

Invariants:
    - POST promotes an existing user: 404 if the user is missing, 400 if the
      user is already an instructor or is an organizer
    - DELETE reverts the user's role to participant
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import require_roles
from makesta.core.domain_types import ORGANIZER_ONLY, Identity
from makesta.core.errors import ResourceNotFoundError
from makesta.infrastructure.database import get_db
from makesta.repositories.instructors import InstructorRepository
from makesta.repositories.owned import Owned
from makesta.repositories.users import UserRepository
from makesta.schemas.base import MessageResponse
from makesta.schemas.instructor import (
    InstructorCreate, InstructorResponse, InstructorUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/instructors", tags=["instructors"])

organizer_only = require_roles(*ORGANIZER_ONLY)


@router.get(
    "", response_model=list[InstructorResponse],
    dependencies=[Depends(organizer_only)],
)
async def list_instructors(db: AsyncSession = Depends(get_db)):
    rows = await InstructorRepository(db).list()
    return [InstructorResponse.from_owned(row) for row in rows]


@router.post(
    "", response_model=InstructorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_instructor(
    body: InstructorCreate,
    identity: Identity = Depends(organizer_only),
    db: AsyncSession = Depends(get_db),
):
    users = UserRepository(db)
    if await users.get_by_id(body.user_id) is None:
        raise ResourceNotFoundError("User", body.user_id)

    instructor = await InstructorRepository(db).create(
        user_id=body.user_id,
        specialization=body.specialization,
        cv=body.cv,
    )
    logger.info(
        "Instructor created",
        extra={"user_id": identity.user_id},
    )
    owner = await users.get_by_id(instructor.user_id)
    return InstructorResponse.from_owned(Owned(instructor, owner))


@router.patch(
    "/{instructor_id}", response_model=InstructorResponse,
    dependencies=[Depends(organizer_only)],
)
async def update_instructor(
    instructor_id: int,
    body: InstructorUpdate,
    db: AsyncSession = Depends(get_db),
):
    instructor = await InstructorRepository(db).update(
        instructor_id, **body.changes(),
    )
    if instructor is None:
        raise ResourceNotFoundError("Instructor", instructor_id)
    owner = await UserRepository(db).get_by_id(instructor.user_id)
    return InstructorResponse.from_owned(Owned(instructor, owner))


@router.delete(
    "/{instructor_id}", response_model=MessageResponse,
    dependencies=[Depends(organizer_only)],
)
async def delete_instructor(instructor_id: int, db: AsyncSession = Depends(get_db)):
    if not await InstructorRepository(db).delete(instructor_id):
        raise ResourceNotFoundError("Instructor", instructor_id)
    return MessageResponse(message="Instructor deleted")
