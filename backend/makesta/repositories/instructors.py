"""Instructor Repository — organizer-driven promotion of users to instructors.

Invariants:
    - create() inserts the profile and sets users.role = instructor in the same commit
    - delete() removes the profile and reverts the role to participant
    - One profile per user (unique user_id); a second one -> AlreadyInstructorError
    - Organizer accounts are never converted
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.core.domain_types import InstructorStatus, Role
from makesta.core.errors import (
    AlreadyInstructorError, ResourceNotFoundError, RoleChangeNotAllowedError,
)
from makesta.models.instructor import Instructor
from makesta.models.user import User
from makesta.repositories.owned import Owned, owned_rows

logger = logging.getLogger(__name__)


class InstructorRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> list[Owned[Instructor]]:
        result = await self._db.execute(
            select(Instructor, User)
            .outerjoin(User, User.id == Instructor.user_id)
            .order_by(Instructor.created_at.desc(), Instructor.id.desc()),
        )
        return owned_rows(result.all())

    async def get(self, instructor_id: int) -> Instructor | None:
        return await self._db.get(Instructor, instructor_id)

    async def get_by_user_id(self, user_id: int) -> Instructor | None:
        result = await self._db.execute(
            select(Instructor).where(Instructor.user_id == user_id),
        )
        return result.scalar_one_or_none()

    async def create(
        self, user_id: int, specialization: str, cv: str | None = None,
    ) -> Instructor:
        user = await self._db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        if user.role == Role.ORGANIZER.value:
            raise RoleChangeNotAllowedError(user_id)

        instructor = Instructor(
            user_id=user_id,
            specialization=specialization,
            cv=cv,
            status=InstructorStatus.ACTIVE.value,
        )
        self._db.add(instructor)
        user.role = Role.INSTRUCTOR.value
        try:
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            raise AlreadyInstructorError(user_id)
        await self._db.refresh(instructor)
        logger.info(
            f"User {user_id} promoted to instructor",
            extra={"user_id": user_id},
        )
        return instructor

    async def update(self, instructor_id: int, **fields) -> Instructor | None:
        instructor = await self._db.get(Instructor, instructor_id)
        if instructor is None:
            return None
        for name, value in fields.items():
            setattr(instructor, name, value)
        await self._db.commit()
        await self._db.refresh(instructor)
        return instructor

    async def delete(self, instructor_id: int) -> bool:
        instructor = await self._db.get(Instructor, instructor_id)
        if instructor is None:
            return False
        user = await self._db.get(User, instructor.user_id)
        await self._db.delete(instructor)
        if user is not None and user.role == Role.INSTRUCTOR.value:
            user.role = Role.PARTICIPANT.value
        await self._db.commit()
        return True
