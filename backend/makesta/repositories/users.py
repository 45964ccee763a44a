"""User Repository — accounts and participant registration.

Invariants:
    - register() writes User + Participant in one transaction; on failure
      neither row exists
    - Uniqueness of username/email comes from table constraints; the
      IntegrityError is translated, never pre-checked
    - Registered users always get role participant
    - Attendance, grades and certificates target participant accounts only
      (get_participant)
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.core.domain_types import Role
from makesta.core.errors import (
    DatabaseError, DuplicateEmailError, DuplicateUsernameError,
    InputValidationError, ResourceNotFoundError,
)
from makesta.models.participant import Participant
from makesta.models.user import User

logger = logging.getLogger(__name__)

_USERNAME_MARKERS = ("users.username", "ix_users_username", "users_username_key", "key (username)")
_EMAIL_MARKERS = ("users.email", "users_email_key", "key (email)")


def _translate_integrity_error(exc: IntegrityError, username: str) -> Exception:
    detail = str(exc.orig).lower()
    if any(marker in detail for marker in _USERNAME_MARKERS):
        return DuplicateUsernameError(username)
    if any(marker in detail for marker in _EMAIL_MARKERS):
        return DuplicateEmailError()
    return DatabaseError("Integrity constraint violated", "commit")


class UserRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_id(self, user_id: int) -> User | None:
        return await self._db.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        result = await self._db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def get_participant(self, user_id: int) -> User:
        """Return the user if it exists and holds the participant role."""
        user = await self._db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        if user.role != Role.PARTICIPANT.value:
            raise InputValidationError(
                f"User {user_id} is not a participant", field="participantId",
            )
        return user

    async def register(
        self,
        *,
        username: str,
        password_hash: str,
        full_name: str,
        email: str,
        phone: str,
        profile: dict,
    ) -> User:
        """Create a participant User and its Participant profile atomically."""
        user = User(
            username=username,
            password_hash=password_hash,
            role=Role.PARTICIPANT.value,
            full_name=full_name,
            email=email,
            phone=phone,
        )
        try:
            self._db.add(user)
            await self._db.flush()
            self._db.add(Participant(user_id=user.id, **profile))
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            raise _translate_integrity_error(e, username)
        await self._db.refresh(user)
        logger.info("Participant registered", extra={"user_id": user.id})
        return user

    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        role: Role,
        full_name: str,
        email: str,
        phone: str,
    ) -> User:
        """Create a bare account with an explicit role (organizer bootstrap)."""
        user = User(
            username=username,
            password_hash=password_hash,
            role=role.value,
            full_name=full_name,
            email=email,
            phone=phone,
        )
        try:
            self._db.add(user)
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            raise _translate_integrity_error(e, username)
        await self._db.refresh(user)
        return user
