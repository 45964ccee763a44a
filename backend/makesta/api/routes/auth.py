"""Auth Routes — registration, login, and the caller's own profile.

Invariants:
    - Registration always creates a participant (role is not client-controlled)
    - Login failure message is identical for unknown user and wrong password
    - Only the username is logged on login failure, never the password
    - Responses never include the password hash
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import get_current_identity, get_token_issuer
from makesta.core.domain_types import Identity
from makesta.core.errors import InvalidCredentialsError, ResourceNotFoundError
from makesta.core.token_issuer import TokenIssuer
from makesta.infrastructure.credentials import hash_password, verify_password
from makesta.infrastructure.database import get_db
from makesta.repositories.instructors import InstructorRepository
from makesta.repositories.participants import ParticipantRepository
from makesta.repositories.users import UserRepository
from makesta.schemas.auth import (
    AuthResponse, LoginRequest, MeResponse, RegistrationRequest,
)
from makesta.schemas.base import UserSummary
from makesta.schemas.instructor import InstructorProfile
from makesta.schemas.participant import ParticipantProfile

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegistrationRequest,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Register a participant account (User + Participant profile)."""
    user = await UserRepository(db).register(
        username=body.username,
        password_hash=hash_password(body.password),
        full_name=body.full_name,
        email=str(body.email),
        phone=body.phone,
        profile=body.profile(),
    )
    return AuthResponse(
        message="Registration successful",
        user=UserSummary.model_validate(user),
        token=issuer.issue(user.id, user.username, user.role),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user = await UserRepository(db).get_by_username(body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.warning("Login failed", extra={"username": body.username})
        raise InvalidCredentialsError()

    logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
    return AuthResponse(
        message="Login successful",
        user=UserSummary.model_validate(user),
        token=issuer.issue(user.id, user.username, user.role),
    )


@router.get("/me", response_model=MeResponse)
async def me(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Caller's account plus whichever role profiles it owns."""
    user = await UserRepository(db).get_by_id(identity.user_id)
    if user is None:
        raise ResourceNotFoundError("User", identity.user_id)

    participant = await ParticipantRepository(db).get_by_user_id(user.id)
    instructor = await InstructorRepository(db).get_by_user_id(user.id)

    resp = MeResponse.model_validate(user)
    if participant is not None:
        resp.participant = ParticipantProfile.model_validate(participant)
    if instructor is not None:
        resp.instructor = InstructorProfile.model_validate(instructor)
    return resp
