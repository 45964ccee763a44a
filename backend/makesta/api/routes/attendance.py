"""Attendance Routes — sessions (staff) and check-in records.

Invariants:
    - Sessions are opened, listed and closed by organizers and instructors
    - Closing is idempotent: a closed session comes back unchanged with 200
    - A participant always records for themself; staff must name the participant,
      and the named account must hold the participant role
    - Recording on a missing session -> 404; on a closed session -> governed
      by AttendancePolicy (settings.attendance_allow_closed_sessions)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.api.dependencies import (
    get_attendance_policy, get_current_identity, require_roles,
)
from makesta.core.attendance_rules import AttendancePolicy
from makesta.core.domain_types import STAFF_ROLES, Identity, Role
from makesta.core.errors import InputValidationError, ResourceNotFoundError
from makesta.infrastructure.database import get_db
from makesta.repositories.attendance import AttendanceRepository
from makesta.repositories.owned import Owned
from makesta.repositories.users import UserRepository
from makesta.schemas.attendance import (
    AttendanceRecordCreate, AttendanceRecordResponse,
    AttendanceSessionCreate, AttendanceSessionResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["attendance"])

staff_only = require_roles(*STAFF_ROLES)


@router.get(
    "/attendance-sessions", response_model=list[AttendanceSessionResponse],
    dependencies=[Depends(staff_only)],
)
async def list_sessions(db: AsyncSession = Depends(get_db)):
    rows = await AttendanceRepository(db).list_sessions()
    return [AttendanceSessionResponse.from_owned(row) for row in rows]


@router.get(
    "/attendance-sessions/active",
    response_model=list[AttendanceSessionResponse],
    dependencies=[Depends(get_current_identity)],
)
async def list_active_sessions(db: AsyncSession = Depends(get_db)):
    """Open sessions a participant can check in to."""
    rows = await AttendanceRepository(db).list_sessions(active_only=True)
    return [AttendanceSessionResponse.from_owned(row) for row in rows]


@router.post(
    "/attendance-sessions", response_model=AttendanceSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: AttendanceSessionCreate,
    identity: Identity = Depends(staff_only),
    db: AsyncSession = Depends(get_db),
):
    session = await AttendanceRepository(db).create_session(
        title=body.title,
        description=body.description,
        instructor_id=identity.user_id,
    )
    logger.info(
        f"Attendance session '{body.title}' opened",
        extra={"session_id": session.id, "user_id": identity.user_id},
    )
    owner = await UserRepository(db).get_by_id(identity.user_id)
    return AttendanceSessionResponse.from_owned(Owned(session, owner))


@router.patch(
    "/attendance-sessions/{session_id}/close",
    response_model=AttendanceSessionResponse,
    dependencies=[Depends(staff_only)],
)
async def close_session(session_id: int, db: AsyncSession = Depends(get_db)):
    session = await AttendanceRepository(db).close_session(session_id)
    if session is None:
        raise ResourceNotFoundError("Attendance session", session_id)
    owner = await UserRepository(db).get_by_id(session.instructor_id)
    return AttendanceSessionResponse.from_owned(Owned(session, owner))


@router.get(
    "/attendance-sessions/{session_id}/records",
    response_model=list[AttendanceRecordResponse],
    dependencies=[Depends(staff_only)],
)
async def list_records(session_id: int, db: AsyncSession = Depends(get_db)):
    repo = AttendanceRepository(db)
    if await repo.get_session(session_id) is None:
        raise ResourceNotFoundError("Attendance session", session_id)
    rows = await repo.list_records(session_id)
    return [AttendanceRecordResponse.from_owned(row) for row in rows]


@router.post(
    "/attendance-records", response_model=AttendanceRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record(
    body: AttendanceRecordCreate,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    policy: AttendancePolicy = Depends(get_attendance_policy),
):
    if identity.role is Role.PARTICIPANT:
        participant_id = identity.user_id
    elif body.participant_id is None:
        raise InputValidationError(
            "participantId is required when recording for someone else",
            field="participantId",
        )
    else:
        participant_id = body.participant_id

    repo = AttendanceRepository(db)
    session = await repo.get_session(body.session_id)
    if session is None:
        raise ResourceNotFoundError("Attendance session", body.session_id)
    policy.check_recordable(session.id, session.is_active)

    participant = await UserRepository(db).get_participant(participant_id)

    record = await repo.create_record(
        session_id=session.id,
        participant_id=participant_id,
        status=body.status,
        notes=body.notes,
    )
    logger.info(
        "Attendance recorded",
        extra={
            "record_id": record.id, "session_id": session.id,
            "user_id": identity.user_id,
        },
    )
    return AttendanceRecordResponse.from_owned(Owned(record, participant))
