"""Attendance Repository — sessions and check-in records.

Invariants:
    - Sessions are created active; close_session applies core/attendance_rules
      and is idempotent on an already closed session
    - create_record does not look at the session state; the recording policy
      is applied by the caller (AttendancePolicy)
    - Records are listed newest check-in first with the participant User nested
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from makesta.core.attendance_rules import close_transition
from makesta.core.domain_types import AttendanceStatus
from makesta.models.attendance_record import AttendanceRecord
from makesta.models.attendance_session import AttendanceSession
from makesta.models.user import User
from makesta.repositories.owned import Owned, owned_rows

logger = logging.getLogger(__name__)


class AttendanceRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    # --- Sessions -------------------------------------------------------------

    async def list_sessions(
        self, active_only: bool = False,
    ) -> list[Owned[AttendanceSession]]:
        query = (
            select(AttendanceSession, User)
            .outerjoin(User, User.id == AttendanceSession.instructor_id)
            .order_by(
                AttendanceSession.created_at.desc(), AttendanceSession.id.desc(),
            )
        )
        if active_only:
            query = query.where(AttendanceSession.is_active.is_(True))
        result = await self._db.execute(query)
        return owned_rows(result.all())

    async def get_session(self, session_id: int) -> AttendanceSession | None:
        return await self._db.get(AttendanceSession, session_id)

    async def create_session(
        self, title: str, instructor_id: int, description: str | None = None,
    ) -> AttendanceSession:
        session = AttendanceSession(
            title=title,
            description=description,
            instructor_id=instructor_id,
            is_active=True,
            closed_at=None,
        )
        self._db.add(session)
        await self._db.commit()
        await self._db.refresh(session)
        return session

    async def close_session(self, session_id: int) -> AttendanceSession | None:
        session = await self._db.get(AttendanceSession, session_id)
        if session is None:
            return None
        transition = close_transition(
            session.is_active, session.closed_at, datetime.now(timezone.utc),
        )
        if transition.changed:
            session.is_active = transition.is_active
            session.closed_at = transition.closed_at
            await self._db.commit()
            await self._db.refresh(session)
            logger.info(
                f"Attendance session {session_id} closed",
                extra={"session_id": session_id},
            )
        return session

    # --- Records --------------------------------------------------------------

    async def create_record(
        self,
        session_id: int,
        participant_id: int,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        notes: str | None = None,
    ) -> AttendanceRecord:
        record = AttendanceRecord(
            session_id=session_id,
            participant_id=participant_id,
            status=AttendanceStatus(status).value,
            notes=notes,
        )
        self._db.add(record)
        await self._db.commit()
        await self._db.refresh(record)
        return record

    async def list_records(self, session_id: int) -> list[Owned[AttendanceRecord]]:
        result = await self._db.execute(
            select(AttendanceRecord, User)
            .outerjoin(User, User.id == AttendanceRecord.participant_id)
            .where(AttendanceRecord.session_id == session_id)
            .order_by(
                AttendanceRecord.check_in_time.desc(), AttendanceRecord.id.desc(),
            ),
        )
        return owned_rows(result.all())
