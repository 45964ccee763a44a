"""Attendance Rules — AttendanceSession state machine and recording policy.

Invariants:
    - States: ACTIVE -> CLOSED, irreversible; CLOSED is terminal
    - Closing a closed session is a no-op that keeps the original closed_at
    - Records on a closed session are accepted or rejected by an explicit
      policy flag; closing never retracts earlier records

Design Decisions:
    - Pure functions over plain values: repositories and routes own the IO
"""

from dataclasses import dataclass
from datetime import datetime

from makesta.core.domain_types import SessionState
from makesta.core.errors import SessionClosedError


@dataclass(frozen=True)
class CloseTransition:
    """Result of applying close to a session."""
    is_active: bool
    closed_at: datetime
    changed: bool


def session_state(is_active: bool) -> SessionState:
    return SessionState.ACTIVE if is_active else SessionState.CLOSED


def close_transition(
    is_active: bool, closed_at: datetime | None, now: datetime,
) -> CloseTransition:
    """Compute the post-close values of a session."""
    if session_state(is_active) is SessionState.CLOSED:
        return CloseTransition(
            is_active=False, closed_at=closed_at or now, changed=False,
        )
    return CloseTransition(is_active=False, closed_at=now, changed=True)


@dataclass(frozen=True)
class AttendancePolicy:
    """Configurable recording policy (settings.attendance_allow_closed_sessions)."""
    allow_closed_sessions: bool = True

    def check_recordable(self, session_id: int, is_active: bool) -> None:
        """Raise SessionClosedError when the session is closed and the policy forbids it."""
        if not is_active and not self.allow_closed_sessions:
            raise SessionClosedError(session_id)
