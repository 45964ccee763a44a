"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int — route params and token subjects are converted once
    - All valid states encoded as Enums — no raw string matching
    - Identity is immutable once built from a verified token

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and store in String columns without converters
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Account roles — maps to users.role."""
    PARTICIPANT = "participant"
    INSTRUCTOR = "instructor"
    ORGANIZER = "organizer"


class InstructorStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Check-in outcome for one participant in one session."""
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class CertificateStatus(str, Enum):
    DRAFT = "draft"
    ISSUED = "issued"
    REVOKED = "revoked"


class SessionState(str, Enum):
    """AttendanceSession lifecycle. CLOSED is terminal."""
    ACTIVE = "active"
    CLOSED = "closed"


# ─── Role Sets ───────────────────────────────────────────────────

ALL_ROLES = frozenset(Role)
STAFF_ROLES = frozenset({Role.ORGANIZER, Role.INSTRUCTOR})
ORGANIZER_ONLY = frozenset({Role.ORGANIZER})


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as carried by a verified token."""
    user_id: UserId
    username: str
    role: Role
