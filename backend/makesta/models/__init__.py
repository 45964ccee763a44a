"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner of every other entity (FK user_id / participant_id / ...)
    - No relationship() attributes: joins are explicit in repositories/

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from makesta.models.user import User  # noqa: F401
from makesta.models.participant import Participant  # noqa: F401
from makesta.models.instructor import Instructor  # noqa: F401
from makesta.models.material import Material  # noqa: F401
from makesta.models.attendance_session import AttendanceSession  # noqa: F401
from makesta.models.attendance_record import AttendanceRecord  # noqa: F401
from makesta.models.grade import Grade  # noqa: F401
from makesta.models.certificate import Certificate  # noqa: F401
