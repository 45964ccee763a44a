"""AttendanceRepository — session lifecycle and record listing."""

from makesta.core.domain_types import AttendanceStatus, Role
from makesta.repositories.attendance import AttendanceRepository


async def test_new_session_is_active(test_db, make_user):
    instructor = await make_user("pemateri", Role.INSTRUCTOR)
    session = await AttendanceRepository(test_db).create_session(
        title="Hari 1", instructor_id=instructor.id,
    )
    assert session.is_active is True
    assert session.closed_at is None


async def test_close_is_idempotent(test_db, make_user):
    instructor = await make_user("pemateri", Role.INSTRUCTOR)
    repo = AttendanceRepository(test_db)
    session = await repo.create_session(title="Hari 1", instructor_id=instructor.id)

    first = await repo.close_session(session.id)
    first_closed_at = first.closed_at
    second = await repo.close_session(session.id)

    assert second.is_active is False
    assert second.closed_at == first_closed_at


async def test_close_missing_session_returns_none(test_db):
    assert await AttendanceRepository(test_db).close_session(99) is None


async def test_list_sessions_active_only(test_db, make_user):
    instructor = await make_user("pemateri", Role.INSTRUCTOR)
    repo = AttendanceRepository(test_db)
    open_session = await repo.create_session(title="Buka", instructor_id=instructor.id)
    closed = await repo.create_session(title="Tutup", instructor_id=instructor.id)
    await repo.close_session(closed.id)

    active = await repo.list_sessions(active_only=True)
    assert [r.entity.id for r in active] == [open_session.id]
    assert len(await repo.list_sessions()) == 2


async def test_records_listed_with_participant(test_db, make_user):
    instructor = await make_user("pemateri", Role.INSTRUCTOR)
    ani = await make_user("ani")
    repo = AttendanceRepository(test_db)
    session = await repo.create_session(title="Hari 1", instructor_id=instructor.id)

    await repo.create_record(session.id, ani.id, AttendanceStatus.LATE, notes="macet")
    rows = await repo.list_records(session.id)

    assert len(rows) == 1
    assert rows[0].entity.status == "late"
    assert rows[0].owner.username == "ani"
