"""InstructorRepository — promotion and demotion keep users.role in step."""

import pytest

from makesta.core.domain_types import Role
from makesta.core.errors import (
    AlreadyInstructorError, ResourceNotFoundError, RoleChangeNotAllowedError,
)
from makesta.repositories.instructors import InstructorRepository
from makesta.repositories.users import UserRepository


async def test_create_promotes_user(test_db, make_user):
    ani = await make_user("ani")
    instructor = await InstructorRepository(test_db).create(ani.id, "Kepemimpinan")
    assert instructor.status == "active"
    assert (await UserRepository(test_db).get_by_id(ani.id)).role == "instructor"


async def test_second_profile_rejected(test_db, make_user):
    ani = await make_user("ani")
    repo = InstructorRepository(test_db)
    await repo.create(ani.id, "Kepemimpinan")
    with pytest.raises(AlreadyInstructorError):
        await repo.create(ani.id, "Public speaking")


async def test_organizer_not_converted(test_db, make_user):
    panitia = await make_user("panitia", Role.ORGANIZER)
    with pytest.raises(RoleChangeNotAllowedError):
        await InstructorRepository(test_db).create(panitia.id, "Apa saja")


async def test_missing_user_rejected(test_db):
    with pytest.raises(ResourceNotFoundError):
        await InstructorRepository(test_db).create(404, "Apa saja")


async def test_delete_reverts_role(test_db, make_user):
    ani = await make_user("ani")
    repo = InstructorRepository(test_db)
    instructor = await repo.create(ani.id, "Kepemimpinan")

    assert await repo.delete(instructor.id) is True
    assert (await UserRepository(test_db).get_by_id(ani.id)).role == "participant"
    assert await repo.delete(instructor.id) is False


async def test_update_changes_only_given_fields(test_db, make_user):
    ani = await make_user("ani")
    repo = InstructorRepository(test_db)
    instructor = await repo.create(ani.id, "Kepemimpinan", cv="10 tahun")

    updated = await repo.update(instructor.id, status="inactive")
    assert updated.status == "inactive"
    assert updated.specialization == "Kepemimpinan"
    assert updated.cv == "10 tahun"
