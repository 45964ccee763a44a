"""API test fixtures — FastAPI test client over an in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - app.state collaborators (token issuer, file store, attendance policy)
      are rebuilt per test; uploads land in tmp_path

Design Decisions:
    - ASGITransport does not run the lifespan, so state is set here directly
    - Tokens are minted through the real login/register endpoints where the
      flow matters, and through the issuer where only the role does
"""

import pytest
from httpx import ASGITransport, AsyncClient

import makesta.infrastructure.database as db_module
from makesta.core.attendance_rules import AttendancePolicy
from makesta.core.domain_types import Role
from makesta.core.token_issuer import TokenIssuer
from makesta.infrastructure.database import DatabaseSessionManager, get_db
from makesta.infrastructure.file_store import MaterialFileStore
from makesta.main import app

from tests.api.helpers import TEST_SECRET, bearer, registration_payload


@pytest.fixture
def token_issuer():
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def file_store(tmp_path):
    return MaterialFileStore(tmp_path / "uploads", max_bytes=10 * 1024 * 1024)


@pytest.fixture
async def client(test_engine, test_session_factory, token_issuer, file_store):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    fake_manager.is_sqlite = True
    db_module.db_manager = fake_manager

    app.state.token_issuer = token_issuer
    app.state.file_store = file_store
    app.state.attendance_policy = AttendancePolicy(allow_closed_sessions=True)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def register(client):
    """Register a participant through the API; returns the response JSON."""
    async def _register(username: str, **overrides) -> dict:
        res = await client.post(
            "/api/v1/auth/register",
            json=registration_payload(username, **overrides),
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _register


@pytest.fixture
async def organizer(make_user):
    return await make_user("panitia", Role.ORGANIZER)


@pytest.fixture
def organizer_headers(organizer, token_issuer):
    return bearer(token_issuer.issue(organizer.id, organizer.username, Role.ORGANIZER))


@pytest.fixture
async def instructor_headers(make_user, token_issuer):
    user = await make_user("pemateri", Role.INSTRUCTOR)
    return bearer(token_issuer.issue(user.id, user.username, Role.INSTRUCTOR))


@pytest.fixture
async def participant(register):
    """A registered participant: {"user": ..., "token": ...}."""
    return await register("ani")


@pytest.fixture
def participant_headers(participant):
    return bearer(participant["token"])
