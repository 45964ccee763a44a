"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that touches the DB gets a fresh in-memory SQLite database
    - Environment defaults are set before makesta.config is imported

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-specific
      behaviour (asyncpg error strings) is covered by the marker lists only
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "makesta-test-secret")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

from makesta.db.base import Base  # noqa: E402
import makesta.models  # noqa: E402,F401
from makesta.core.domain_types import Role  # noqa: E402
from makesta.infrastructure.credentials import hash_password  # noqa: E402
from makesta.models.user import User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_user(test_db):
    """Insert a bare account directly (no participant profile)."""
    async def _make(
        username: str, role: Role = Role.PARTICIPANT, password: str = "secret123",
    ) -> User:
        user = User(
            username=username,
            password_hash=hash_password(password),
            role=role.value,
            full_name=username.title(),
            email=f"{username}@example.com",
            phone="081234567890",
        )
        test_db.add(user)
        await test_db.commit()
        await test_db.refresh(user)
        return user
    return _make
