"""
Pytest configuration and shared fixtures.

Each test gets its own SQLite file database (via aiosqlite) with the schema
created from the ORM metadata, so tests never share rows.
"""
import os

# Must be set before hr_platform settings are first imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import date
from typing import List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

import hr_platform.models  # noqa: F401
from hr_platform.core.database import Base, build_engine, build_session_maker, get_db
from hr_platform.schemas.candidate import CandidateCreate
from hr_platform.services.candidate_service import CandidateService
from hr_platform.services.skill_service import SkillService


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    """Session factory bound to a fresh database file."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield build_session_maker(engine)

    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_maker):
    """A session, as a request would get from get_db."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client against the app, with get_db pointed at the test database."""
    from hr_platform.main import app

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def skill_service() -> SkillService:
    return SkillService()


@pytest.fixture
def candidate_service() -> CandidateService:
    return CandidateService()


@pytest.fixture
def make_candidate():
    """Build a CandidateCreate with sensible defaults."""

    def _make(
        full_name: str = "Ana Petrovic",
        email: str = "ana.petrovic@example.com",
        date_of_birth: date = date(1998, 5, 14),
        phone: str = "+38164111222",
        skill_ids: List[int] = None,
    ) -> CandidateCreate:
        return CandidateCreate(
            full_name=full_name,
            email=email,
            date_of_birth=date_of_birth,
            phone=phone,
            skill_ids=skill_ids or [],
        )

    return _make


@pytest_asyncio.fixture
async def skills(db, skill_service):
    """Three skills: C#, Java, SQL. Returns {name: id}."""
    created = {}
    for name in ("C#", "Java", "SQL"):
        skill = await skill_service.create_skill(db, name)
        created[name] = skill.id
    return created
