"""API test fixtures — async in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test store
    - app.state.db_manager set for the readiness probe

Design Decisions:
    - StaticPool: every session shares the one in-memory connection
    - Seeding goes through short-lived sessions so no transaction stays open
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from linkvault.db.base import Base
from linkvault.infrastructure.database import DatabaseSessionManager, get_db
from linkvault.models.link import Link
from linkvault.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
def insert_link(test_manager):
    """Insert a link row directly, with an explicit creation time."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async def _insert(
        *, minutes: int = 0, title: str = "Notes",
        student_email: str = "a@rvu.edu.in", owner_token: str = "user_seeded",
    ) -> Link:
        link = Link(
            title=title, url="https://example.com", description="x",
            student_email=student_email, owner_token=owner_token,
            created_at=base + timedelta(minutes=minutes),
        )
        async with test_manager.session() as db:
            db.add(link)
            await db.commit()
            await db.refresh(link)
        return link

    return _insert
