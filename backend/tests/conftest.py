"""
Shared fixtures.

- Async SQLite database (file in tmp_path, fresh per test)
- FakeStrava served through httpx.MockTransport
- API client over ASGITransport (lifespan not run)
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from clubmiles.db.base import Base
from clubmiles.db.session import get_async_db
from clubmiles.features.strava import StravaContext
from clubmiles.main import app

from factories import FakeStrava


@pytest.fixture
def fake_strava() -> FakeStrava:
    return FakeStrava()


@pytest.fixture
def strava_context(fake_strava) -> StravaContext:
    return StravaContext(
        client_id="client-123",
        client_secret="secret-456",
        redirect_uri="http://localhost:8000/auth/callback",
        transport=httpx.MockTransport(fake_strava.handler),
    )


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def api_client(session_factory):
    """HTTP client for the app, wired to the test database."""
    async def override_get_async_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
