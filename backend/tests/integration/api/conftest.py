"""Fixtures for API integration tests.

The in-memory engine and session come from ``tests/conftest.py``; the
application's ``get_db`` dependency is pointed at that session.
"""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.datagen import seed
from app.main import app


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client bound to the test session."""
    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def seeded(db_session: AsyncSession) -> AsyncSession:
    """Load and commit the seed dataset."""
    await seed(db_session)
    await db_session.commit()
    return db_session
