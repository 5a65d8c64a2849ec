"""Shared test fixtures."""

import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import Base
from app.datagen import seed
from app.models import Horse, Image, Owner

from tests.fixtures.factories import create_horse, create_image, create_owner


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded(db_session: AsyncSession) -> AsyncSession:
    """Load the seed dataset (15 horses, 10 owners)."""
    await seed(db_session)
    return db_session


@pytest.fixture
async def test_owner(db_session: AsyncSession) -> Owner:
    """Create a sample owner for testing."""
    owner = create_owner(first_name="Heidi", last_name="Klum")
    db_session.add(owner)
    await db_session.flush()
    return owner


@pytest.fixture
async def test_image(db_session: AsyncSession) -> Image:
    """Create a sample image for testing."""
    image = create_image()
    db_session.add(image)
    await db_session.flush()
    return image


@pytest.fixture
async def test_horse(db_session: AsyncSession, test_owner: Owner) -> Horse:
    """Create a sample horse owned by test_owner."""
    horse = create_horse(name="Alma", owner_id=test_owner.id)
    db_session.add(horse)
    await db_session.flush()
    return horse

