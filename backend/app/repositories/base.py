"""Base repository with common CRUD operations."""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def is_given(value: str | None) -> bool:
    """A text filter counts only when it holds more than whitespace."""
    return value is not None and value.strip() != ""


class BaseRepository(Generic[ModelType]):
    """Base repository class with CRUD operations."""

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def get(self, id: int) -> ModelType | None:
        """Get a record by ID."""
        logger.debug("%s.get(%s)", self.model.__name__, id)
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(self, data: dict[str, Any]) -> ModelType:
        """Create a new record."""
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        logger.debug("%s.create() -> id=%s", self.model.__name__, instance.id)
        return instance

    async def update(self, id: int, data: dict[str, Any]) -> ModelType | None:
        """Overwrite the given columns of a record by ID.

        ``None`` values are written as well, so a full-row update can clear
        optional columns.
        """
        logger.debug("%s.update(%s, keys=%s)", self.model.__name__, id, sorted(data))
        instance = await self.get(id)
        if instance is None:
            return None

        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: int) -> bool:
        """Delete a record by ID."""
        logger.debug("%s.delete(%s)", self.model.__name__, id)
        instance = await self.get(id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
