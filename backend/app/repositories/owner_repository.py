"""Owner repository."""

import logging
from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Owner
from app.repositories.base import BaseRepository, is_given

logger = logging.getLogger(__name__)


class OwnerRepository(BaseRepository[Owner]):
    """Repository for Owner model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Owner, session)

    async def get_all_by_id(self, ids: Collection[int]) -> list[Owner]:
        """Get all owners whose id is in ``ids``; unknown ids are skipped."""
        logger.debug("get_all_by_id(%s)", ids)
        if not ids:
            return []
        result = await self.session.execute(select(Owner).where(Owner.id.in_(ids)))
        return list(result.scalars().all())

    async def search(self, name: str | None = None, limit: int | None = None) -> list[Owner]:
        """Search owners by a substring of "first last", case-insensitive."""
        logger.debug("search(name=%r, limit=%s)", name, limit)
        query = select(Owner)
        if is_given(name):
            full_name = Owner.first_name + " " + Owner.last_name
            query = query.where(full_name.icontains(name, autoescape=True))
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
