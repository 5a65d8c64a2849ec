"""Image repository."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Image
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ImageRepository(BaseRepository[Image]):
    """Repository for Image model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Image, session)

    async def create_image(self, data: bytes, mime_type: str) -> Image:
        """Store an image payload."""
        logger.debug("create_image(%s, %d bytes)", mime_type, len(data))
        return await self.create({"data": data, "mime_type": mime_type})
