"""Image service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models import Image
from app.repositories import ImageRepository

logger = logging.getLogger(__name__)


class ImageService:
    """Service for stored horse pictures."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.image_repo = ImageRepository(session)

    async def create(self, data: bytes, mime_type: str) -> Image:
        """Store an image."""
        return await self.image_repo.create_image(data, mime_type)

    async def get_by_id(self, image_id: int) -> Image:
        """Get an image by ID or raise NotFoundError."""
        image = await self.image_repo.get(image_id)
        if image is None:
            raise NotFoundError(f"No image with ID {image_id} found")
        return image

    async def delete(self, image_id: int) -> None:
        """Delete an image; a missing image is not an error."""
        if not await self.image_repo.delete(image_id):
            logger.warning("Image %s to delete did not exist", image_id)
