"""Image API routes."""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services import ImageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["images"])


@router.get("/{image_id}")
async def get_image(
    image_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get the raw bytes of an image."""
    logger.info("GET /images/%s", image_id)
    image = await ImageService(db).get_by_id(image_id)
    return Response(content=image.data, media_type=image.mime_type)
