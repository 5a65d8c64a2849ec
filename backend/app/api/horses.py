"""Horse API routes."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models import Sex
from app.schemas import (
    HorseCreate,
    HorseFamilyResponse,
    HorseResponse,
    HorseSearch,
    HorseUpdate,
)
from app.services import HorseService, ImageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/horses", tags=["horses"])


async def _store_image(image: UploadFile | None, db: AsyncSession) -> int | None:
    """Persist an uploaded image and return its id; empty uploads are ignored."""
    if image is None:
        return None
    data = await image.read()
    if not data:
        return None
    stored = await ImageService(db).create(data, image.content_type or "application/octet-stream")
    return stored.id


@router.get("", response_model=list[HorseResponse])
async def search_horses(
    name: str | None = None,
    description: str | None = None,
    sex: Sex | None = None,
    born_before: date | None = None,
    owner_name: str | None = None,
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Search horses. All filters are optional and combined with AND."""
    params = HorseSearch(
        name=name,
        description=description,
        sex=sex,
        born_before=born_before,
        owner_name=owner_name,
        limit=limit,
    )
    logger.info("GET /horses")
    logger.debug("request parameters: %s", params)
    return await HorseService(db).search(params)


@router.get("/{horse_id}", response_model=HorseResponse)
async def get_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a horse by ID."""
    logger.info("GET /horses/%s", horse_id)
    return await HorseService(db).get_by_id(horse_id)


@router.get("/{horse_id}/family", response_model=HorseFamilyResponse)
async def get_horse_family(
    horse_id: int,
    gen: int = Query(..., description="Number of generations to include"),
    db: AsyncSession = Depends(get_db),
):
    """Get the family tree of a horse."""
    logger.info("GET /horses/%s/family with gen %s", horse_id, gen)
    root = await HorseService(db).get_family(horse_id, gen)
    return HorseFamilyResponse.model_validate(root)


@router.post("", response_model=HorseResponse, status_code=201)
async def create_horse(
    name: str | None = Form(None),
    description: str | None = Form(None),
    date_of_birth: date | None = Form(None),
    sex: Sex | None = Form(None),
    owner_id: int | None = Form(None),
    mother_id: int | None = Form(None),
    father_id: int | None = Form(None),
    image: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
):
    """Create a new horse, optionally with a picture."""
    data = HorseCreate(
        name=name,
        description=description,
        date_of_birth=date_of_birth,
        sex=sex,
        owner_id=owner_id,
        mother_id=mother_id,
        father_id=father_id,
    )
    logger.info("POST /horses")
    logger.debug("Body of request: %s", data)
    data.image_id = await _store_image(image, db)
    return await HorseService(db).create(data)


@router.put("/{horse_id}", response_model=HorseResponse)
async def update_horse(
    horse_id: int,
    name: str = Form(...),
    date_of_birth: date = Form(...),
    sex: Sex = Form(...),
    description: str | None = Form(None),
    owner_id: int | None = Form(None),
    mother_id: int | None = Form(None),
    father_id: int | None = Form(None),
    image: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
):
    """Update a horse. Without a new picture the current one is kept."""
    data = HorseUpdate(
        name=name,
        description=description,
        date_of_birth=date_of_birth,
        sex=sex,
        owner_id=owner_id,
        mother_id=mother_id,
        father_id=father_id,
    )
    logger.info("PUT /horses/%s", horse_id)
    logger.debug("Body of request: %s", data)
    data.image_id = await _store_image(image, db)
    return await HorseService(db).update(horse_id, data)


@router.delete("/{horse_id}", status_code=204)
async def delete_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a horse and its picture."""
    logger.info("DELETE /horses/%s", horse_id)
    await HorseService(db).delete(horse_id)
    return Response(status_code=204)
