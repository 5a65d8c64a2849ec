"""Owner API routes."""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas import OwnerCreate, OwnerResponse
from app.services import OwnerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners", tags=["owners"])


@router.get("", response_model=list[OwnerResponse])
async def search_owners(
    name: str | None = None,
    max_amount: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Search owners by full name."""
    logger.info("GET /owners")
    owners = await OwnerService(db).search(name, max_amount)
    return [OwnerResponse.model_validate(o) for o in owners]


@router.get("/{owner_id}", response_model=OwnerResponse)
async def get_owner(
    owner_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get an owner by ID."""
    logger.info("GET /owners/%s", owner_id)
    owner = await OwnerService(db).get_by_id(owner_id)
    return OwnerResponse.model_validate(owner)


@router.post("", response_model=OwnerResponse, status_code=201)
async def create_owner(
    data: OwnerCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new owner."""
    logger.info("POST /owners")
    logger.debug("Body of request: %s", data)
    owner = await OwnerService(db).create(data)
    return OwnerResponse.model_validate(owner)
