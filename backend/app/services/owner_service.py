"""Owner service."""

import logging
from collections.abc import Collection

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, ValidationError
from app.models import Owner
from app.repositories import OwnerRepository
from app.schemas import OwnerCreate

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 4095


class OwnerService:
    """Service for owner operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.owner_repo = OwnerRepository(session)

    async def get_by_id(self, owner_id: int) -> Owner:
        """Get an owner by ID or raise NotFoundError."""
        owner = await self.owner_repo.get(owner_id)
        if owner is None:
            raise NotFoundError(f"Owner with ID {owner_id} not found")
        return owner

    async def get_all_by_id(self, owner_ids: Collection[int]) -> dict[int, Owner]:
        """Get owners keyed by id; every requested id must resolve."""
        owners = await self.owner_repo.get_all_by_id(owner_ids)
        by_id = {owner.id: owner for owner in owners}
        missing = sorted(set(owner_ids) - by_id.keys())
        if missing:
            raise NotFoundError(
                f"Owners with IDs {', '.join(str(i) for i in missing)} not found"
            )
        return by_id

    async def search(self, name: str | None = None, max_amount: int | None = None) -> list[Owner]:
        """Search owners by full name."""
        return await self.owner_repo.search(name, max_amount)

    async def create(self, data: OwnerCreate) -> Owner:
        """Validate and create an owner."""
        logger.debug("create(%s)", data)
        errors: list[str] = []
        for label, value in (("first name", data.first_name), ("last name", data.last_name)):
            if value is None:
                errors.append(f"Owner {label} is not given")
            elif not value.strip():
                errors.append(f"Owner {label} is blank")
            elif len(value) > MAX_NAME_LENGTH:
                errors.append(f"Owner {label} too long: longer than {MAX_NAME_LENGTH} characters")
        if data.description is not None and len(data.description) > MAX_DESCRIPTION_LENGTH:
            errors.append(
                f"Owner description too long: longer than {MAX_DESCRIPTION_LENGTH} characters"
            )
        if errors:
            raise ValidationError("Validation of owner for create failed", errors)

        return await self.owner_repo.create(data.model_dump())
