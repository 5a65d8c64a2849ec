"""Horse service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import FatalInconsistencyError, NotFoundError, ValidationError
from app.models import Horse, Owner
from app.repositories import HorseRepository, HorseSearchFilters
from app.schemas import HorseCreate, HorseResponse, HorseSearch, HorseUpdate, OwnerResponse
from app.services.family_tree import FamilyNode, build_family_tree
from app.services.horse_validator import HorseValidator
from app.services.image_service import ImageService
from app.services.owner_service import OwnerService

logger = logging.getLogger(__name__)


class HorseService:
    """Service for horse operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.horse_repo = HorseRepository(session)
        self.owner_service = OwnerService(session)
        self.validator = HorseValidator(self.horse_repo, self.owner_service.owner_repo)
        self.image_service = ImageService(session)

    async def get_by_id(self, horse_id: int) -> HorseResponse:
        """Get a horse by ID, with its owner."""
        horse = await self._get_or_raise(horse_id)
        return self._to_response(horse, await self._owner_map_for_single_id(horse.owner_id))

    async def search(self, params: HorseSearch) -> list[HorseResponse]:
        """Search horses. Without filters every horse is returned."""
        filters = HorseSearchFilters(**params.model_dump())
        horses = await self.horse_repo.search(filters)

        owner_ids = {h.owner_id for h in horses if h.owner_id is not None}
        try:
            owners = await self.owner_service.get_all_by_id(owner_ids)
        except NotFoundError as e:
            raise self._fatal(
                f"Horse, that is already persisted, refers to non-existing owner: {e.message}"
            ) from e
        return [self._to_response(h, owners) for h in horses]

    async def create(self, data: HorseCreate) -> HorseResponse:
        """Validate and create a horse."""
        await self.validator.validate_for_create(data)
        horse = await self.horse_repo.create(data.model_dump())
        logger.info("Created horse %s", horse.id)
        return self._to_response(horse, await self._owner_map_for_single_id(horse.owner_id))

    async def update(self, horse_id: int, data: HorseUpdate) -> HorseResponse:
        """Validate and overwrite a horse with ``data``.

        An ``image_id`` of None keeps the current image. A new image replaces
        the current one, which is then deleted.
        """
        await self.validator.validate_for_update(horse_id, data)
        current = await self.horse_repo.get(horse_id)
        if current is None:
            raise NotFoundError(
                f"Could not update horse with ID {horse_id}, because it does not exist"
            )
        previous_image_id = current.image_id

        fields = data.model_dump()
        if fields["image_id"] is None:
            fields["image_id"] = previous_image_id
        horse = await self.horse_repo.update(horse_id, fields)

        if previous_image_id is not None and previous_image_id != horse.image_id:
            await self.image_service.delete(previous_image_id)
        return self._to_response(horse, await self._owner_map_for_single_id(horse.owner_id))

    async def delete(self, horse_id: int) -> None:
        """Delete a horse, then its image if it has one.

        Children that named the horse as a parent lose that reference.
        """
        horse = await self._get_or_raise(horse_id)
        image_id = horse.image_id

        await self.horse_repo.clear_parent_references(horse_id)
        if not await self.horse_repo.delete(horse_id):
            raise NotFoundError(
                f"Could not delete horse with ID {horse_id}, because it does not exist"
            )
        if image_id is not None:
            logger.debug("Deleting image %s of horse %s", image_id, horse_id)
            await self.image_service.delete(image_id)

    async def get_family(self, horse_id: int, generations: int) -> FamilyNode:
        """Get the pedigree of a horse, ``generations`` levels deep."""
        logger.debug("get_family(%s, %s)", horse_id, generations)
        if generations < 1:
            raise ValidationError(
                "Invalid generations parameter",
                [f"Number of generations must be positive, got {generations}"],
            )

        rows = await self.horse_repo.get_family(horse_id, generations)
        try:
            root = build_family_tree(rows, horse_id)
        except FatalInconsistencyError as e:
            raise self._fatal(e.message) from e
        if root is None:
            raise NotFoundError(f"No horse with ID {horse_id} found")
        return root

    async def _get_or_raise(self, horse_id: int) -> Horse:
        horse = await self.horse_repo.get(horse_id)
        if horse is None:
            raise NotFoundError(f"No horse with ID {horse_id} found")
        return horse

    async def _owner_map_for_single_id(self, owner_id: int | None) -> dict[int, Owner]:
        if owner_id is None:
            return {}
        try:
            return {owner_id: await self.owner_service.get_by_id(owner_id)}
        except NotFoundError as e:
            raise self._fatal(f"Owner {owner_id} referenced by horse not found") from e

    @staticmethod
    def _fatal(message: str) -> FatalInconsistencyError:
        logger.critical(message)
        return FatalInconsistencyError(message)

    def _to_response(self, horse: Horse, owners: dict[int, Owner]) -> HorseResponse:
        """Convert Horse model to HorseResponse."""
        owner = owners.get(horse.owner_id) if horse.owner_id is not None else None
        return HorseResponse(
            id=horse.id,
            name=horse.name,
            description=horse.description,
            date_of_birth=horse.date_of_birth,
            sex=horse.sex,
            owner=OwnerResponse.model_validate(owner) if owner else None,
            image_id=horse.image_id,
            mother_id=horse.mother_id,
            father_id=horse.father_id,
            created_at=horse.created_at,
            updated_at=horse.updated_at,
        )
