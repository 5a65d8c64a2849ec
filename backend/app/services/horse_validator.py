"""Validation of horse data before it is written."""

import logging
from datetime import date

from app.exceptions import ValidationError
from app.models import Sex
from app.repositories import HorseRepository, OwnerRepository
from app.schemas import HorseCreate, HorseUpdate

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 4095


class HorseValidator:
    """Checks field constraints and parent references of a horse.

    Every rule is evaluated; all violations are reported together in one
    ValidationError.
    """

    def __init__(self, horse_repo: HorseRepository, owner_repo: OwnerRepository):
        self.horse_repo = horse_repo
        self.owner_repo = owner_repo

    async def validate_for_create(self, horse: HorseCreate) -> None:
        logger.debug("validate_for_create(%s)", horse)
        errors: list[str] = []

        if horse.name is None:
            errors.append("Horse name is not given")
        else:
            self._check_name(horse.name, errors)

        self._check_description(horse.description, errors)

        if horse.date_of_birth is None:
            errors.append("Horse date of birth is not given")
        else:
            self._check_date_of_birth(horse.date_of_birth, errors)

        if horse.sex is None:
            errors.append("Horse sex is not given")

        await self._check_parents(horse.mother_id, horse.father_id, errors)
        await self._check_owner(horse.owner_id, errors)

        if errors:
            raise ValidationError("Validation of horse for create failed", errors)

    async def validate_for_update(self, horse_id: int, horse: HorseUpdate) -> None:
        logger.debug("validate_for_update(%s, %s)", horse_id, horse)
        errors: list[str] = []

        self._check_name(horse.name, errors)
        self._check_description(horse.description, errors)
        self._check_date_of_birth(horse.date_of_birth, errors)

        if horse.mother_id is not None and horse.mother_id == horse_id:
            errors.append("Horse cannot be its own mother")
        if horse.father_id is not None and horse.father_id == horse_id:
            errors.append("Horse cannot be its own father")

        await self._check_parents(horse.mother_id, horse.father_id, errors)
        await self._check_ancestry(horse_id, horse.mother_id, horse.father_id, errors)
        await self._check_sex_change(horse_id, horse.sex, errors)
        await self._check_owner(horse.owner_id, errors)

        if errors:
            raise ValidationError("Validation of horse for update failed", errors)

    @staticmethod
    def _check_name(name: str, errors: list[str]) -> None:
        if not name.strip():
            errors.append("Horse name is blank")
        elif len(name) > MAX_TEXT_LENGTH:
            errors.append(f"Horse name too long: longer than {MAX_TEXT_LENGTH} characters")

    @staticmethod
    def _check_description(description: str | None, errors: list[str]) -> None:
        if description is None:
            return
        if not description.strip():
            errors.append("Horse description is given but blank")
        if len(description) > MAX_TEXT_LENGTH:
            errors.append(
                f"Horse description too long: longer than {MAX_TEXT_LENGTH} characters"
            )

    @staticmethod
    def _check_date_of_birth(date_of_birth: date, errors: list[str]) -> None:
        if date_of_birth > date.today():
            errors.append("Horse date of birth is not allowed to be in the future")

    async def _check_parents(
        self,
        mother_id: int | None,
        father_id: int | None,
        errors: list[str],
    ) -> None:
        """Parents must exist and have the sex matching their role."""
        if mother_id is not None:
            mother = await self.horse_repo.get(mother_id)
            if mother is None:
                errors.append(f"Horse with ID {mother_id} specified as mother not found")
            elif mother.sex != Sex.FEMALE:
                errors.append("Horse assigned as mother must be female")

        if father_id is not None:
            father = await self.horse_repo.get(father_id)
            if father is None:
                errors.append(f"Horse with ID {father_id} specified as father not found")
            elif father.sex != Sex.MALE:
                errors.append("Horse assigned as father must be male")

    async def _check_owner(self, owner_id: int | None, errors: list[str]) -> None:
        if owner_id is not None and await self.owner_repo.get(owner_id) is None:
            errors.append(f"Owner with ID {owner_id} not found")

    async def _check_ancestry(
        self,
        horse_id: int,
        mother_id: int | None,
        father_id: int | None,
        errors: list[str],
    ) -> None:
        """A horse must not appear among the ancestors of its new parents."""
        for parent_id in (mother_id, father_id):
            if parent_id is None or parent_id == horse_id:
                continue
            if horse_id in await self.horse_repo.get_lineage_ids(parent_id):
                errors.append("Horse cannot be its own ancestor")
                return

    async def _check_sex_change(self, horse_id: int, sex: Sex, errors: list[str]) -> None:
        """A registered mother stays female and a registered father stays male."""
        current = await self.horse_repo.get(horse_id)
        if current is None or current.sex == sex:
            return
        if sex == Sex.MALE and await self.horse_repo.has_offspring(horse_id, Sex.FEMALE):
            errors.append("Horse is the mother of other horses and must stay female")
        elif sex == Sex.FEMALE and await self.horse_repo.has_offspring(horse_id, Sex.MALE):
            errors.append("Horse is the father of other horses and must stay male")
