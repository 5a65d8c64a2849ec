"""Horse repository."""

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy import literal, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.models import Horse, Owner, Sex
from app.repositories.base import BaseRepository, is_given

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HorseSearchFilters:
    """Optional, conjunctive search filters. Blank strings count as absent."""

    name: str | None = None
    description: str | None = None
    sex: Sex | None = None
    born_before: date | None = None
    owner_name: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class AncestorRow:
    """One flattened pedigree node produced by the family query."""

    id: int
    name: str
    date_of_birth: date
    mother_id: int | None
    father_id: int | None
    level: int


class HorseRepository(BaseRepository[Horse]):
    """Repository for Horse model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Horse, session)

    async def search(self, filters: HorseSearchFilters) -> list[Horse]:
        """Search horses; the owner table is joined only for an owner name filter."""
        logger.debug("search(%s)", filters)
        query = select(Horse)

        if is_given(filters.name):
            query = query.where(Horse.name.icontains(filters.name, autoescape=True))
        if is_given(filters.description):
            query = query.where(
                Horse.description.icontains(filters.description, autoescape=True)
            )
        if filters.sex is not None:
            query = query.where(Horse.sex == filters.sex)
        if filters.born_before is not None:
            query = query.where(Horse.date_of_birth < filters.born_before)
        if is_given(filters.owner_name):
            full_name = Owner.first_name + " " + Owner.last_name
            query = query.join(Owner, Owner.id == Horse.owner_id).where(
                full_name.icontains(filters.owner_name, autoescape=True)
            )
        if filters.limit is not None and filters.limit > 0:
            query = query.limit(filters.limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_family(self, horse_id: int, generations: int) -> list[AncestorRow]:
        """Get the root horse and its ancestors up to ``generations`` levels.

        Level 0 is the root, level k+1 holds the parents of level k. Rows are
        unique per (id, level) and ordered by level, then id.
        """
        logger.debug("get_family(%s, %s)", horse_id, generations)
        family = (
            select(
                Horse.id,
                Horse.name,
                Horse.date_of_birth,
                Horse.mother_id,
                Horse.father_id,
                literal(0).label("level"),
            )
            .where(Horse.id == horse_id)
            .cte("family_tree", recursive=True)
        )
        parent = aliased(Horse)
        family = family.union(
            select(
                parent.id,
                parent.name,
                parent.date_of_birth,
                parent.mother_id,
                parent.father_id,
                (family.c.level + 1).label("level"),
            )
            .select_from(parent)
            .join(
                family,
                or_(parent.id == family.c.mother_id, parent.id == family.c.father_id),
            )
            .where(family.c.level < generations)
        )

        result = await self.session.execute(
            select(family).order_by(family.c.level, family.c.id)
        )
        return [
            AncestorRow(
                id=row.id,
                name=row.name,
                date_of_birth=row.date_of_birth,
                mother_id=row.mother_id,
                father_id=row.father_id,
                level=row.level,
            )
            for row in result
        ]

    async def clear_parent_references(self, horse_id: int) -> None:
        """Unset mother/father of every horse that points at ``horse_id``."""
        logger.debug("clear_parent_references(%s)", horse_id)
        await self.session.execute(
            update(Horse).where(Horse.mother_id == horse_id).values(mother_id=None)
        )
        await self.session.execute(
            update(Horse).where(Horse.father_id == horse_id).values(father_id=None)
        )

    async def has_offspring(self, horse_id: int, parent_sex: Sex) -> bool:
        """Whether any horse names ``horse_id`` as its mother (FEMALE) or father (MALE)."""
        logger.debug("has_offspring(%s, %s)", horse_id, parent_sex)
        column = Horse.mother_id if parent_sex == Sex.FEMALE else Horse.father_id
        result = await self.session.execute(
            select(Horse.id).where(column == horse_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def get_lineage_ids(self, horse_id: int) -> set[int]:
        """Ids of ``horse_id`` and all of its ancestors, at any depth.

        Rows carry no level, so UNION stops the recursion even on a cycle.
        """
        logger.debug("get_lineage_ids(%s)", horse_id)
        lineage = (
            select(Horse.id, Horse.mother_id, Horse.father_id)
            .where(Horse.id == horse_id)
            .cte("lineage", recursive=True)
        )
        parent = aliased(Horse)
        lineage = lineage.union(
            select(parent.id, parent.mother_id, parent.father_id)
            .select_from(parent)
            .join(
                lineage,
                or_(parent.id == lineage.c.mother_id, parent.id == lineage.c.father_id),
            )
        )

        result = await self.session.execute(select(lineage.c.id))
        return set(result.scalars().all())
