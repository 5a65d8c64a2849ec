"""Tests for horse repository."""

from datetime import date

import pytest

from app.models import Sex
from app.repositories.horse_repository import HorseRepository, HorseSearchFilters
from tests.fixtures.factories import create_horse


def ids(horses):
    return {h.id for h in horses}


class TestHorseSearch:
    """Tests for HorseRepository.search."""

    @pytest.mark.asyncio
    async def test_no_filters_returns_all(self, seeded):
        """Search without filters returns every horse."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters())

        assert len(horses) == 15

    @pytest.mark.asyncio
    async def test_blank_filters_are_ignored(self, seeded):
        """Blank strings impose no constraint."""
        repo = HorseRepository(seeded)

        horses = await repo.search(
            HorseSearchFilters(name="  ", description="", owner_name=" ")
        )

        assert len(horses) == 15

    @pytest.mark.asyncio
    async def test_name_is_case_insensitive_substring(self, seeded):
        """Name filter matches substrings regardless of case."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters(name="L"))

        assert ids(horses) == {-2, -6, -10, -11, -12, -13, -14}

    @pytest.mark.asyncio
    async def test_description_filter(self, seeded):
        """Description filter skips horses without description."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters(description="FAMOUS"))

        assert ids(horses) == {-1}

    @pytest.mark.asyncio
    async def test_sex_filter(self, seeded):
        """Sex filter is an exact match."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters(sex=Sex.FEMALE))

        assert ids(horses) == {-1, -3, -6, -8, -12, -13, -14}
        assert all(h.sex == Sex.FEMALE for h in horses)

    @pytest.mark.asyncio
    async def test_born_before_is_exclusive(self, seeded):
        """A horse born exactly on the bound is not included."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters(born_before=date(2010, 2, 14)))

        assert ids(horses) == {-1, -2, -3, -4}

    @pytest.mark.asyncio
    async def test_owner_name_matches_full_name(self, seeded):
        """Owner filter matches "first last" case-insensitively."""
        repo = HorseRepository(seeded)

        by_last_name = await repo.search(HorseSearchFilters(owner_name="lazarevic"))
        by_full_name = await repo.search(HorseSearchFilters(owner_name="PAMELA LAZ"))

        assert ids(by_last_name) == {-1, -6, -7, -8, -10, -12}
        assert ids(by_full_name) == {-8, -12}

    @pytest.mark.asyncio
    async def test_owner_name_excludes_horses_without_owner(self, seeded):
        """Horses without owner never match an owner filter."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters(owner_name="a"))

        assert -4 not in ids(horses)
        assert -14 not in ids(horses)

    @pytest.mark.asyncio
    async def test_limit(self, seeded):
        """Limit truncates the result."""
        repo = HorseRepository(seeded)

        horses = await repo.search(
            HorseSearchFilters(name="l", sex=Sex.FEMALE, limit=3)
        )

        assert len(horses) == 3
        assert ids(horses) <= {-6, -12, -13, -14}

    @pytest.mark.asyncio
    async def test_non_positive_limit_is_ignored(self, seeded):
        """A limit of zero imposes no constraint."""
        repo = HorseRepository(seeded)

        horses = await repo.search(HorseSearchFilters(limit=0))

        assert len(horses) == 15

    @pytest.mark.asyncio
    async def test_filters_never_increase_matches(self, seeded):
        """Each added filter narrows or keeps the result."""
        repo = HorseRepository(seeded)
        steps = [
            HorseSearchFilters(),
            HorseSearchFilters(sex=Sex.FEMALE),
            HorseSearchFilters(sex=Sex.FEMALE, name="l"),
            HorseSearchFilters(sex=Sex.FEMALE, name="l", owner_name="lazarevic"),
            HorseSearchFilters(
                sex=Sex.FEMALE,
                name="l",
                owner_name="lazarevic",
                born_before=date(2015, 1, 1),
            ),
        ]

        counts = [len(await repo.search(f)) for f in steps]

        assert counts == sorted(counts, reverse=True)
        assert counts == [15, 7, 4, 2, 1]

    @pytest.mark.asyncio
    async def test_like_wildcards_are_literal(self, seeded):
        """% and _ in a filter are matched literally."""
        repo = HorseRepository(seeded)

        assert await repo.search(HorseSearchFilters(name="%")) == []
        assert await repo.search(HorseSearchFilters(name="_")) == []


class TestHorseFamily:
    """Tests for HorseRepository.get_family."""

    @pytest.mark.asyncio
    async def test_one_generation(self, seeded):
        """Root plus its direct parents, ordered by level then id."""
        repo = HorseRepository(seeded)

        rows = await repo.get_family(-10, 1)

        assert [(r.id, r.level) for r in rows] == [(-10, 0), (-7, 1), (-6, 1)]
        larry = rows[0]
        assert larry.name == "Larry"
        assert (larry.mother_id, larry.father_id) == (-6, -7)
        assert larry.date_of_birth == date(2016, 5, 22)

    @pytest.mark.asyncio
    async def test_shared_ancestors_appear_once_per_level(self, seeded):
        """Wendy and Lucky are parents of both Linda and Steve."""
        repo = HorseRepository(seeded)

        rows = await repo.get_family(-10, 2)

        assert [(r.id, r.level) for r in rows] == [
            (-10, 0),
            (-7, 1),
            (-6, 1),
            (-2, 2),
            (-1, 2),
        ]

    @pytest.mark.asyncio
    async def test_depth_bounded_by_pedigree(self, seeded):
        """A large bound stops where the pedigree ends."""
        repo = HorseRepository(seeded)

        assert len(await repo.get_family(-10, 50)) == len(await repo.get_family(-10, 2))

    @pytest.mark.asyncio
    async def test_more_generations_never_fewer_rows(self, seeded):
        """Row count grows monotonically with the bound."""
        repo = HorseRepository(seeded)

        counts = [len(await repo.get_family(-15, gen)) for gen in range(1, 6)]

        assert counts == sorted(counts)
        assert counts[0] == 3

    @pytest.mark.asyncio
    async def test_horse_without_parents(self, seeded):
        """Only the root comes back for a founder horse."""
        repo = HorseRepository(seeded)

        rows = await repo.get_family(-1, 3)

        assert [r.id for r in rows] == [-1]
        assert rows[0].mother_id is None
        assert rows[0].father_id is None

    @pytest.mark.asyncio
    async def test_unknown_root(self, seeded):
        """Unknown id gives no rows."""
        repo = HorseRepository(seeded)

        assert await repo.get_family(-999, 3) == []

    @pytest.mark.asyncio
    async def test_cycle_terminates(self, db_session):
        """Corrupted data with a cycle is still bounded by the generation limit."""
        a = create_horse(name="A", sex=Sex.FEMALE)
        db_session.add(a)
        await db_session.flush()
        b = create_horse(name="B", mother_id=a.id)
        db_session.add(b)
        await db_session.flush()
        a.mother_id = b.id
        await db_session.flush()
        repo = HorseRepository(db_session)

        rows = await repo.get_family(a.id, 4)

        assert [r.level for r in rows] == [0, 1, 2, 3, 4]


class TestClearParentReferences:
    """Tests for HorseRepository.clear_parent_references."""

    @pytest.mark.asyncio
    async def test_clears_mother_and_father(self, seeded):
        """Children of a removed parent lose the reference."""
        repo = HorseRepository(seeded)

        await repo.clear_parent_references(-6)
        await repo.clear_parent_references(-7)

        larry = await repo.get(-10)
        luna = await repo.get(-12)
        assert larry.mother_id is None
        assert larry.father_id is None
        assert luna.mother_id is None
        assert luna.father_id == -9


class TestParentage:
    """Tests for offspring and lineage lookups used by the validator."""

    @pytest.mark.asyncio
    async def test_has_offspring(self, seeded):
        repo = HorseRepository(seeded)

        assert await repo.has_offspring(-1, Sex.FEMALE)
        assert await repo.has_offspring(-2, Sex.MALE)
        assert not await repo.has_offspring(-1, Sex.MALE)
        assert not await repo.has_offspring(-15, Sex.MALE)

    @pytest.mark.asyncio
    async def test_lineage_ids(self, seeded):
        """Lineage covers the horse and every ancestor regardless of depth."""
        repo = HorseRepository(seeded)

        assert await repo.get_lineage_ids(-10) == {-10, -6, -7, -1, -2}
        assert await repo.get_lineage_ids(-1) == {-1}
        assert await repo.get_lineage_ids(-999) == set()

    @pytest.mark.asyncio
    async def test_lineage_ids_terminate_on_cycle(self, db_session):
        a = create_horse(name="A", sex=Sex.FEMALE)
        db_session.add(a)
        await db_session.flush()
        b = create_horse(name="B", mother_id=a.id)
        db_session.add(b)
        await db_session.flush()
        a.mother_id = b.id
        await db_session.flush()
        repo = HorseRepository(db_session)

        assert await repo.get_lineage_ids(a.id) == {a.id, b.id}
