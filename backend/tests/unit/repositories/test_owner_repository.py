"""Tests for owner repository."""

import pytest

from app.repositories.owner_repository import OwnerRepository


class TestOwnerRepository:
    """Tests for OwnerRepository specialized queries."""

    @pytest.mark.asyncio
    async def test_get_all_by_id(self, seeded):
        """Only the requested owners are returned."""
        repo = OwnerRepository(seeded)

        owners = await repo.get_all_by_id({-1, -10})

        assert {o.id for o in owners} == {-1, -10}

    @pytest.mark.asyncio
    async def test_get_all_by_id_skips_unknown(self, seeded):
        """Unknown ids are silently skipped at repository level."""
        repo = OwnerRepository(seeded)

        owners = await repo.get_all_by_id([-1, -999])

        assert [o.id for o in owners] == [-1]

    @pytest.mark.asyncio
    async def test_get_all_by_id_empty(self, seeded):
        """No ids, no query, no owners."""
        repo = OwnerRepository(seeded)

        assert await repo.get_all_by_id([]) == []

    @pytest.mark.asyncio
    async def test_search_by_full_name(self, seeded):
        """Search matches "first last" case-insensitively."""
        repo = OwnerRepository(seeded)

        owners = await repo.search("LAZAREVIC")
        max_owners = await repo.search("x mus")

        assert {o.id for o in owners} == {-1, -6, -8, -9}
        assert [o.id for o in max_owners] == [-10]

    @pytest.mark.asyncio
    async def test_search_without_name(self, seeded):
        """No name returns all owners."""
        repo = OwnerRepository(seeded)

        assert len(await repo.search()) == 10

    @pytest.mark.asyncio
    async def test_search_limit(self, seeded):
        """Limit truncates the result."""
        repo = OwnerRepository(seeded)

        assert len(await repo.search("lazarevic", limit=2)) == 2

    @pytest.mark.asyncio
    async def test_search_blank_name_is_ignored(self, seeded):
        """A whitespace-only name does not filter, as in the horse search."""
        repo = OwnerRepository(seeded)

        assert len(await repo.search("   ")) == 10
