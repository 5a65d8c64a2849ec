"""Small helpers shared by tests."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession


async def count_rows(session: AsyncSession, model) -> int:
    """Count rows of a model table."""
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


def collect_ids(node) -> set[int]:
    """Collect the ids of every node reachable from a family tree root."""
    ids = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if current is None or current.id in ids:
            continue
        ids.add(current.id)
        stack.extend([current.mother, current.father])
    return ids
