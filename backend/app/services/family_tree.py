"""Reconstruction of a pedigree tree from flattened ancestor rows."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from app.exceptions import FatalInconsistencyError
from app.repositories import AncestorRow


@dataclass(eq=False)
class FamilyNode:
    """Transient tree node; never persisted."""

    id: int
    name: str
    date_of_birth: date
    mother: FamilyNode | None = field(default=None, repr=False)
    father: FamilyNode | None = field(default=None, repr=False)


def build_family_tree(rows: Iterable[AncestorRow], root_id: int) -> FamilyNode | None:
    """Link ancestor rows into a tree and return the node of ``root_id``.

    First every row gets a node in an id-indexed map, then parent pointers
    are resolved against that map. A parent id without a node (outside the
    generation bound or deleted) stays unlinked. The result does not depend
    on the order of ``rows``.
    """
    rows = list(rows)
    nodes: dict[int, FamilyNode] = {}
    for row in rows:
        nodes.setdefault(row.id, FamilyNode(row.id, row.name, row.date_of_birth))

    for row in rows:
        node = nodes[row.id]
        if row.mother_id is not None:
            node.mother = nodes.get(row.mother_id)
        if row.father_id is not None:
            node.father = nodes.get(row.father_id)

    root = nodes.get(root_id)
    if root is not None:
        _ensure_acyclic(root)
    return root


def _ensure_acyclic(root: FamilyNode) -> None:
    """Raise if a horse turns out to be its own ancestor."""
    on_path: set[int] = set()
    done: set[int] = set()
    # iterative DFS; (node, expanded) pairs
    stack: list[tuple[FamilyNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            on_path.discard(node.id)
            done.add(node.id)
            continue
        if node.id in done:
            continue
        if node.id in on_path:
            raise FatalInconsistencyError(
                f"Horse with ID {node.id} is recorded as its own ancestor"
            )
        on_path.add(node.id)
        stack.append((node, True))
        for parent in (node.mother, node.father):
            if parent is not None and parent.id not in done:
                if parent.id in on_path:
                    raise FatalInconsistencyError(
                        f"Horse with ID {parent.id} is recorded as its own ancestor"
                    )
                stack.append((parent, False))
