"""
Module: engine.collision

Purpose:
    Axis-aligned overlap tests between grid items.
    Cells are half-open intervals, so items that only share an edge do
    not collide.

Key Functions:
    - collides(): Overlap test for two items
    - first_collision(): First item in a layout overlapping a given one
    - all_collisions(): Every item in a layout overlapping a given one

Used By:
    - engine.compaction: Descent stops at the first collision
    - engine.displacement: Push resolution
    - debug.occupancy: Overlap diagnostics
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from grid_toolkit.core.models.items import GridItem


def collides(a: GridItem, b: GridItem) -> bool:
    """
    Check whether two items overlap.

    An item never collides with itself (same id).

    Example:
        >>> collides(GridItem("a", 0, 0, 2, 2), GridItem("b", 1, 1, 2, 2))
        True
        >>> collides(GridItem("a", 0, 0, 2, 2), GridItem("b", 2, 0, 2, 2))
        False
    """
    if a.id == b.id:
        return False
    return a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h


def first_collision(layout: Iterable[GridItem], item: GridItem) -> Optional[GridItem]:
    """Return the first item in ``layout`` that collides with ``item``."""
    for other in layout:
        if collides(other, item):
            return other
    return None


def all_collisions(layout: Iterable[GridItem], item: GridItem) -> List[GridItem]:
    """Return every item in ``layout`` that collides with ``item``, in layout order."""
    return [other for other in layout if collides(other, item)]


def has_overlaps(layout: Iterable[GridItem]) -> bool:
    """Return whether any two items in the layout collide."""
    items = list(layout)
    return any(
        collides(a, b)
        for index, a in enumerate(items)
        for b in items[index + 1:]
    )
