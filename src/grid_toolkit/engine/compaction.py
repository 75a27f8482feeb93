"""
Module: engine.compaction

Purpose:
    Remove gaps from a layout by pulling items toward the top (vertical)
    or the left (horizontal) edge without creating overlaps.

Key Functions:
    - compact(): Compact a whole layout
    - compact_item(): Settle one item against already placed items
    - sort_layout_items(): Processing order for a compaction pass
    - correct_bounds(): Horizontal clamp into [0, cols)

Algorithm:
    1. Static items are placed first; they never move.
    2. Remaining items are visited in (y, x) order for vertical and
       (x, y) order for horizontal compaction. Python's sort is stable,
       so ties keep their layout order.
    3. Each item is first moved clear of any placed item it overlaps,
       then slides toward the edge one cell at a time until the next
       step would collide or it reaches the edge.
    4. The result keeps the input order.

    Earlier items are settled before later ones and never revisited, so a
    pass is deterministic and a second pass changes nothing.

Used By:
    - engine.displacement: Re-compaction after a push
    - interaction.grid: compact_layout() on property changes
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from grid_toolkit.core.models.items import GridItem, Layout, layout_bottom

from .collision import first_collision
from .config import CompactType

logger = logging.getLogger(__name__)


def sort_layout_items(
    layout: Sequence[GridItem],
    compact_type: Optional[CompactType],
) -> List[GridItem]:
    """
    Return items in compaction processing order.

    Vertical (and None) sorts by (y, x); horizontal sorts by (x, y).
    """
    return sorted(layout, key=_sort_key(compact_type))


def _sort_key(compact_type: Optional[CompactType]) -> Callable[[GridItem], Tuple[int, int]]:
    if compact_type is CompactType.HORIZONTAL:
        return lambda item: (item.x, item.y)
    return lambda item: (item.y, item.x)


def correct_bounds(item: GridItem, cols: int) -> GridItem:
    """
    Clamp an item horizontally so it lies within ``cols`` columns.

    Items wider than the grid are narrowed to ``cols``. Rows are left
    untouched.
    """
    w = min(item.w, cols)
    x = max(0, min(item.x, cols - w))
    if (x, w) == (item.x, item.w):
        return item
    logger.debug(f"Clamped {item.id!r} into {cols} cols: x {item.x}->{x}, w {item.w}->{w}")
    return item.moved(x=x).resized(w=w)


def compact_item(
    placed: Sequence[GridItem],
    item: GridItem,
    compact_type: CompactType,
    cols: int,
) -> GridItem:
    """
    Settle one item against already placed items.

    Args:
        placed: Items whose positions are final for this pass
        item: Item to move
        compact_type: Direction of compaction
        cols: Grid width in columns

    Returns:
        Copy of ``item`` at its compacted position
    """
    if compact_type is CompactType.VERTICAL:
        return _compact_vertical(placed, item)
    return _compact_horizontal(placed, item, cols)


def _compact_vertical(placed: Sequence[GridItem], item: GridItem) -> GridItem:
    # Rows at or below the bottom of placed items are always free
    y = max(0, min(layout_bottom(placed), item.y))
    item = item.moved(y=y)

    while (collision := first_collision(placed, item)) is not None:
        item = item.moved(y=collision.bottom)

    while item.y > 0 and first_collision(placed, item.moved(y=item.y - 1)) is None:
        item = item.moved(y=item.y - 1)
    return item


def _compact_horizontal(placed: Sequence[GridItem], item: GridItem, cols: int) -> GridItem:
    item = item.moved(x=max(0, min(item.x, cols - item.w)), y=max(0, item.y))

    while (collision := first_collision(placed, item)) is not None:
        x = collision.right
        if x + item.w > cols:
            # No room to the right on this row
            item = item.moved(x=cols - item.w, y=item.y + 1)
        else:
            item = item.moved(x=x)

    while item.x > 0 and first_collision(placed, item.moved(x=item.x - 1)) is None:
        item = item.moved(x=item.x - 1)
    return item


def compact(
    layout: Sequence[GridItem],
    compact_type: Union[CompactType, str, None],
    cols: int,
) -> Layout:
    """
    Compact a layout.

    Args:
        layout: Items to compact (not modified)
        compact_type: VERTICAL, HORIZONTAL, their string values, or None
        cols: Grid width in columns

    Returns:
        New layout in the same order as ``layout``. With ``compact_type``
        None items only get their horizontal bounds corrected.

    Example:
        >>> compact([GridItem("a", 0, 3, 1, 1)], CompactType.VERTICAL, 4)
        (GridItem('a'@0,0 1x1),)
    """
    compact_type = CompactType.parse(compact_type)
    bounded = [correct_bounds(item, cols) for item in layout]
    if compact_type is None:
        return tuple(bounded)

    placed: List[GridItem] = [item for item in bounded if item.static]
    out: List[Optional[GridItem]] = [None] * len(bounded)

    key = _sort_key(compact_type)
    order = sorted(range(len(bounded)), key=lambda i: key(bounded[i]))
    for index in order:
        item = bounded[index]
        if not item.static:
            item = compact_item(placed, item, compact_type, cols)
            placed.append(item)
        out[index] = item

    return tuple(out)  # type: ignore[arg-type]
