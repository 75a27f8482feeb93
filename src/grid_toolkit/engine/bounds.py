"""
Module: engine.bounds

Purpose:
    Recover malformed item geometry before it reaches compaction.
    Clamps what can be clamped and drops what cannot, returning
    human-readable warnings for both.

Key Functions:
    - clamp_item(): Force one item inside its own and the grid's bounds
    - repair_layout(): Clamp every item, drop unrecoverable ones

Used By:
    - interaction.grid: set_layout()
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from grid_toolkit.core.errors import InvalidItemBounds
from grid_toolkit.core.models.items import GridItem, Layout, validate

from .config import GridConfig

logger = logging.getLogger(__name__)


def limit_to_range(value: int, minimum: Optional[int], maximum: Optional[int]) -> int:
    """Clamp ``value`` into [minimum, maximum]; None means unbounded."""
    if minimum is not None:
        value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value


def clamp_item(item: GridItem, config: GridConfig) -> GridItem:
    """
    Return a copy of ``item`` that satisfies validate(item, config).

    Raises:
        InvalidItemBounds: If the item's own constraints are contradictory
            (min > max) or its minimum width exceeds the grid
    """
    for axis in ("w", "h"):
        low, high = getattr(item, f"min_{axis}"), getattr(item, f"max_{axis}")
        if low is not None and high is not None and low > high:
            raise InvalidItemBounds(
                f"Item {item.id!r} has min_{axis}={low} > max_{axis}={high}", item.id
            )
    if item.min_w is not None and item.min_w > config.cols:
        raise InvalidItemBounds(
            f"Item {item.id!r} needs {item.min_w} cols, grid has {config.cols}", item.id
        )

    w = limit_to_range(max(1, item.w), item.min_w, item.max_w)
    w = min(w, config.cols)
    h = limit_to_range(max(1, item.h), item.min_h, item.max_h)
    x = max(0, min(item.x, config.cols - w))
    y = max(0, item.y)
    return item.moved(x=x, y=y).resized(w=w, h=h)


def repair_layout(
    layout: Sequence[GridItem],
    config: GridConfig,
) -> Tuple[Layout, List[str]]:
    """
    Clamp every item into valid bounds.

    Items that cannot be repaired, and later duplicates of an id, are
    dropped.

    Args:
        layout: Possibly malformed layout
        config: Grid configuration

    Returns:
        (repaired layout, warnings)
    """
    repaired: List[GridItem] = []
    warnings: List[str] = []
    seen: set[str] = set()

    for item in layout:
        if item.id in seen:
            warnings.append(f"Dropped duplicate item id {item.id!r}")
            continue
        try:
            validate(item, config)
            fixed = item
        except InvalidItemBounds as e:
            try:
                fixed = clamp_item(item, config)
            except InvalidItemBounds as fatal:
                warnings.append(f"Dropped item {item.id!r}: {fatal}")
                continue
            warnings.append(f"Clamped item {item.id!r}: {e}")
        seen.add(item.id)
        repaired.append(fixed)

    for message in warnings:
        logger.warning(message)
    return tuple(repaired), warnings
