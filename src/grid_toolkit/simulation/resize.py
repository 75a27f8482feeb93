"""
Module: simulation.resize

Purpose:
    Turn the pointer movement of a resize into a candidate item size and
    the layout that results from it.

Key Functions:
    - simulate_resize(): One resize tick

The item keeps its top-left cell. The pointer delta grows or shrinks the
pixel size, which is clamped to the item's min/max bounds, to the
remaining columns and, for fixed-height grids, to the remaining rows
before it is snapped to whole cells.

Used By:
    - interaction.machine: Resize ticks
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from grid_toolkit.core.models.geometry import ClientRect, Point, RenderRect, ScrollOffset
from grid_toolkit.core.models.items import GridItem, get_item
from grid_toolkit.engine.bounds import limit_to_range
from grid_toolkit.engine.config import GridConfig
from grid_toolkit.engine.displacement import displace
from grid_toolkit.engine.render import (
    item_pixel_rect,
    screen_height_to_grid_height,
    screen_width_to_grid_width,
)

from .metrics import GridMetrics
from .models import SimulationResult

logger = logging.getLogger(__name__)


def _span_limits(
    minimum: Optional[int],
    maximum: Optional[int],
    room: Optional[int],
) -> tuple[int, Optional[int]]:
    low = max(1, minimum or 1)
    high = maximum
    if room is not None:
        high = room if high is None else min(high, room)
    if high is not None:
        high = max(high, 1)
        low = min(low, high)
    return low, high


def simulate_resize(
    item_id: str,
    layout: Sequence[GridItem],
    config: GridConfig,
    pointer_start: Point,
    pointer_now: Point,
    item_start_rect: ClientRect,
    grid_rect: ClientRect,
    scroll_offset: ScrollOffset = ScrollOffset(),
    previous: Optional[Sequence[GridItem]] = None,
) -> SimulationResult:
    """
    Compute the layout for the current pointer position of a resize.

    Args:
        item_id: Id of the resized item in ``layout``
        layout: Working layout of the grid
        config: Grid configuration
        pointer_start: Pointer position when the resize started
        pointer_now: Current pointer position
        item_start_rect: Client rect of the item when the resize started
        grid_rect: Client rect of the grid
        scroll_offset: Scroll delta accumulated since the resize started
        previous: Layout holding the item's last accepted size

    Returns:
        SimulationResult whose ``dragged_item_rect`` keeps the start
        top-left with the continuous width/height

    Raises:
        UnknownItemId: If ``item_id`` is not in ``layout``
        ConfigMismatch: If row_height is "fit" and no height is usable
    """
    item = get_item(layout, item_id)
    metrics = GridMetrics.measure(layout, config, grid_rect)

    dx = pointer_now.x - pointer_start.x + scroll_offset.left
    dy = pointer_now.y - pointer_start.y + scroll_offset.top

    row_room = metrics.max_rows - item.y if metrics.max_rows is not None else None
    min_w, max_w = _span_limits(item.min_w, item.max_w, metrics.cols - item.x)
    min_h, max_h = _span_limits(item.min_h, item.max_h, row_room)

    # Clamp in pixels first so the live rect never outgrows what can be placed
    width = item_start_rect.width + dx
    height = item_start_rect.height + dy
    width = max(metrics.span_width(min_w), width)
    height = max(metrics.span_height(min_h), height)
    if max_w is not None:
        width = min(width, metrics.span_width(max_w))
    if max_h is not None:
        height = min(height, metrics.span_height(max_h))

    w = limit_to_range(screen_width_to_grid_width(width, metrics.col_width, metrics.gap), min_w, max_w)
    h = limit_to_range(screen_height_to_grid_height(height, metrics.row_height, metrics.gap), min_h, max_h)

    candidate = item.resized(w=w, h=h)
    logger.debug(f"Resize {item_id!r}: {item.w}x{item.h} -> {w}x{h}")

    resolved = displace(candidate, layout, config, previous=previous)
    placed = get_item(resolved.layout, item_id)
    return SimulationResult(
        layout=resolved.layout,
        item=placed,
        dragged_item_rect=RenderRect(
            id=item_id,
            top=item_start_rect.top - grid_rect.top,
            left=item_start_rect.left - grid_rect.left,
            width=width,
            height=height,
        ),
        placed_rect=item_pixel_rect(placed, metrics.col_width, metrics.row_height, metrics.gap),
        blocked=resolved.blocked,
        warnings=resolved.warnings,
    )
