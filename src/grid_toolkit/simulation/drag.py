"""
Module: simulation.drag

Purpose:
    Turn the pointer movement of a drag into a candidate cell position and
    the layout that results from placing the dragged item there.

Key Functions:
    - simulate_drag(): One drag tick

Steps:
    1. Pointer delta since the drag started, plus the scroll delta of the
       scrollable ancestor.
    2. Item top-left relative to the grid, clamped so the item stays
       inside the grid horizontally, below the top edge, and above the
       bottom edge of a fixed-height grid.
    3. Nearest cell for that pixel position, clamped to the columns (and
       rows of a fixed-height grid).
    4. Collision resolution and compaction (engine.displacement).

Used By:
    - interaction.machine: Drag ticks
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from grid_toolkit.core.models.geometry import ClientRect, Point, RenderRect, ScrollOffset
from grid_toolkit.core.models.items import GridItem, get_item
from grid_toolkit.engine.config import GridConfig
from grid_toolkit.engine.displacement import displace
from grid_toolkit.engine.render import item_pixel_rect, screen_x_to_grid_x, screen_y_to_grid_y

from .metrics import GridMetrics
from .models import SimulationResult

logger = logging.getLogger(__name__)


def simulate_drag(
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
    Compute the layout for the current pointer position of a drag.

    Args:
        item_id: Id of the dragged item in ``layout``
        layout: Working layout of the grid the pointer is over
        config: That grid's configuration
        pointer_start: Pointer position when the drag started
        pointer_now: Current pointer position
        item_start_rect: Client rect of the item when the drag started
        grid_rect: Client rect of the grid the pointer is over
        scroll_offset: Scroll delta accumulated since the drag started
        previous: Layout holding the item's last accepted position
            (defaults to ``layout``)

    Returns:
        SimulationResult with the new layout and the continuous item rect

    Raises:
        UnknownItemId: If ``item_id`` is not in ``layout``
        ConfigMismatch: If row_height is "fit" and no height is usable

    Example:
        >>> result = simulate_drag("a", layout, GridConfig(cols=4), Point(0, 0),
        ...                        Point(230, 0), ClientRect(0, 0, 100, 100),
        ...                        ClientRect(0, 0, 400, 400))
        >>> result.item.x
        2
    """
    item = get_item(layout, item_id)
    metrics = GridMetrics.measure(layout, config, grid_rect)

    dx = pointer_now.x - pointer_start.x + scroll_offset.left
    dy = pointer_now.y - pointer_start.y + scroll_offset.top

    left = item_start_rect.left + dx - grid_rect.left
    top = item_start_rect.top + dy - grid_rect.top

    left = max(0.0, min(left, grid_rect.width - item_start_rect.width))
    if config.height is not None:
        top = min(top, config.height - item_start_rect.height)
    top = max(0.0, top)

    w = min(item.w, metrics.cols)
    x = screen_x_to_grid_x(left, metrics.col_width, metrics.gap)
    y = screen_y_to_grid_y(top, metrics.row_height, metrics.gap)
    x = max(0, min(x, metrics.cols - w))
    if metrics.max_rows is not None:
        y = min(y, metrics.max_rows - item.h)
    y = max(0, y)

    candidate = item.moved(x=x, y=y)
    logger.debug(f"Drag {item_id!r}: pointer delta ({dx:.1f}, {dy:.1f}) -> cell ({x}, {y})")

    resolved = displace(candidate, layout, config, previous=previous)
    placed = get_item(resolved.layout, item_id)
    return SimulationResult(
        layout=resolved.layout,
        item=placed,
        dragged_item_rect=RenderRect(
            id=item_id,
            top=top,
            left=left,
            width=item_start_rect.width,
            height=item_start_rect.height,
        ),
        placed_rect=item_pixel_rect(placed, metrics.col_width, metrics.row_height, metrics.gap),
        blocked=resolved.blocked,
        warnings=resolved.warnings,
    )
