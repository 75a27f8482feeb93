"""
Module: engine.render

Purpose:
    Convert between cell space and pixel space.
    Pure functions: no hidden state, no rounding (the rendering surface
    snaps final pixels).

Key Functions:
    - to_pixel_rects(): Layout -> {id: RenderRect}
    - grid_pixel_height(): Content height of a layout
    - fit_row_height(): Row height for row_height="fit"
    - resolve_row_height() / resolve_grid_height(): Config-aware helpers
    - column_width(): Width of one column
    - screen_x_to_grid_x() and friends: Inverse mapping used by the simulator

Geometry:
    left   = x * col_width + gap * x
    top    = y * row_height + gap * y
    width  = w * col_width + gap * max(w - 1, 0)
    height = h * row_height + gap * max(h - 1, 0)

Used By:
    - simulation.*: Cell snapping of pointer positions
    - interaction.grid: Render data for the rendering surface
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Sequence

from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem, layout_bottom

from .config import GridConfig, require_fit_height

logger = logging.getLogger(__name__)


def column_width(container_width: float, cols: int, gap: float) -> float:
    """Width of one column once the gaps are taken out."""
    width_excluding_gap = container_width - max(gap * (cols - 1), 0)
    return width_excluding_gap / cols


def fit_row_height(layout: Sequence[GridItem], grid_height: float, gap: float) -> float:
    """
    Row height that makes the layout's rows fill ``grid_height`` exactly.

    An empty layout counts as one row. The result is at least 1px.
    """
    rows = max(layout_bottom(layout), 1)
    gap_total = (rows - 1) * gap
    return max(1.0, (grid_height - gap_total) / rows)


def resolve_row_height(
    layout: Sequence[GridItem],
    config: GridConfig,
    measured_height: Optional[float] = None,
) -> float:
    """
    Effective row height in pixels.

    Raises:
        ConfigMismatch: If row_height is "fit" and no height is usable
    """
    if config.is_fit:
        return fit_row_height(layout, require_fit_height(config, measured_height), config.gap)
    return float(config.row_height)


def grid_pixel_height(layout: Sequence[GridItem], row_height: float, gap: float) -> float:
    """Pixel height needed to show every item (0 for an empty layout)."""
    return max(
        (
            item.bottom * row_height + max(item.bottom - 1, 0) * gap
            for item in layout
        ),
        default=0.0,
    )


def resolve_grid_height(
    layout: Sequence[GridItem],
    config: GridConfig,
    measured_height: Optional[float] = None,
) -> float:
    """
    Height of the grid container.

    Uses the fixed config height when set, the measured container height
    for "fit" grids, and the content height otherwise.
    """
    if config.height is not None:
        return config.height
    if config.is_fit:
        return require_fit_height(config, measured_height)
    return grid_pixel_height(layout, float(config.row_height), config.gap)


def item_pixel_rect(
    item: GridItem,
    col_width: float,
    row_height: float,
    gap: float,
) -> RenderRect:
    """Pixel rectangle of a single item."""
    return RenderRect(
        id=item.id,
        top=item.y * row_height + gap * item.y,
        left=item.x * col_width + gap * item.x,
        width=item.w * col_width + gap * max(item.w - 1, 0),
        height=item.h * row_height + gap * max(item.h - 1, 0),
    )


def to_pixel_rects(
    layout: Sequence[GridItem],
    config: GridConfig,
    container_width: float,
    container_height: Optional[float] = None,
) -> Dict[str, RenderRect]:
    """
    Map every item of a layout to its pixel rectangle.

    Args:
        layout: Items to map
        config: Grid configuration
        container_width: Grid container width in pixels
        container_height: Grid container height in pixels (needed for
            row_height="fit" when config.height is None)

    Returns:
        Dict of item id to RenderRect, in layout order

    Raises:
        ConfigMismatch: If row_height is "fit" and no height is usable

    Example:
        >>> rects = to_pixel_rects([GridItem("a", 0, 0, 1, 1)],
        ...                        GridConfig(cols=1, row_height=100), 200)
        >>> rects["a"]
        RenderRect(id='a', top=0.0, left=0.0, width=200.0, height=100.0)
    """
    row_height = resolve_row_height(layout, config, container_height)
    col_width = column_width(container_width, config.cols, config.gap)
    return {
        item.id: item_pixel_rect(item, col_width, row_height, config.gap)
        for item in layout
    }


# ─────────────────────────────────────────────────────────────────────────────
# Inverse mapping (pixels -> cells)
# ─────────────────────────────────────────────────────────────────────────────

def _round_half_up(value: float) -> int:
    # round() is banker's rounding; pointer snapping wants 2.5 -> 3
    return math.floor(value + 0.5)


def screen_x_to_grid_x(left: float, col_width: float, gap: float) -> int:
    """Nearest column for a pixel left offset."""
    return _round_half_up(left / (col_width + gap)) if col_width + gap > 0 else 0


def screen_y_to_grid_y(top: float, row_height: float, gap: float) -> int:
    """Nearest row for a pixel top offset."""
    return _round_half_up(top / (row_height + gap)) if row_height + gap > 0 else 0


def screen_width_to_grid_width(width: float, col_width: float, gap: float) -> int:
    """Nearest column span for a pixel width."""
    return _round_half_up((width + gap) / (col_width + gap)) if col_width + gap > 0 else 1


def screen_height_to_grid_height(height: float, row_height: float, gap: float) -> int:
    """Nearest row span for a pixel height."""
    return _round_half_up((height + gap) / (row_height + gap)) if row_height + gap > 0 else 1
