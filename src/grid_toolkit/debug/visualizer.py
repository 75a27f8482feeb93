"""
Module: debug.visualizer

Purpose:
    Debug snapshot of a layout. Draws every item as a labelled box and
    marks cells covered by more than one item, to help diagnose
    compaction and collision issues.

Key Functions:
    - render_layout_snapshot(): Draw a layout into a new image
    - save_layout_snapshot(): Draw and save as PNG

Dependencies:
    - PIL: Image drawing
    - debug.occupancy: Overlap detection

Used By:
    - Developers, from tests or a REPL
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem
from grid_toolkit.engine.config import GridConfig
from grid_toolkit.engine.render import (
    column_width,
    item_pixel_rect,
    resolve_grid_height,
    resolve_row_height,
    to_pixel_rects,
)
from grid_toolkit.interaction.state import is_placeholder_id

from .occupancy import overlapping_cells

logger = logging.getLogger(__name__)

# Visualization constants
BACKGROUND_COLOR = (255, 255, 255, 255)
ITEM_COLOR = (70, 130, 180, 160)          # Steel blue - movable items
STATIC_COLOR = (128, 128, 128, 200)       # Grey - static items
PLACEHOLDER_COLOR = (255, 165, 0, 120)    # Orange - transfer placeholders
OVERLAP_COLOR = (255, 0, 0, 150)          # Red - cells covered twice
LABEL_TEXT_COLOR = (0, 0, 0)
BOX_LINE_WIDTH = 2
FONT_SIZE = 12


def _box(rect: RenderRect) -> Tuple[float, float, float, float]:
    # PIL wants inclusive corners with x1 >= x0
    right = max(rect.left, rect.left + rect.width - 1)
    bottom = max(rect.top, rect.top + rect.height - 1)
    return rect.left, rect.top, right, bottom


def _item_color(item: GridItem) -> Tuple[int, int, int, int]:
    if item.static:
        return STATIC_COLOR
    if is_placeholder_id(item.id):
        return PLACEHOLDER_COLOR
    return ITEM_COLOR


def render_layout_snapshot(
    layout: Sequence[GridItem],
    config: GridConfig,
    width: int,
    height: Optional[int] = None,
) -> Image.Image:
    """
    Draw a layout the way a renderer would place it.

    Args:
        layout: Items to draw
        config: Grid configuration
        width: Image width in pixels (the grid container width)
        height: Image height in pixels; defaults to the grid height

    Returns:
        New RGB image

    Raises:
        ConfigMismatch: If row_height is "fit" and no height is usable

    Example:
        >>> img = render_layout_snapshot(layout, GridConfig(cols=4), 400)
        >>> img.save("layout.png")
    """
    rects = to_pixel_rects(layout, config, width, height)
    if height is None:
        height = resolve_grid_height(layout, config)
    size = (max(1, int(width)), max(1, int(round(height))))

    img = Image.new("RGBA", size, BACKGROUND_COLOR)
    overlay = Image.new("RGBA", size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)
    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    for item in layout:
        rect = rects[item.id]
        color = _item_color(item)
        draw.rectangle(_box(rect), fill=color, outline=color[:3], width=BOX_LINE_WIDTH)
        draw.text((rect.left + 4, rect.top + 4), item.id, fill=LABEL_TEXT_COLOR, font=font)

    # Overlap cells on top so they stay visible
    row_height = resolve_row_height(layout, config, height)
    col_width = column_width(width, config.cols, config.gap)
    for x, y in overlapping_cells(layout, config.cols):
        cell = item_pixel_rect(GridItem("", x, y, 1, 1), col_width, row_height, config.gap)
        draw.rectangle(_box(cell), fill=OVERLAP_COLOR)

    return Image.alpha_composite(img, overlay).convert("RGB")


def save_layout_snapshot(
    layout: Sequence[GridItem],
    config: GridConfig,
    output_path: Path,
    width: int,
    height: Optional[int] = None,
) -> Path:
    """
    Render a layout snapshot and save it as PNG.

    Returns:
        Path to the saved image
    """
    img = render_layout_snapshot(layout, config, width, height)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(output_path, "PNG")
    logger.info(f"Saved layout snapshot with {len(layout)} item(s): {output_path}")
    return output_path
