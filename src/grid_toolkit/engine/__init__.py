"""
Module: engine

Purpose:
    Geometry engine for grid layouts: collision tests, compaction,
    collision displacement, bounds repair and cell <-> pixel mapping.
    Everything here is a pure function of its inputs.

Key Functions:
    - collides(): Overlap test
    - compact(): Vertical / horizontal / free compaction
    - resolve_collisions(): Place a moved item and push others away
    - repair_layout(): Clamp or drop malformed items
    - to_pixel_rects(): Cell layout -> pixel rectangles

Key Classes:
    - GridConfig: Grid geometry and collision policy
    - InteractionConfig: Throttle and auto-scroll settings
    - CompactType: Compaction direction

Used By:
    - simulation: Drag/resize ticks
    - interaction.grid: Grid instances
"""

from .bounds import clamp_item, repair_layout
from .collision import all_collisions, collides, first_collision, has_overlaps
from .compaction import compact, compact_item, sort_layout_items
from .config import FIT, CompactType, GridConfig, InteractionConfig
from .displacement import DisplacementResult, displace, resolve_collisions
from .render import (
    column_width,
    fit_row_height,
    grid_pixel_height,
    resolve_grid_height,
    resolve_row_height,
    to_pixel_rects,
)

__all__ = [
    # Config
    "FIT",
    "CompactType",
    "GridConfig",
    "InteractionConfig",
    # Collision
    "collides",
    "first_collision",
    "all_collisions",
    "has_overlaps",
    # Compaction
    "compact",
    "compact_item",
    "sort_layout_items",
    # Displacement
    "DisplacementResult",
    "displace",
    "resolve_collisions",
    # Bounds
    "clamp_item",
    "repair_layout",
    # Render mapping
    "to_pixel_rects",
    "grid_pixel_height",
    "fit_row_height",
    "column_width",
    "resolve_row_height",
    "resolve_grid_height",
]
