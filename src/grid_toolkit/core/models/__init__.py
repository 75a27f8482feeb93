"""
Core Models Package

Immutable data models that describe grids in cell space (GridItem,
Layout) and pixel space (Point, ClientRect, ScrollOffset, RenderRect).

All models in this package are frozen dataclasses. Layout operations
return new tuples, so a layout handed to a caller can never be changed
behind its back by a running interaction.
"""

from .geometry import ClientRect, Point, RenderRect, ScrollOffset
from .items import (
    GridItem,
    Layout,
    as_layout,
    find_item,
    get_item,
    items_equal,
    layout_bottom,
    replace_item,
    validate,
    without_item,
)

__all__ = [
    "GridItem",
    "Layout",
    "validate",
    "as_layout",
    "find_item",
    "get_item",
    "replace_item",
    "without_item",
    "layout_bottom",
    "items_equal",
    "Point",
    "ClientRect",
    "ScrollOffset",
    "RenderRect",
]
