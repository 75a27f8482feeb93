"""
Module: interaction.listener

Purpose:
    Notification interface a grid's host implements. Every method is a
    no-op here; subclasses override what they need.

Notifications fire synchronously from the dispatch loop, at most once
per event, in the order the state machine produced them.
"""

from __future__ import annotations

from typing import Mapping

from grid_toolkit.core.errors import ErrorKind
from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem, Layout


class GridListener:
    """Base listener; override the notifications you care about."""

    def on_layout_updated(self, layout: Layout) -> None:
        """Committed layout changed (drop, drag end, compaction)."""

    def on_drag_start(self, item: GridItem, layout: Layout) -> None:
        pass

    def on_drag_end(self, item: GridItem, layout: Layout) -> None:
        pass

    def on_resize_start(self, item: GridItem, layout: Layout) -> None:
        pass

    def on_resize_end(self, item: GridItem, layout: Layout) -> None:
        pass

    def on_item_resize(self, width: float, height: float, item_id: str) -> None:
        """Snapped pixel size of the resized item changed."""

    def on_drag_enter(self, item: GridItem, layout: Layout) -> None:
        """A dragged item from a connected grid entered this grid."""

    def on_drag_exit(self, item: GridItem, layout: Layout) -> None:
        pass

    def on_drop(self, item: GridItem, source_grid_id: str, layout: Layout) -> None:
        """An item from ``source_grid_id`` was dropped into this grid."""

    def on_item_removed(self, item: GridItem, layout: Layout) -> None:
        """An item of this grid was dropped into another grid."""

    def on_render(self, rects: Mapping[str, RenderRect], grid_height: float) -> None:
        """
        Pixel rects to draw.

        While a session runs, the interacted item's live rect is keyed by
        its id and its snapped cell position by its placeholder id.
        """

    def on_error(self, kind: ErrorKind, message: str) -> None:
        pass
