"""Qt signal bridge for grid notifications.

Wraps every GridListener notification in a PySide6 Signal so widgets can
connect to grid events the usual Qt way.
"""
from __future__ import annotations

from typing import Mapping, Optional

from PySide6.QtCore import QObject, Signal

from grid_toolkit.core.errors import ErrorKind
from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem, Layout
from grid_toolkit.interaction.listener import GridListener


class GridSignals(QObject, GridListener):
    """GridListener that re-emits notifications as Qt signals.

    Usage:
        signals = GridSignals()
        signals.layout_updated.connect(self._on_layout)
        signals.rendered.connect(self._repaint)
        grid = Grid("main", context, config, items, listener=signals)
    """

    # (layout)
    layout_updated = Signal(object)
    # (item, layout)
    drag_started = Signal(object, object)
    drag_ended = Signal(object, object)
    resize_started = Signal(object, object)
    resize_ended = Signal(object, object)
    drag_entered = Signal(object, object)
    drag_exited = Signal(object, object)
    item_removed = Signal(object, object)
    # (width, height, item_id)
    item_resized = Signal(float, float, str)
    # (item, source_grid_id, layout)
    dropped = Signal(object, str, object)
    # (rects, grid_height)
    rendered = Signal(object, float)
    # (kind, message)
    error = Signal(object, str)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)

    def on_layout_updated(self, layout: Layout) -> None:
        self.layout_updated.emit(layout)

    def on_drag_start(self, item: GridItem, layout: Layout) -> None:
        self.drag_started.emit(item, layout)

    def on_drag_end(self, item: GridItem, layout: Layout) -> None:
        self.drag_ended.emit(item, layout)

    def on_resize_start(self, item: GridItem, layout: Layout) -> None:
        self.resize_started.emit(item, layout)

    def on_resize_end(self, item: GridItem, layout: Layout) -> None:
        self.resize_ended.emit(item, layout)

    def on_item_resize(self, width: float, height: float, item_id: str) -> None:
        self.item_resized.emit(float(width), float(height), item_id)

    def on_drag_enter(self, item: GridItem, layout: Layout) -> None:
        self.drag_entered.emit(item, layout)

    def on_drag_exit(self, item: GridItem, layout: Layout) -> None:
        self.drag_exited.emit(item, layout)

    def on_drop(self, item: GridItem, source_grid_id: str, layout: Layout) -> None:
        self.dropped.emit(item, source_grid_id, layout)

    def on_item_removed(self, item: GridItem, layout: Layout) -> None:
        self.item_removed.emit(item, layout)

    def on_render(self, rects: Mapping[str, RenderRect], grid_height: float) -> None:
        self.rendered.emit(dict(rects), float(grid_height))

    def on_error(self, kind: ErrorKind, message: str) -> None:
        self.error.emit(kind, message)
