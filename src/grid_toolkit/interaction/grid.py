"""
Module: interaction.grid

Purpose:
    One grid instance: committed layout, configuration, container
    geometry and the listener that renders it. Grids start sessions and
    report pointer enter/leave; the shared DragContext runs them.

Key Classes:
    - Grid: Grid instance bound to a DragContext

Lifecycle:
    Grid(...) registers itself with the context. set_layout() repairs
    and (optionally) compacts incoming layouts. destroy() cancels any
    session that started here and unregisters the grid; every later call
    raises GridUnavailable.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Sequence

from grid_toolkit.core.errors import ConfigMismatch, ErrorKind, GridUnavailable, UnknownItemId
from grid_toolkit.core.models.geometry import ClientRect, Point, RenderRect
from grid_toolkit.core.models.items import GridItem, Layout, as_layout
from grid_toolkit.engine.bounds import repair_layout
from grid_toolkit.engine.compaction import compact
from grid_toolkit.engine.config import GridConfig
from grid_toolkit.engine.render import resolve_grid_height, to_pixel_rects

from .autoscroll import ScrollContainer
from .context import DragContext
from .events import GridDestroyed, InteractionKind, PointerDown, PointerEnter, PointerLeave
from .listener import GridListener
from .state import GridSnapshot, placeholder_id_for

logger = logging.getLogger(__name__)

_EMPTY_RECT = ClientRect(0.0, 0.0, 0.0, 0.0)


class Grid:
    """
    A grid of items taking part in drag/resize sessions.

    Args:
        grid_id: Identifier, unique within the context
        context: Shared session scope
        config: Grid geometry and collision policy
        layout: Initial layout (repaired and compacted like set_layout)
        client_rect: Container rect in client pixels
        connected_to: Ids of grids this grid accepts dragged items from
        scroll_container: Scrollable ancestor used for auto-scroll
        listener: Receives notifications and render data

    Example:
        >>> context = DragContext()
        >>> grid = Grid("main", context, GridConfig(cols=4),
        ...             [GridItem("a", 0, 2, 1, 1)],
        ...             client_rect=ClientRect(0, 0, 400, 300))
        >>> grid.layout
        (GridItem('a'@0,0 1x1),)
    """

    def __init__(
        self,
        grid_id: str,
        context: DragContext,
        config: Optional[GridConfig] = None,
        layout: Iterable[GridItem] = (),
        *,
        client_rect: Optional[ClientRect] = None,
        connected_to: Iterable[str] = (),
        scroll_container: Optional[ScrollContainer] = None,
        listener: Optional[GridListener] = None,
    ) -> None:
        self.id = grid_id
        self.context = context
        self.connected_to = set(connected_to)
        self.scroll_container = scroll_container
        self.listener = listener or GridListener()
        self._config = config or GridConfig()
        self._client_rect = client_rect or _EMPTY_RECT
        self._layout: Layout = ()
        self._destroyed = False

        context.register(self)
        self.set_layout(layout)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def layout(self) -> Layout:
        """Committed layout."""
        return self._layout

    @property
    def client_rect(self) -> ClientRect:
        return self._client_rect

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def grid_height(self) -> float:
        """
        Container height in pixels.

        Raises:
            ConfigMismatch: If row_height is "fit" and no height is usable
        """
        return resolve_grid_height(self._layout, self._config, self._client_rect.height)

    # ─────────────────────────────────────────────────────────────────────────
    # Layout and configuration
    # ─────────────────────────────────────────────────────────────────────────

    def set_layout(self, layout: Iterable[GridItem]) -> Layout:
        """
        Replace the committed layout.

        Malformed items are clamped or dropped (reported via on_error);
        the result is compacted when compact_on_props_change is set.

        Returns:
            The layout actually stored
        """
        self._ensure_alive()
        repaired, warnings = repair_layout(as_layout(layout), self._config)
        for message in warnings:
            self.listener.on_error(ErrorKind.INVALID_ITEM_BOUNDS, message)
        self._layout = repaired
        if self.context.settings.compact_on_props_change:
            self.compact_layout()
        self.render()
        return self._layout

    def set_config(self, config: GridConfig) -> None:
        """Replace the configuration; re-compacts when cols or compaction change."""
        self._ensure_alive()
        previous = self._config
        self._config = config
        changed = (previous.cols, previous.compact_type) != (config.cols, config.compact_type)
        if changed and self.context.settings.compact_on_props_change:
            self.compact_layout()
        self.render()

    def compact_layout(self) -> Layout:
        """Compact the committed layout, notifying on_layout_updated if it changed."""
        self._ensure_alive()
        compacted = compact(self._layout, self._config.compact_type, self._config.cols)
        if compacted != self._layout:
            logger.debug(f"Grid {self.id!r} compacted")
            self._layout = compacted
            self.listener.on_layout_updated(compacted)
        return self._layout

    def resize(self, width: float, height: float) -> None:
        """Container size changed (position unchanged)."""
        rect = self._client_rect
        self.set_client_rect(ClientRect(rect.left, rect.top, width, height))

    def set_client_rect(self, rect: ClientRect) -> None:
        self._ensure_alive()
        self._client_rect = rect
        self.render()

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render_rects(self) -> Dict[str, RenderRect]:
        """
        Pixel rect of every committed item.

        Raises:
            ConfigMismatch: If row_height is "fit" and no height is usable
        """
        return to_pixel_rects(
            self._layout, self._config, self._client_rect.width, self._client_rect.height
        )

    def item_render_rect(self, item_id: str) -> RenderRect:
        """
        Pixel rect of one committed item.

        Raises:
            UnknownItemId: If the item is not in the layout
        """
        rect = self.render_rects().get(item_id)
        if rect is None:
            raise UnknownItemId(item_id, self.id)
        return rect

    def item_client_rect(self, item_id: str) -> ClientRect:
        """Client rect of one committed item."""
        rect = self.item_render_rect(item_id)
        return ClientRect(
            self._client_rect.left + rect.left,
            self._client_rect.top + rect.top,
            rect.width,
            rect.height,
        )

    def render(self) -> None:
        """Send the committed layout's rects to the listener."""
        try:
            rects = self.render_rects()
            height = self.grid_height
        except ConfigMismatch as e:
            logger.warning(f"Grid {self.id!r} cannot render: {e}")
            self.listener.on_error(e.kind, str(e))
            return
        self.listener.on_render(rects, height)

    def render_preview(self, layout: Sequence[GridItem], dragged_rect: Optional[RenderRect]) -> None:
        """Send a session's working layout, with the live item rect, to the listener."""
        try:
            rects = to_pixel_rects(
                layout, self._config, self._client_rect.width, self._client_rect.height
            )
            height = resolve_grid_height(layout, self._config, self._client_rect.height)
        except ConfigMismatch as e:
            # Already reported by the tick that produced this preview
            logger.debug(f"Grid {self.id!r} skipped preview: {e}")
            return
        if dragged_rect is not None:
            snapped = rects.pop(dragged_rect.id, None)
            if snapped is not None:
                rects[placeholder_id_for(dragged_rect.id)] = snapped
            rects[dragged_rect.id] = dragged_rect
        self.listener.on_render(rects, height)

    def commit_layout(self, layout: Sequence[GridItem]) -> None:
        """Store the layout a session committed and notify."""
        self._layout = as_layout(layout)
        logger.info(f"Grid {self.id!r} committed {len(self._layout)} item(s)")
        self.listener.on_layout_updated(self._layout)
        self.render()

    # ─────────────────────────────────────────────────────────────────────────
    # Sessions
    # ─────────────────────────────────────────────────────────────────────────

    def snapshot(self) -> GridSnapshot:
        scroll_rect = self.scroll_container.client_rect() if self.scroll_container else None
        return GridSnapshot(
            grid_id=self.id,
            config=self._config,
            layout=self._layout,
            client_rect=self._client_rect,
            connected_to=frozenset(self.connected_to),
            scroll_rect=scroll_rect,
        )

    def start_drag(self, item_id: str, pointer: Point, item_rect: Optional[ClientRect] = None) -> None:
        """Start dragging ``item_id``; ``item_rect`` defaults to its rendered rect."""
        self._start(item_id, InteractionKind.DRAG, pointer, item_rect)

    def start_resize(self, item_id: str, pointer: Point, item_rect: Optional[ClientRect] = None) -> None:
        """Start resizing ``item_id`` from its bottom-right handle."""
        self._start(item_id, InteractionKind.RESIZE, pointer, item_rect)

    def pointer_enter(self) -> None:
        self._ensure_alive()
        self.context.dispatch(PointerEnter(self.id))

    def pointer_leave(self) -> None:
        self._ensure_alive()
        self.context.dispatch(PointerLeave(self.id))

    def destroy(self) -> None:
        """Unregister the grid, cancelling a session that started here."""
        if self._destroyed:
            return
        self._destroyed = True
        self.context.unregister(self.id)
        self.context.dispatch(GridDestroyed(self.id))
        logger.debug(f"Grid {self.id!r} destroyed")

    def _start(
        self,
        item_id: str,
        kind: InteractionKind,
        pointer: Point,
        item_rect: Optional[ClientRect],
    ) -> None:
        self._ensure_alive()
        if item_rect is None:
            try:
                item_rect = self.item_client_rect(item_id)
            except (UnknownItemId, ConfigMismatch):
                # The session start reports it
                item_rect = _EMPTY_RECT
        self.context.dispatch(
            PointerDown(self.id, item_id, kind, pointer, item_rect, timestamp=self.context.now())
        )

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise GridUnavailable(self.id)

    def __repr__(self) -> str:
        return f"Grid({self.id!r}, items={len(self._layout)}, cols={self._config.cols})"
