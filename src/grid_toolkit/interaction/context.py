"""
Module: interaction.context

Purpose:
    Session scope shared by every grid that can exchange items. Holds
    the grid registry and the one dispatcher that runs sessions, and is
    injected into each Grid on construction.

Key Classes:
    - DragContext: Grid registry plus pointer entry points
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional

from grid_toolkit.core.models.geometry import Point
from grid_toolkit.engine.config import InteractionConfig

from .dispatcher import InteractionDispatcher, StateObserver
from .events import Event, PointerCancel, PointerMove, PointerUp
from .state import GridSnapshot, State

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)


class DragContext:
    """
    Registry of connected grids and owner of their dispatcher.

    At most one session runs per context. Pointer moves and releases
    are reported here because they are not tied to a single grid.

    Usage:
        context = DragContext()
        left = Grid("left", context, layout=items, connected_to={"right"})
        right = Grid("right", context, connected_to={"left"})

        left.start_drag("a", Point(10, 10))
        context.pointer_move(Point(300, 40))
        right.pointer_enter()
        context.pointer_up()
    """

    def __init__(
        self,
        settings: Optional[InteractionConfig] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.settings = settings or InteractionConfig()
        self._grids: Dict[str, Grid] = {}
        self.dispatcher = InteractionDispatcher(self, self.settings, clock)

    # ─────────────────────────────────────────────────────────────────────────
    # Registry
    # ─────────────────────────────────────────────────────────────────────────

    def register(self, grid: Grid) -> None:
        """
        Add a grid to the context.

        Raises:
            ValueError: If another grid already uses the same id
        """
        existing = self._grids.get(grid.id)
        if existing is not None and existing is not grid:
            raise ValueError(f"Grid id {grid.id!r} is already registered")
        self._grids[grid.id] = grid
        logger.debug(f"Registered grid {grid.id!r}")

    def unregister(self, grid_id: str) -> None:
        if self._grids.pop(grid_id, None) is not None:
            logger.debug(f"Unregistered grid {grid_id!r}")

    def get(self, grid_id: str) -> Optional[Grid]:
        return self._grids.get(grid_id)

    @property
    def grids(self) -> List[Grid]:
        return list(self._grids.values())

    def snapshots(self) -> Mapping[str, GridSnapshot]:
        return {grid_id: grid.snapshot() for grid_id, grid in self._grids.items()}

    # ─────────────────────────────────────────────────────────────────────────
    # Events
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> State:
        return self.dispatcher.state

    @property
    def is_active(self) -> bool:
        return self.dispatcher.is_active

    def now(self) -> float:
        """Current time of the dispatcher clock (ms)."""
        return self.dispatcher.now()

    def add_observer(self, observer: StateObserver) -> None:
        self.dispatcher.add_observer(observer)

    def dispatch(self, event: Event) -> None:
        self.dispatcher.dispatch(event)

    def pointer_move(self, pointer: Point) -> None:
        self.dispatch(PointerMove(pointer, timestamp=self.now()))

    def scroll_changed(self, dx: float, dy: float) -> None:
        """
        Report a user scroll of the container by (dx, dy) pixels.

        Only user scrolls belong here. Auto-scroll steps applied through
        ScrollContainer.scroll_by are already counted by the dispatcher.
        """
        self.dispatcher.scroll_by(dx, dy)

    def pointer_up(self) -> None:
        self.dispatch(PointerUp(timestamp=self.now()))

    def pointer_cancel(self) -> None:
        self.dispatch(PointerCancel(timestamp=self.now()))

    def pump(self) -> None:
        self.dispatcher.pump()
