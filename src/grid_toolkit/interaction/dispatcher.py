"""
Module: interaction.dispatcher

Purpose:
    Single-threaded event loop around the interaction state machine.
    The dispatcher owns the machine state (nothing else writes it),
    throttles ticks, applies effects to grids and drives auto-scroll.

Key Classes:
    - InteractionDispatcher: Event queue and dispatch loop
    - GridRegistry: What the dispatcher needs from its owner

Loop:
    1. dispatch()/post() queue an event.
    2. process() drains the queue. Ticks pass through a TickCoalescer;
       any other event flushes held ticks first.
    3. Each event goes through transition(); the effects are applied in
       order before the next event is taken.
    4. pump() (called periodically by the host, e.g. a QTimer) delivers
       held ticks and advances auto-scroll.

Events posted from inside a listener are queued and handled after the
current event, never re-entrantly.

Used By:
    - interaction.context: One dispatcher per DragContext
    - qt.driver: Periodic pump()
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import TYPE_CHECKING, Callable, Deque, List, Mapping, Optional, Protocol

from grid_toolkit.core.models.geometry import ScrollOffset
from grid_toolkit.engine.config import InteractionConfig

from .autoscroll import AutoScroller
from .effects import (
    AutoScrollRequested,
    DragEnded,
    DragEntered,
    DragExited,
    DragStarted,
    Dropped,
    Effect,
    ErrorReported,
    ItemRemoved,
    ItemResized,
    LayoutCommitted,
    RenderPreview,
    ResizeEnded,
    ResizeStarted,
    SessionCancelled,
)
from .events import Event, PointerDown, ScrollChanged
from .machine import transition
from .state import RUNNING_STATES, GridSnapshot, Idle, State
from .throttle import TickCoalescer

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)

StateObserver = Callable[[State], None]


def monotonic_ms() -> float:
    """Default dispatcher clock in milliseconds."""
    return time.monotonic() * 1000.0


class GridRegistry(Protocol):
    def get(self, grid_id: str) -> Optional[Grid]:
        ...

    def snapshots(self) -> Mapping[str, GridSnapshot]:
        ...


class InteractionDispatcher:
    """
    Queue, throttle and apply interaction events.

    Usage:
        dispatcher = InteractionDispatcher(registry, InteractionConfig())
        dispatcher.dispatch(PointerDown(...))
        dispatcher.dispatch(PointerMove(Point(120, 40)))
        dispatcher.pump()   # periodically while is_active
    """

    def __init__(
        self,
        registry: GridRegistry,
        settings: Optional[InteractionConfig] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.registry = registry
        self.settings = settings or InteractionConfig()
        self._clock = clock or monotonic_ms
        self._state: State = Idle()
        self._queue: Deque[Event] = deque()
        self._coalescer = TickCoalescer(self.settings.throttle_ms)
        self._scroller = AutoScroller(self.settings.scroll_speed)
        self._scroll_offset = ScrollOffset()
        self._observers: List[StateObserver] = []
        self._processing = False

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> State:
        return self._state

    @property
    def is_active(self) -> bool:
        """Whether a drag or resize session is running."""
        return isinstance(self._state, RUNNING_STATES)

    @property
    def auto_scroller(self) -> AutoScroller:
        return self._scroller

    def now(self) -> float:
        return self._clock()

    def add_observer(self, observer: StateObserver) -> None:
        """Call ``observer(state)`` whenever the kind of state changes."""
        self._observers.append(observer)

    def post(self, event: Event) -> None:
        """Queue an event without processing it."""
        self._queue.append(event)

    def dispatch(self, event: Event) -> None:
        """Queue an event and process the queue."""
        self.post(event)
        self.process()

    def process(self) -> None:
        """Drain the event queue."""
        if self._processing:
            return
        self._processing = True
        try:
            while self._queue:
                event = self._queue.popleft()
                for ready in self._coalescer.offer(event, self._clock()):
                    self._handle(ready)
        finally:
            self._processing = False

    def pump(self) -> None:
        """Deliver due ticks and advance auto-scroll by one step."""
        self.process()
        now = self._clock()
        for ready in self._coalescer.due(now):
            self._handle(ready)
        # Listeners may have posted while the held ticks were handled
        self.process()

        if self.is_active and self._scroller.is_active:
            dx, dy = self._scroller.step()
            self.scroll_by(dx, dy)

    def scroll_by(self, dx: float, dy: float) -> None:
        """
        Add a scroll delta to the session's running offset.

        Auto-scroll steps and host-reported user scrolls both land here,
        so the offset handed to the machine is their sum. Zero deltas and
        scrolls outside a session are ignored.
        """
        if not self.is_active or (dx == 0 and dy == 0):
            return
        # Updated before the coalescer sees the tick, so held ticks never lose a delta
        self._scroll_offset = ScrollOffset(
            top=self._scroll_offset.top + dy,
            left=self._scroll_offset.left + dx,
        )
        self.dispatch(ScrollChanged(self._scroll_offset, timestamp=self._clock()))

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _handle(self, event: Event) -> None:
        was_running = self.is_active
        if isinstance(event, PointerDown) and not was_running:
            self._scroll_offset = ScrollOffset()

        previous = self._state
        result = transition(previous, event, self.registry.snapshots(), self.settings)
        self._state = result.state
        self._apply(result.effects)

        if was_running and not self.is_active:
            # Session over: nothing may keep scrolling or ticking
            self._scroller.stop()
            self._coalescer.reset()
            self._scroll_offset = ScrollOffset()
        if type(previous) is not type(self._state):
            logger.debug(f"Interaction state {type(previous).__name__} -> {type(self._state).__name__}")
            for observer in self._observers:
                observer(self._state)

    def _apply(self, effects: tuple[Effect, ...]) -> None:
        for effect in effects:
            grid = self.registry.get(effect.grid_id)
            if isinstance(effect, AutoScrollRequested):
                container = grid.scroll_container if grid is not None else None
                self._scroller.start(container, effect.direction)
                continue
            if isinstance(effect, SessionCancelled):
                logger.info(f"Session for {effect.item_id!r} cancelled: {effect.reason}")
                continue
            if grid is None:
                logger.debug(f"Dropping {type(effect).__name__} for missing grid {effect.grid_id!r}")
                continue
            self._notify(grid, effect)

    def _notify(self, grid: Grid, effect: Effect) -> None:
        listener = grid.listener
        if isinstance(effect, LayoutCommitted):
            grid.commit_layout(effect.layout)
        elif isinstance(effect, RenderPreview):
            grid.render_preview(effect.layout, effect.dragged_rect)
        elif isinstance(effect, DragStarted):
            listener.on_drag_start(effect.item, effect.layout)
        elif isinstance(effect, ResizeStarted):
            listener.on_resize_start(effect.item, effect.layout)
        elif isinstance(effect, ItemResized):
            listener.on_item_resize(effect.width, effect.height, effect.item_id)
        elif isinstance(effect, DragEntered):
            listener.on_drag_enter(effect.item, effect.layout)
        elif isinstance(effect, DragExited):
            listener.on_drag_exit(effect.item, effect.layout)
        elif isinstance(effect, Dropped):
            listener.on_drop(effect.item, effect.source_grid_id, effect.layout)
        elif isinstance(effect, ItemRemoved):
            listener.on_item_removed(effect.item, effect.layout)
        elif isinstance(effect, DragEnded):
            listener.on_drag_end(effect.item, effect.layout)
        elif isinstance(effect, ResizeEnded):
            listener.on_resize_end(effect.item, effect.layout)
        elif isinstance(effect, ErrorReported):
            listener.on_error(effect.kind, effect.message)
