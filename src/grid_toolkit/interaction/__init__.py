"""
Interaction Package

Drag and resize sessions across one or more grids.

Components:
    - machine: Pure (state, event) -> (state, effects) transition function
    - dispatcher: Event queue, tick throttling, effect application
    - context: Session scope shared by connected grids
    - grid: Grid instances and their listeners
    - autoscroll: Edge auto-scrolling of the scroll container

Usage:
    from grid_toolkit.interaction import DragContext, Grid, GridListener

    context = DragContext()
    grid = Grid("main", context, GridConfig(cols=12), items,
                client_rect=ClientRect(0, 0, 1200, 800), listener=MyListener())
    grid.start_drag("a", Point(15, 15))
    context.pointer_move(Point(240, 15))
    context.pointer_up()
"""

from .autoscroll import NO_SCROLL, AutoScroller, ScrollContainer, ScrollDirection, scroll_direction
from .context import DragContext
from .dispatcher import InteractionDispatcher
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
from .events import (
    GridDestroyed,
    InteractionKind,
    PointerCancel,
    PointerDown,
    PointerEnter,
    PointerLeave,
    PointerMove,
    PointerUp,
    ScrollChanged,
)
from .grid import Grid
from .listener import GridListener
from .machine import Transition, transition
from .state import (
    PLACEHOLDER_PREFIX,
    Active,
    Cancelled,
    Completed,
    DragSession,
    GridSnapshot,
    Idle,
    TransferredTarget,
    is_placeholder_id,
    placeholder_id_for,
)
from .throttle import TickCoalescer

__all__ = [
    # Runtime
    "DragContext",
    "Grid",
    "GridListener",
    "InteractionDispatcher",
    "TickCoalescer",
    "AutoScroller",
    "ScrollContainer",
    "ScrollDirection",
    "NO_SCROLL",
    "scroll_direction",
    # Machine
    "transition",
    "Transition",
    "DragSession",
    "GridSnapshot",
    "Idle",
    "Active",
    "TransferredTarget",
    "Completed",
    "Cancelled",
    "PLACEHOLDER_PREFIX",
    "placeholder_id_for",
    "is_placeholder_id",
    # Events
    "InteractionKind",
    "PointerDown",
    "PointerMove",
    "ScrollChanged",
    "PointerEnter",
    "PointerLeave",
    "PointerUp",
    "PointerCancel",
    "GridDestroyed",
    # Effects
    "Effect",
    "DragStarted",
    "ResizeStarted",
    "RenderPreview",
    "ItemResized",
    "DragEntered",
    "DragExited",
    "Dropped",
    "ItemRemoved",
    "DragEnded",
    "ResizeEnded",
    "LayoutCommitted",
    "ErrorReported",
    "SessionCancelled",
    "AutoScrollRequested",
]
