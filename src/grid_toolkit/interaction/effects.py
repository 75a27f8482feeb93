"""
Module: interaction.effects

Purpose:
    Output of the interaction state machine. The machine never calls
    listeners itself; it returns effects and the dispatcher applies them
    in order.

Key Classes:
    - DragStarted / ResizeStarted / DragEnded / ResizeEnded: Session edges
    - RenderPreview: Working layout and live item rect for one grid
    - ItemResized: Snapped pixel size changed during a resize
    - DragEntered / DragExited: Cross-grid transfer edges
    - Dropped / ItemRemoved: Cross-grid drop on target and source
    - LayoutCommitted: New committed layout for a grid
    - ErrorReported / SessionCancelled: Failures
    - AutoScrollRequested: Start, change or stop auto-scrolling
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from grid_toolkit.core.errors import ErrorKind
from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem, Layout

from .autoscroll import ScrollDirection


@dataclass(frozen=True)
class DragStarted:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class ResizeStarted:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class RenderPreview:
    """
    Working layout to render while a session runs.

    ``dragged_rect`` is the live rect of the interacted item in this grid,
    or None when the grid only shows its layout (e.g. after a transfer
    was abandoned).
    """

    grid_id: str
    layout: Layout
    dragged_rect: Optional[RenderRect] = None


@dataclass(frozen=True)
class ItemResized:
    grid_id: str
    width: float
    height: float
    item_id: str


@dataclass(frozen=True)
class DragEntered:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class DragExited:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class Dropped:
    """Item dropped into ``grid_id`` coming from ``source_grid_id``."""

    grid_id: str
    item: GridItem
    source_grid_id: str
    layout: Layout


@dataclass(frozen=True)
class ItemRemoved:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class DragEnded:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class ResizeEnded:
    grid_id: str
    item: GridItem
    layout: Layout


@dataclass(frozen=True)
class LayoutCommitted:
    grid_id: str
    layout: Layout


@dataclass(frozen=True)
class ErrorReported:
    grid_id: str
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class SessionCancelled:
    grid_id: str
    item_id: str
    reason: str


@dataclass(frozen=True)
class AutoScrollRequested:
    """Direction for ``grid_id``'s scroll container; idle means stop."""

    grid_id: str
    direction: ScrollDirection


Effect = Union[
    DragStarted,
    ResizeStarted,
    RenderPreview,
    ItemResized,
    DragEntered,
    DragExited,
    Dropped,
    ItemRemoved,
    DragEnded,
    ResizeEnded,
    LayoutCommitted,
    ErrorReported,
    SessionCancelled,
    AutoScrollRequested,
]
