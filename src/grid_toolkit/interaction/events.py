"""
Module: interaction.events

Purpose:
    Input events consumed by the interaction state machine. Events are
    immutable values; timestamps are milliseconds on any monotonic clock.

Key Classes:
    - InteractionKind: drag or resize
    - PointerDown / PointerMove / PointerUp / PointerCancel: Pointer phases
    - ScrollChanged: Scroll delta of the scrollable ancestor
    - PointerEnter / PointerLeave: Pointer crossed a grid boundary
    - GridDestroyed: A grid went away mid-session
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from grid_toolkit.core.models.geometry import ClientRect, Point, ScrollOffset


class InteractionKind(Enum):
    """What a pointer-down on an item starts."""

    DRAG = "drag"
    RESIZE = "resize"


@dataclass(frozen=True)
class PointerDown:
    """Pointer pressed on an item (or its resize handle)."""

    grid_id: str
    item_id: str
    kind: InteractionKind
    pointer: Point
    item_rect: ClientRect
    timestamp: float = 0.0


@dataclass(frozen=True)
class PointerMove:
    pointer: Point
    timestamp: float = 0.0


@dataclass(frozen=True)
class ScrollChanged:
    """Cumulative scroll delta since the session started."""

    offset: ScrollOffset
    timestamp: float = 0.0


@dataclass(frozen=True)
class PointerEnter:
    grid_id: str


@dataclass(frozen=True)
class PointerLeave:
    grid_id: str


@dataclass(frozen=True)
class PointerUp:
    timestamp: float = 0.0


@dataclass(frozen=True)
class PointerCancel:
    timestamp: float = 0.0


@dataclass(frozen=True)
class GridDestroyed:
    grid_id: str


Event = Union[
    PointerDown,
    PointerMove,
    ScrollChanged,
    PointerEnter,
    PointerLeave,
    PointerUp,
    PointerCancel,
    GridDestroyed,
]

# High-frequency events that may be coalesced
TICK_EVENTS = (PointerMove, ScrollChanged)


def is_tick(event: Event) -> bool:
    """Return whether ``event`` is a coalescible tick."""
    return isinstance(event, TICK_EVENTS)
