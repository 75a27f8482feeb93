"""
Module: interaction.state

Purpose:
    Session and machine states. A session is replaced, never mutated, on
    every transition.

Key Classes:
    - DragSession: Everything one drag or resize needs between ticks
    - GridSnapshot: Immutable view of a grid handed to the machine
    - Idle / Active / TransferredTarget / Completed / Cancelled: States

Key Functions:
    - placeholder_id_for(): Reserved id of a transfer placeholder
    - is_placeholder_id(): Whether an id lives in the reserved namespace
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Mapping, Optional, Union

from grid_toolkit.core.models.geometry import ClientRect, Point, RenderRect, ScrollOffset
from grid_toolkit.core.models.items import Layout
from grid_toolkit.engine.config import GridConfig

from .autoscroll import NO_SCROLL, ScrollDirection
from .events import InteractionKind

PLACEHOLDER_PREFIX = "__placeholder__:"


def placeholder_id_for(item_id: str) -> str:
    """Reserved id under which ``item_id`` is previewed in a foreign grid."""
    return f"{PLACEHOLDER_PREFIX}{item_id}"


def is_placeholder_id(item_id: str) -> bool:
    return item_id.startswith(PLACEHOLDER_PREFIX)


@dataclass(frozen=True)
class GridSnapshot:
    """
    What the machine may know about a grid.

    Attributes:
        grid_id: Grid identifier
        config: Grid configuration
        layout: Committed layout
        client_rect: Grid container rect in client pixels
        connected_to: Ids of grids whose items this grid accepts
        scroll_rect: Client rect of the scroll container, if any
    """

    grid_id: str
    config: GridConfig
    layout: Layout
    client_rect: ClientRect
    connected_to: FrozenSet[str] = frozenset()
    scroll_rect: Optional[ClientRect] = None

    def accepts_from(self, grid_id: str) -> bool:
        return grid_id in self.connected_to


@dataclass(frozen=True)
class DragSession:
    """
    State of one drag or resize sequence.

    Attributes:
        item_id: Id of the interacted item in its origin grid
        kind: Drag or resize
        origin_grid_id: Grid the session started in (fixed)
        current_target_grid_id: Grid the item currently previews in
        working_layouts: Uncommitted layout per touched grid
        pointer_start: Pointer at pointer-down
        pointer_now: Latest pointer
        item_start_rect: Item client rect at pointer-down
        scroll_offset: Scroll delta since pointer-down
        placeholder_id: Reserved id used in the target while transferred
        last_item_rect: Live item rect of the last processed tick
        scroll_direction: Auto-scroll direction last requested
        grid_rects: Client rect per touched grid, in pointer-down
            coordinates (scroll delta already undone)
    """

    item_id: str
    kind: InteractionKind
    origin_grid_id: str
    current_target_grid_id: str
    working_layouts: Mapping[str, Layout] = field(default_factory=dict)
    pointer_start: Point = Point(0.0, 0.0)
    pointer_now: Point = Point(0.0, 0.0)
    item_start_rect: ClientRect = ClientRect(0.0, 0.0, 0.0, 0.0)
    scroll_offset: ScrollOffset = ScrollOffset()
    placeholder_id: Optional[str] = None
    last_item_rect: Optional[RenderRect] = None
    scroll_direction: ScrollDirection = NO_SCROLL
    grid_rects: Mapping[str, ClientRect] = field(default_factory=dict)

    @property
    def is_transferred(self) -> bool:
        return self.current_target_grid_id != self.origin_grid_id

    @property
    def target_item_id(self) -> str:
        """Id the item carries in the current target's working layout."""
        return self.placeholder_id if self.is_transferred and self.placeholder_id else self.item_id

    def evolve(self, **changes: Any) -> DragSession:
        return replace(self, **changes)

    def with_working_layout(self, grid_id: str, layout: Layout) -> DragSession:
        layouts = dict(self.working_layouts)
        layouts[grid_id] = layout
        return replace(self, working_layouts=layouts)

    def with_grid_rect(self, grid_id: str, rect: ClientRect) -> DragSession:
        rects = dict(self.grid_rects)
        rects[grid_id] = rect
        return replace(self, grid_rects=rects)

    def without_grid(self, grid_id: str) -> DragSession:
        """Forget the working layout and rect of ``grid_id``."""
        return replace(
            self,
            working_layouts={k: v for k, v in self.working_layouts.items() if k != grid_id},
            grid_rects={k: v for k, v in self.grid_rects.items() if k != grid_id},
        )


# ─────────────────────────────────────────────────────────────────────────────
# Machine states
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Active:
    """Session running with the item over its origin grid."""

    session: DragSession


@dataclass(frozen=True)
class TransferredTarget:
    """Drag running with the item previewed in another grid."""

    session: DragSession


@dataclass(frozen=True)
class Completed:
    session: DragSession


@dataclass(frozen=True)
class Cancelled:
    reason: str
    session: Optional[DragSession] = None


State = Union[Idle, Active, TransferredTarget, Completed, Cancelled]

RUNNING_STATES = (Active, TransferredTarget)
