"""
Module: interaction.machine

Purpose:
    Pure state machine for one drag-or-resize sequence, including the
    transfer of a dragged item from one grid into another.

Key Functions:
    - transition(): (state, event, grids) -> Transition(state, effects)

Key Classes:
    - Transition: New state plus the effects to apply, in order

State Flow:
    Idle ──PointerDown──> Active ──PointerEnter(g)──> TransferredTarget
                            ^  <──PointerLeave(g)──────────┘
                            │
        PointerUp / PointerCancel ──> Completed
        GridDestroyed(origin) / unknown item ──> Cancelled

    Completed and Cancelled behave as Idle for the next event.

Transfer Policy:
    While transferred, the target's working layout holds a placeholder
    (reserved id, the dragged item's shape) and is resolved and compacted
    on every tick like an in-grid drag. The origin's working layout stays
    frozen at its last pre-transfer state and is compacted without the
    item only when the item is dropped.

Errors:
    Nothing is raised. An unknown item id or a destroyed origin grid
    cancels the session; an unusable configuration skips the tick; both
    are reported as ErrorReported effects.

Used By:
    - interaction.dispatcher: The only caller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Mapping, Optional

from grid_toolkit.core.errors import (
    ConfigMismatch,
    ErrorKind,
    GridError,
    GridUnavailable,
    UnknownItemId,
)
from grid_toolkit.core.models.items import find_item, get_item, layout_bottom, without_item
from grid_toolkit.engine.compaction import compact
from grid_toolkit.engine.config import InteractionConfig
from grid_toolkit.simulation.drag import simulate_drag
from grid_toolkit.simulation.resize import simulate_resize

from .autoscroll import scroll_direction
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
    Event,
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
from .state import (
    RUNNING_STATES,
    Active,
    Cancelled,
    Completed,
    DragSession,
    GridSnapshot,
    State,
    TransferredTarget,
    placeholder_id_for,
)

logger = logging.getLogger(__name__)

Grids = Mapping[str, GridSnapshot]


@dataclass(frozen=True)
class Transition:
    """Result of feeding one event to the machine."""

    state: State
    effects: tuple[Effect, ...] = ()


def transition(
    state: State,
    event: Event,
    grids: Grids,
    settings: InteractionConfig = InteractionConfig(),
) -> Transition:
    """
    Compute the next state and the effects of ``event``.

    Args:
        state: Current machine state
        event: Input event
        grids: Snapshot of every registered grid, by id
        settings: Interaction settings (auto-scroll proximity)

    Returns:
        Transition with the new state and ordered effects
    """
    if isinstance(state, RUNNING_STATES):
        session = state.session
        if isinstance(event, PointerMove):
            return _tick(session.evolve(pointer_now=event.pointer), grids, settings)
        if isinstance(event, ScrollChanged):
            return _tick(session.evolve(scroll_offset=event.offset), grids, settings)
        if isinstance(event, PointerEnter):
            return _enter(state, event.grid_id, grids, settings)
        if isinstance(event, PointerLeave):
            if session.is_transferred and event.grid_id == session.current_target_grid_id:
                return _leave_target(session, grids)
            return Transition(state)
        if isinstance(event, (PointerUp, PointerCancel)):
            return _complete(session, grids)
        if isinstance(event, GridDestroyed):
            return _grid_destroyed(state, event.grid_id, grids)
        # PointerDown while a session runs
        return Transition(state)

    if isinstance(event, PointerDown):
        return _start(state, event, grids)
    return Transition(state)


def _running(session: DragSession) -> State:
    return TransferredTarget(session) if session.is_transferred else Active(session)


# ─────────────────────────────────────────────────────────────────────────────
# Session start / end
# ─────────────────────────────────────────────────────────────────────────────

def _start(state: State, event: PointerDown, grids: Grids) -> Transition:
    snapshot = grids.get(event.grid_id)
    if snapshot is None:
        return _abort(None, event.grid_id, event.item_id, GridUnavailable(event.grid_id), grids)

    item = find_item(snapshot.layout, event.item_id)
    if item is None:
        error = UnknownItemId(event.item_id, event.grid_id)
        return _abort(None, event.grid_id, event.item_id, error, grids)
    if item.static:
        logger.debug(f"Ignoring pointer-down on static item {item.id!r}")
        return Transition(state)

    session = DragSession(
        item_id=item.id,
        kind=event.kind,
        origin_grid_id=snapshot.grid_id,
        current_target_grid_id=snapshot.grid_id,
        working_layouts={snapshot.grid_id: snapshot.layout},
        pointer_start=event.pointer,
        pointer_now=event.pointer,
        item_start_rect=event.item_rect,
        grid_rects={snapshot.grid_id: snapshot.client_rect},
    )
    logger.info(f"{event.kind.value.capitalize()} of {item.id!r} started in grid {snapshot.grid_id!r}")

    started = DragStarted if event.kind is InteractionKind.DRAG else ResizeStarted
    return Transition(Active(session), (started(snapshot.grid_id, item, snapshot.layout),))


def _complete(session: DragSession, grids: Grids) -> Transition:
    origin_id = session.origin_grid_id
    origin = grids.get(origin_id)
    if origin is None:
        return _abort(session, origin_id, session.item_id, GridUnavailable(origin_id), grids)

    target_id = session.current_target_grid_id
    if session.is_transferred and target_id in grids:
        return _drop(session, origin, grids[target_id])

    layout = session.working_layouts[origin_id]
    item = get_item(layout, session.item_id)
    ended = DragEnded if session.kind is InteractionKind.DRAG else ResizeEnded
    logger.info(f"{session.kind.value.capitalize()} of {item.id!r} ended in grid {origin_id!r}")
    return Transition(
        Completed(session),
        (LayoutCommitted(origin_id, layout), ended(origin_id, item, layout)),
    )


def _drop(session: DragSession, origin: GridSnapshot, target: GridSnapshot) -> Transition:
    """Commit a transferred drag into ``target`` and remove it from ``origin``."""
    placeholder_id = session.placeholder_id
    target_layout = tuple(
        item.with_id(session.item_id) if item.id == placeholder_id else item
        for item in session.working_layouts[target.grid_id]
    )
    dropped = get_item(target_layout, session.item_id)

    origin_layout = session.working_layouts[origin.grid_id]
    removed = get_item(origin_layout, session.item_id)
    source_layout = compact(
        without_item(origin_layout, session.item_id),
        origin.config.compact_type,
        origin.config.cols,
    )
    logger.info(
        f"Dropped {session.item_id!r} from grid {origin.grid_id!r} into grid {target.grid_id!r}"
    )
    return Transition(
        Completed(session),
        (
            LayoutCommitted(target.grid_id, target_layout),
            Dropped(target.grid_id, dropped, origin.grid_id, target_layout),
            ItemRemoved(origin.grid_id, removed, source_layout),
            LayoutCommitted(origin.grid_id, source_layout),
            DragEnded(origin.grid_id, removed, source_layout),
        ),
    )


def _abort(
    session: Optional[DragSession],
    grid_id: str,
    item_id: str,
    error: GridError,
    grids: Grids,
) -> Transition:
    """Cancel without committing; touched grids fall back to their committed layouts."""
    logger.warning(f"Interaction with {item_id!r} cancelled: {error}")
    effects: List[Effect] = []
    if session is not None:
        for touched in session.working_layouts:
            if touched in grids:
                effects.append(RenderPreview(touched, grids[touched].layout))
    effects.append(SessionCancelled(grid_id, item_id, str(error)))
    effects.append(ErrorReported(grid_id, error.kind, str(error)))
    return Transition(Cancelled(str(error), session), tuple(effects))


def _grid_destroyed(state: State, grid_id: str, grids: Grids) -> Transition:
    session = state.session
    if grid_id == session.origin_grid_id:
        remaining = {key: value for key, value in grids.items() if key != grid_id}
        return _abort(session, grid_id, session.item_id, GridUnavailable(grid_id), remaining)
    if session.is_transferred and grid_id == session.current_target_grid_id:
        return _leave_target(session, grids, notify=False)
    return Transition(state)


# ─────────────────────────────────────────────────────────────────────────────
# Cross-grid transfer
# ─────────────────────────────────────────────────────────────────────────────

def _enter(state: State, grid_id: str, grids: Grids, settings: InteractionConfig) -> Transition:
    session = state.session
    if session.kind is not InteractionKind.DRAG or grid_id == session.current_target_grid_id:
        return Transition(state)
    if grid_id == session.origin_grid_id:
        return _leave_target(session, grids)

    target = grids.get(grid_id)
    if target is None or not target.accepts_from(session.origin_grid_id):
        return Transition(state)
    if find_item(target.layout, session.item_id) is not None:
        logger.warning(f"Grid {grid_id!r} already holds an item {session.item_id!r}; not entering")
        return Transition(state)

    effects: List[Effect] = []
    if session.is_transferred:
        left = _leave_target(session, grids)
        effects.extend(left.effects)
        session = left.state.session

    item = get_item(session.working_layouts[session.origin_grid_id], session.item_id)
    placeholder_id = placeholder_id_for(session.item_id)
    working = target.layout
    if find_item(working, placeholder_id) is None:
        # First tick below settles it under the pointer
        working = (*working, item.with_id(placeholder_id).moved(x=0, y=layout_bottom(working)))

    offset = session.scroll_offset
    session = (
        session.evolve(current_target_grid_id=grid_id, placeholder_id=placeholder_id)
        .with_working_layout(grid_id, working)
        .with_grid_rect(grid_id, target.client_rect.translated(offset.left, offset.top))
    )
    logger.info(f"{session.item_id!r} entered grid {grid_id!r}")
    effects.append(DragEntered(grid_id, item, working))

    ticked = _tick(session, grids, settings)
    return Transition(ticked.state, (*effects, *ticked.effects))


def _leave_target(session: DragSession, grids: Grids, notify: bool = True) -> Transition:
    """Abandon the current target; its working layout reverts to the committed one."""
    target_id = session.current_target_grid_id
    item = get_item(session.working_layouts[session.origin_grid_id], session.item_id)
    session = session.without_grid(target_id).evolve(
        current_target_grid_id=session.origin_grid_id,
        placeholder_id=None,
    )
    logger.info(f"{session.item_id!r} left grid {target_id!r}")

    target = grids.get(target_id)
    if not notify or target is None:
        return Transition(Active(session))
    return Transition(
        Active(session),
        (
            DragExited(target_id, item, target.layout),
            RenderPreview(target_id, target.layout),
        ),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Ticks
# ─────────────────────────────────────────────────────────────────────────────

def _tick(session: DragSession, grids: Grids, settings: InteractionConfig) -> Transition:
    """Re-run the simulator for the current target with the session's pointer state."""
    target_id = session.current_target_grid_id
    target = grids.get(target_id)
    if target is None:
        if session.is_transferred:
            return _leave_target(session, grids, notify=False)
        return _abort(session, target_id, session.item_id, GridUnavailable(target_id), grids)

    simulate = simulate_drag if session.kind is InteractionKind.DRAG else simulate_resize
    working = session.working_layouts[target_id]
    try:
        result = simulate(
            session.target_item_id,
            working,
            target.config,
            session.pointer_start,
            session.pointer_now,
            session.item_start_rect,
            session.grid_rects.get(target_id, target.client_rect),
            session.scroll_offset,
        )
    except UnknownItemId as e:
        return _abort(session, target_id, session.item_id, e, grids)
    except ConfigMismatch as e:
        logger.warning(f"Skipping tick in grid {target_id!r}: {e}")
        return Transition(_running(session), (ErrorReported(target_id, e.kind, str(e)),))

    effects: List[Effect] = [
        ErrorReported(target_id, ErrorKind.DISPLACEMENT_CYCLE, warning)
        for warning in result.warnings
    ]
    live_rect = replace(result.dragged_item_rect, id=session.item_id)
    effects.append(RenderPreview(target_id, result.layout, live_rect))

    if session.kind is InteractionKind.RESIZE:
        before = find_item(working, session.target_item_id)
        if before is None or (before.w, before.h) != (result.item.w, result.item.h):
            effects.append(
                ItemResized(
                    target_id,
                    result.placed_rect.width,
                    result.placed_rect.height,
                    session.item_id,
                )
            )

    session = session.with_working_layout(target_id, result.layout).evolve(last_item_rect=live_rect)

    if session.kind is InteractionKind.DRAG:
        origin = grids.get(session.origin_grid_id)
        direction = scroll_direction(
            session.pointer_now,
            origin.scroll_rect if origin is not None else None,
            settings.scroll_proximity,
        )
        if direction != session.scroll_direction:
            effects.append(AutoScrollRequested(session.origin_grid_id, direction))
            session = session.evolve(scroll_direction=direction)

    return Transition(_running(session), tuple(effects))


__all__ = ["Transition", "transition"]
