"""
Module: engine.displacement

Purpose:
    Resolve the collisions a moved or resized item causes during a drag
    or resize tick, then re-compact the layout.

Key Functions:
    - displace(): Full resolution with warnings and blocked flag
    - resolve_collisions(): Layout-only convenience wrapper

Policy:
    prevent_collision=False
        Every item overlapping the candidate is pushed past it: to
        ``candidate.bottom`` on vertical/free grids, to ``candidate.right``
        on horizontal grids (falling back to a vertical push when the item
        would leave the grid). Pushed items cascade into the items they
        now overlap. A push that would revisit an item already on the
        current push chain is a displacement cycle: it is recorded as a
        warning and the item keeps its last position.

        When the candidate moved toward the far edge (down, or right on
        horizontal grids) an item it lands on directly hops over to the
        near side instead, provided that spot is free. Nudging an item one
        cell onto its neighbour therefore swaps the two.

    prevent_collision=True
        Any collision blocks the move: the candidate reverts to its
        position in the previous layout of this tick.

    Static items are never displaced; landing on one blocks the move in
    either mode. The candidate itself is never displaced.

Used By:
    - simulation.drag / simulation.resize
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence

from grid_toolkit.core.errors import DisplacementCycle
from grid_toolkit.core.models.items import GridItem, Layout, find_item, layout_bottom

from .collision import all_collisions, collides, first_collision
from .compaction import compact
from .config import CompactType, GridConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplacementResult:
    """
    Outcome of resolving one candidate move.

    Attributes:
        layout: Resolved and re-compacted layout
        blocked: True if the candidate was reverted instead of placed
        warnings: Non-fatal problems (displacement cycles)
    """

    layout: Layout
    blocked: bool = False
    warnings: tuple[str, ...] = ()


class _Pusher:
    """Working state for one push resolution."""

    def __init__(self, items: Sequence[GridItem], config: GridConfig):
        self.config = config
        self.horizontal = config.compact_type is CompactType.HORIZONTAL
        self.order = [item.id for item in items]
        self.positions: Dict[str, GridItem] = {item.id: item for item in items}
        self.warnings: List[str] = []

    def current(self) -> List[GridItem]:
        return [self.positions[item_id] for item_id in self.order]

    def push_from(self, mover: GridItem, chain: FrozenSet[str]) -> None:
        """Displace everything overlapping ``mover``, depth first."""
        for other in all_collisions(self.current(), mover):
            other = self.positions[other.id]
            if other.static or not collides(other, mover):
                continue
            if other.id in chain:
                cycle = DisplacementCycle(other.id)
                logger.warning(f"{cycle}; leaving it at ({other.x}, {other.y})")
                self.warnings.append(str(cycle))
                continue
            self.push(other, mover, chain)

    def push(self, other: GridItem, mover: GridItem, chain: FrozenSet[str]) -> None:
        """Move ``other`` past ``mover`` and cascade from its new spot."""
        displaced = self.pushed_past(other, mover)
        self.positions[other.id] = displaced
        self.push_from(displaced, chain | {other.id})

    def overlaps(self, item_id: str, item: GridItem) -> bool:
        """Whether ``item_id`` at its current position overlaps ``item``."""
        return collides(self.positions[item_id], item)

    def hop_over(self, candidate: GridItem, other: GridItem) -> bool:
        """Try moving ``other`` to the near side of ``candidate``; True on success."""
        if self.horizontal:
            target = other.moved(x=candidate.x - other.w)
            if target.x < 0:
                return False
        else:
            target = other.moved(y=candidate.y - other.h)
            if target.y < 0:
                return False
        obstacles = [item for item in self.current() if item.id != other.id]
        if first_collision(obstacles, target) is not None:
            return False
        self.positions[other.id] = target
        return True

    def pushed_past(self, other: GridItem, mover: GridItem) -> GridItem:
        if self.horizontal and mover.right + other.w <= self.config.cols:
            return other.moved(x=mover.right)
        return other.moved(y=mover.bottom)


def _moved_toward_far_edge(
    candidate: GridItem,
    before: Optional[GridItem],
    compact_type: Optional[CompactType],
) -> bool:
    if before is None:
        return False
    if compact_type is CompactType.HORIZONTAL:
        return candidate.x > before.x
    return candidate.y > before.y


def _place_candidate(layout: Sequence[GridItem], candidate: GridItem) -> List[GridItem]:
    if find_item(layout, candidate.id) is None:
        return [*layout, candidate]
    return [candidate if item.id == candidate.id else item for item in layout]


def _blocked(
    layout: Sequence[GridItem],
    candidate: GridItem,
    before: Optional[GridItem],
    config: GridConfig,
) -> DisplacementResult:
    if before is not None:
        fallback = candidate.moved(x=before.x, y=before.y).resized(w=before.w, h=before.h)
    else:
        # Entering item with no earlier spot: park it below everything
        others = [item for item in layout if item.id != candidate.id]
        fallback = candidate.moved(y=layout_bottom(others))
    logger.debug(f"Move of {candidate.id!r} blocked, keeping ({fallback.x}, {fallback.y})")
    placed = _place_candidate(layout, fallback)
    return DisplacementResult(
        layout=compact(placed, config.compact_type, config.cols),
        blocked=True,
    )


def displace(
    candidate: GridItem,
    layout: Sequence[GridItem],
    config: GridConfig,
    *,
    previous: Optional[Sequence[GridItem]] = None,
) -> DisplacementResult:
    """
    Place ``candidate`` into ``layout`` and resolve the collisions it causes.

    Args:
        candidate: The dragged/resized item at its candidate cell position
        layout: Working layout of this tick (may or may not contain the
            candidate's id; a missing id is appended)
        config: Grid configuration (collision policy, compaction, cols)
        previous: Layout holding the candidate's last accepted position;
            defaults to ``layout``

    Returns:
        DisplacementResult with the resolved, re-compacted layout
    """
    before = find_item(previous if previous is not None else layout, candidate.id)
    others = [item for item in layout if item.id != candidate.id]
    collisions = all_collisions(others, candidate)

    if collisions and (config.prevent_collision or any(c.static for c in collisions)):
        return _blocked(layout, candidate, before, config)

    pusher = _Pusher(_place_candidate(layout, candidate), config)
    if collisions:
        chain = frozenset({candidate.id})
        may_hop = _moved_toward_far_edge(candidate, before, config.compact_type)
        for other in collisions:
            # An earlier cascade may already have moved it out of the way
            if not pusher.overlaps(other.id, candidate):
                continue
            other = pusher.positions[other.id]
            if may_hop and pusher.hop_over(candidate, other):
                continue
            pusher.push(other, candidate, chain)
        logger.debug(f"Resolved {len(collisions)} direct collision(s) for {candidate.id!r}")

    resolved = compact(pusher.current(), config.compact_type, config.cols)
    return DisplacementResult(layout=resolved, warnings=tuple(pusher.warnings))


def resolve_collisions(
    candidate: GridItem,
    layout: Sequence[GridItem],
    config: GridConfig,
    *,
    previous: Optional[Sequence[GridItem]] = None,
) -> Layout:
    """
    Place ``candidate`` and return the resolved layout.

    Thin wrapper over displace() for callers that do not need the
    blocked flag or warnings.
    """
    return displace(candidate, layout, config, previous=previous).layout
