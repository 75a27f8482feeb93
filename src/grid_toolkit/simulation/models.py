"""
Module: simulation.models

Purpose:
    Result type shared by the drag and resize simulators.
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem, Layout


@dataclass(frozen=True)
class SimulationResult:
    """
    Outcome of one drag or resize tick.

    Attributes:
        layout: Resolved, compacted layout
        item: The interacted item as placed in ``layout``
        dragged_item_rect: Continuous (unsnapped) pixel rect following the
            pointer, relative to the grid
        placed_rect: Snapped pixel rect of ``item`` in ``layout``
        blocked: True if the move collided under prevent_collision (or
            with a static item) and was reverted
        warnings: Non-fatal problems reported by displacement
    """

    layout: Layout
    item: GridItem
    dragged_item_rect: RenderRect
    placed_rect: RenderRect
    blocked: bool = False
    warnings: tuple[str, ...] = ()
