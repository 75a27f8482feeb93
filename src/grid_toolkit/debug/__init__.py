"""
Debug Package

Developer diagnostics for layouts: a numpy occupancy matrix and PIL
snapshots. Nothing in the runtime path imports this package.
"""

from .occupancy import occupancy_matrix, overlapping_cells
from .visualizer import render_layout_snapshot, save_layout_snapshot

__all__ = [
    "occupancy_matrix",
    "overlapping_cells",
    "render_layout_snapshot",
    "save_layout_snapshot",
]
