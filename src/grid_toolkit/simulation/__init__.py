"""
Simulation Package

Pure per-tick simulators: pointer positions in, candidate layouts out.
Same inputs always give the same output and input layouts are never
modified.

Usage:
    from grid_toolkit.simulation import simulate_drag

    result = simulate_drag("a", layout, config, start, now, item_rect, grid_rect)
    render(result.layout, result.dragged_item_rect)
"""

from .drag import simulate_drag
from .metrics import GridMetrics
from .models import SimulationResult
from .resize import simulate_resize

__all__ = [
    "simulate_drag",
    "simulate_resize",
    "SimulationResult",
    "GridMetrics",
]
