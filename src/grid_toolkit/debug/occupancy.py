"""
Module: debug.occupancy

Purpose:
    Cell occupancy diagnostics. Counts how many items cover each cell so
    overlaps and out-of-bounds items show up at a glance.

Key Functions:
    - occupancy_matrix(): rows x cols array of cover counts
    - overlapping_cells(): (x, y) cells covered more than once

Dependencies:
    - numpy: Occupancy matrix
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from grid_toolkit.core.models.items import GridItem, layout_bottom


def occupancy_matrix(
    layout: Sequence[GridItem],
    cols: int,
    rows: Optional[int] = None,
) -> np.ndarray:
    """
    Count the items covering each cell.

    Args:
        layout: Items to rasterize
        cols: Grid width in columns; cells right of it are clipped
        rows: Number of rows (defaults to the layout's bottom)

    Returns:
        Integer array of shape (rows, cols), indexed [y, x]

    Example:
        >>> occupancy_matrix([GridItem("a", 0, 0, 2, 1)], cols=3)
        array([[1, 1, 0]])
    """
    if rows is None:
        rows = layout_bottom(layout)
    grid = np.zeros((rows, cols), dtype=np.int32)
    for item in layout:
        grid[max(item.y, 0):item.bottom, max(item.x, 0):item.right] += 1
    return grid


def overlapping_cells(layout: Sequence[GridItem], cols: int) -> List[Tuple[int, int]]:
    """Return the (x, y) cells covered by more than one item, row by row."""
    ys, xs = np.nonzero(occupancy_matrix(layout, cols) > 1)
    return [(int(x), int(y)) for y, x in zip(ys, xs)]
