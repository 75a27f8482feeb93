"""
Module: simulation.metrics

Purpose:
    Pixel metrics of a grid at the moment of a tick: column width, row
    height and the number of rows a fixed-height grid can show.

Key Classes:
    - GridMetrics: Snapshot of the pixel geometry used to snap a pointer
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from grid_toolkit.core.models.geometry import ClientRect
from grid_toolkit.core.models.items import GridItem
from grid_toolkit.engine.config import GridConfig
from grid_toolkit.engine.render import column_width, resolve_row_height


@dataclass(frozen=True, slots=True)
class GridMetrics:
    """
    Pixel geometry of one grid.

    Attributes:
        cols: Number of columns
        col_width: Width of one column in pixels
        row_height: Effective row height in pixels
        gap: Gap between cells in pixels
        max_rows: Rows that fit into a fixed grid height, or None when the
            grid grows with its content
    """

    cols: int
    col_width: float
    row_height: float
    gap: float
    max_rows: Optional[int] = None

    @classmethod
    def measure(
        cls,
        layout: Sequence[GridItem],
        config: GridConfig,
        grid_rect: ClientRect,
    ) -> GridMetrics:
        """
        Measure a grid from its config and client rectangle.

        Raises:
            ConfigMismatch: If row_height is "fit" and no height is usable
        """
        row_height = resolve_row_height(layout, config, grid_rect.height)
        max_rows = None
        # "fit" grids stretch their rows instead of capping them
        if config.height is not None and not config.is_fit:
            max_rows = max(1, math.floor((config.height + config.gap) / (row_height + config.gap)))
        return cls(
            cols=config.cols,
            col_width=column_width(grid_rect.width, config.cols, config.gap),
            row_height=row_height,
            gap=config.gap,
            max_rows=max_rows,
        )

    def span_width(self, w: int) -> float:
        """Pixel width of ``w`` columns."""
        return w * self.col_width + self.gap * max(w - 1, 0)

    def span_height(self, h: int) -> float:
        """Pixel height of ``h`` rows."""
        return h * self.row_height + self.gap * max(h - 1, 0)
