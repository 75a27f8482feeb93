"""
Unit Tests for Occupancy Diagnostics
"""

import numpy as np

from grid_toolkit.core.models.items import GridItem
from grid_toolkit.debug import occupancy_matrix, overlapping_cells


class TestOccupancyMatrix:
    """Tests for occupancy_matrix()."""

    def test_matrix_when_single_item_then_cells_marked(self):
        matrix = occupancy_matrix([GridItem("a", 1, 0, 2, 2)], cols=4)
        np.testing.assert_array_equal(matrix, [[0, 1, 1, 0], [0, 1, 1, 0]])

    def test_matrix_when_empty_then_zero_rows(self):
        assert occupancy_matrix([], cols=3).shape == (0, 3)

    def test_matrix_when_rows_given_then_padded(self):
        assert occupancy_matrix([GridItem("a", 0, 0, 1, 1)], cols=2, rows=3).shape == (3, 2)

    def test_matrix_when_item_past_last_column_then_clipped(self):
        matrix = occupancy_matrix([GridItem("a", 2, 0, 3, 1)], cols=3)
        np.testing.assert_array_equal(matrix, [[0, 0, 1]])


class TestOverlappingCells:
    """Tests for overlapping_cells()."""

    def test_overlaps_when_disjoint_then_empty(self):
        assert overlapping_cells([GridItem("a", 0, 0, 1, 1), GridItem("b", 1, 0, 1, 1)], 2) == []

    def test_overlaps_when_shared_cells_then_listed_row_by_row(self):
        layout = [GridItem("a", 0, 0, 2, 2), GridItem("b", 1, 1, 2, 1)]
        assert overlapping_cells(layout, 3) == [(1, 1)]

    def test_overlaps_when_stacked_then_every_shared_cell(self):
        layout = [GridItem("a", 0, 0, 2, 2), GridItem("b", 0, 0, 2, 2)]
        assert overlapping_cells(layout, 2) == [(0, 0), (1, 0), (0, 1), (1, 1)]
