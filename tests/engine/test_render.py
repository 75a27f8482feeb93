"""
Unit Tests for Render Mapping

Tests for cell-to-pixel mapping and the inverse snapping helpers.
"""

import pytest

from grid_toolkit.core.errors import ConfigMismatch
from grid_toolkit.core.models.geometry import RenderRect
from grid_toolkit.core.models.items import GridItem
from grid_toolkit.engine.config import FIT, GridConfig
from grid_toolkit.engine.render import (
    column_width,
    fit_row_height,
    grid_pixel_height,
    resolve_grid_height,
    resolve_row_height,
    screen_height_to_grid_height,
    screen_width_to_grid_width,
    screen_x_to_grid_x,
    screen_y_to_grid_y,
    to_pixel_rects,
)


class TestToPixelRects:
    """Tests for to_pixel_rects()."""

    def test_to_pixel_rects_when_single_cell_then_full_width(self):
        rects = to_pixel_rects([GridItem("a", 0, 0, 1, 1)], GridConfig(cols=1, row_height=100), 200)
        assert rects["a"] == RenderRect("a", top=0, left=0, width=200, height=100)

    def test_to_pixel_rects_when_gap_then_offsets_include_gaps(self):
        config = GridConfig(cols=2, row_height=50, gap=10)
        rects = to_pixel_rects([GridItem("a", 1, 1, 1, 1), GridItem("b", 0, 0, 2, 2)], config, 210)

        assert rects["a"] == RenderRect("a", top=60, left=110, width=100, height=50)
        assert rects["b"] == RenderRect("b", top=0, left=0, width=210, height=110)

    def test_to_pixel_rects_when_fit_then_rows_fill_height(self):
        config = GridConfig(cols=1, row_height=FIT, height=430, gap=10)
        rects = to_pixel_rects([GridItem("a", 0, 3, 1, 1)], config, 100)
        assert rects["a"].height == 100
        assert rects["a"].top == 330

    def test_to_pixel_rects_when_fit_without_height_then_raises(self):
        with pytest.raises(ConfigMismatch):
            to_pixel_rects([GridItem("a", 0, 0, 1, 1)], GridConfig(row_height=FIT), 100)

    def test_to_pixel_rects_when_fit_and_measured_height_then_used(self):
        rects = to_pixel_rects(
            [GridItem("a", 0, 0, 1, 2)], GridConfig(cols=1, row_height=FIT), 100, 300
        )
        assert rects["a"].height == 300

    def test_to_pixel_rects_when_layout_order_then_dict_order(self):
        layout = [GridItem("z", 0, 1, 1, 1), GridItem("a", 0, 0, 1, 1)]
        assert list(to_pixel_rects(layout, GridConfig(cols=2), 200)) == ["z", "a"]


class TestHeights:
    """Tests for the row and grid height helpers."""

    def test_grid_pixel_height_when_empty_then_zero(self):
        assert grid_pixel_height([], 100, 10) == 0

    def test_grid_pixel_height_when_items_then_lowest_bottom(self):
        layout = [GridItem("a", 0, 0, 1, 1), GridItem("b", 0, 1, 1, 2)]
        assert grid_pixel_height(layout, 50, 10) == 3 * 50 + 2 * 10

    def test_fit_row_height_when_empty_then_one_row(self):
        assert fit_row_height([], 300, 10) == 300

    def test_fit_row_height_when_tiny_then_at_least_one_pixel(self):
        assert fit_row_height([GridItem("a", 0, 0, 1, 50)], 10, 5) == 1.0

    def test_resolve_row_height_when_fixed_then_config_value(self):
        assert resolve_row_height([], GridConfig(row_height=40)) == 40.0

    def test_resolve_grid_height_when_fixed_height_then_config_value(self):
        assert resolve_grid_height([GridItem("a", 0, 0, 1, 9)], GridConfig(height=250)) == 250

    def test_resolve_grid_height_when_auto_then_content_height(self):
        assert resolve_grid_height([GridItem("a", 0, 0, 1, 2)], GridConfig(row_height=30)) == 60

    def test_column_width_when_gap_then_gaps_removed(self):
        assert column_width(230, 3, 10) == 70


class TestInverseMapping:
    """Tests for the pixel to cell helpers."""

    def test_screen_x_when_half_cell_then_rounds_up(self):
        assert screen_x_to_grid_x(50, 100, 0) == 1
        assert screen_x_to_grid_x(49, 100, 0) == 0

    def test_screen_x_when_two_and_a_half_cells_then_three(self):
        """Half-way positions round up, not to even."""
        assert screen_x_to_grid_x(250, 100, 0) == 3

    def test_screen_y_when_gap_then_pitch_includes_gap(self):
        assert screen_y_to_grid_y(120, 50, 10) == 2

    def test_screen_width_when_spanning_gap_then_cell_count(self):
        assert screen_width_to_grid_width(210, 100, 10) == 2

    def test_screen_height_when_zero_pitch_then_one(self):
        assert screen_height_to_grid_height(40, 0, 0) == 1
