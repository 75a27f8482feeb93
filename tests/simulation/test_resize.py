"""
Unit Tests for the Resize Simulator
"""

import pytest

from grid_toolkit.core.models.geometry import ClientRect, Point
from grid_toolkit.core.models.items import GridItem, find_item
from grid_toolkit.engine.config import GridConfig
from grid_toolkit.simulation import GridMetrics, simulate_resize

GRID_RECT = ClientRect(0, 0, 400, 400)


def _resize(layout, config, item_rect, dx, dy):
    return simulate_resize(
        "a", layout, config, Point(0, 0), Point(dx, dy), item_rect, GRID_RECT
    )


@pytest.fixture
def config():
    return GridConfig(cols=4, row_height=100)


class TestSimulateResize:
    """Tests for simulate_resize()."""

    def test_resize_when_delta_exceeds_max_then_clamped_to_max(self, config):
        layout = [GridItem("a", 0, 0, 2, 1, min_w=2, max_w=4)]
        result = _resize(layout, config, ClientRect(0, 0, 200, 100), 400, 0)

        assert result.item.w == 4
        assert result.dragged_item_rect.width == 400

    def test_resize_when_shrunk_below_min_then_clamped_to_min(self, config):
        layout = [GridItem("a", 0, 0, 2, 1, min_w=2, max_w=4)]
        result = _resize(layout, config, ClientRect(0, 0, 200, 100), -190, 0)

        assert result.item.w == 2
        assert result.dragged_item_rect.width == 200

    def test_resize_when_no_max_then_limited_by_remaining_columns(self, config):
        layout = [GridItem("a", 2, 0, 1, 1)]
        result = _resize(layout, config, ClientRect(200, 0, 100, 100), 500, 0)
        assert result.item.w == 2

    def test_resize_when_fixed_height_then_limited_by_remaining_rows(self):
        config = GridConfig(cols=4, row_height=100, height=300, compact_type=None)
        layout = [GridItem("a", 0, 1, 1, 1)]
        result = _resize(layout, config, ClientRect(0, 100, 100, 100), 0, 1000)
        assert result.item.h == 2

    def test_resize_when_growing_then_top_left_kept(self, config):
        layout = [GridItem("a", 1, 1, 1, 1), GridItem("z", 0, 0, 4, 1)]
        result = _resize(layout, config, ClientRect(100, 100, 100, 100), 60, 60)

        assert (result.item.x, result.item.y) == (1, 1)
        assert (result.item.w, result.item.h) == (2, 2)
        assert (result.dragged_item_rect.left, result.dragged_item_rect.top) == (100, 100)
        assert result.dragged_item_rect.width == 160

    def test_resize_when_growing_into_neighbour_then_neighbour_pushed(self, config):
        layout = [GridItem("a", 0, 0, 1, 1), GridItem("b", 1, 0, 1, 1)]
        result = _resize(layout, config, ClientRect(0, 0, 100, 100), 100, 0)

        assert result.item.w == 2
        b = find_item(result.layout, "b")
        assert (b.x, b.y) == (1, 1)


class TestGridMetrics:
    """Tests for GridMetrics.measure()."""

    def test_measure_when_fixed_height_then_max_rows(self):
        metrics = GridMetrics.measure([], GridConfig(cols=4, row_height=50, height=230, gap=10), GRID_RECT)
        assert metrics.max_rows == 4
        assert metrics.col_width == 92.5

    def test_measure_when_auto_height_then_unbounded(self):
        assert GridMetrics.measure([], GridConfig(cols=4), GRID_RECT).max_rows is None

    def test_span_width_when_gap_then_includes_inner_gaps(self):
        metrics = GridMetrics(cols=4, col_width=90, row_height=50, gap=10)
        assert metrics.span_width(3) == 290
        assert metrics.span_height(1) == 50
