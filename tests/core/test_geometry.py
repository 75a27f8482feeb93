"""
Unit Tests for Pixel Geometry Values

Tests for Point, ClientRect and RenderRect.
"""

import pytest

from grid_toolkit.core.models.geometry import ClientRect, Point, RenderRect, ScrollOffset


class TestClientRect:
    """Tests for ClientRect dataclass."""

    def test_init_when_negative_width_then_raises_error(self):
        with pytest.raises(ValueError, match="width must be >= 0"):
            ClientRect(0, 0, -1, 10)

    def test_init_when_negative_height_then_raises_error(self):
        with pytest.raises(ValueError, match="height must be >= 0"):
            ClientRect(0, 0, 10, -1)

    def test_right_and_bottom_when_offset_then_added(self):
        rect = ClientRect(left=10, top=20, width=100, height=50)
        assert rect.right == 110
        assert rect.bottom == 70

    def test_contains_when_on_edge_then_true(self):
        rect = ClientRect(0, 0, 100, 100)
        assert rect.contains(Point(100, 0))
        assert not rect.contains(Point(101, 50))

    def test_translated_when_called_then_size_kept(self):
        moved = ClientRect(0, 0, 30, 40).translated(5, -5)
        assert moved == ClientRect(5, -5, 30, 40)


class TestRenderRect:
    """Tests for RenderRect.to_css()."""

    def test_to_css_when_whole_numbers_then_no_decimal(self):
        css = RenderRect("a", top=0, left=0, width=200, height=100).to_css()
        assert css == {"id": "a", "top": "0px", "left": "0px", "width": "200px", "height": "100px"}

    def test_to_css_when_fraction_then_kept(self):
        assert RenderRect("a", 0, 12.5, 1, 1).to_css()["left"] == "12.5px"


def test_point_subtraction_when_called_then_componentwise():
    assert Point(10, 5) - Point(3, 7) == Point(7, -2)


def test_scroll_offset_when_default_then_zero():
    assert ScrollOffset() == ScrollOffset(top=0.0, left=0.0)
