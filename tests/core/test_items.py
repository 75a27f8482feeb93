"""
Unit Tests for GridItem and Layout Helpers

Tests for the cell-space item model, validate() and id-based layout access.
"""

import pytest

from grid_toolkit.core.errors import InvalidItemBounds, UnknownItemId
from grid_toolkit.core.models.items import (
    GridItem,
    find_item,
    get_item,
    items_equal,
    layout_bottom,
    replace_item,
    validate,
    without_item,
)
from grid_toolkit.engine.config import GridConfig


class TestGridItem:
    """Tests for GridItem dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Property Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_right_and_bottom_when_item_then_exclusive_edges(self):
        """right/bottom should be the first cell past the item."""
        item = GridItem("a", x=1, y=2, w=3, h=4)
        assert item.right == 4
        assert item.bottom == 6

    def test_frozen_when_assigning_then_raises(self):
        """Items are immutable."""
        item = GridItem("a", 0, 0, 1, 1)
        with pytest.raises(AttributeError):
            item.x = 3

    # ─────────────────────────────────────────────────────────────────────────
    # Copy Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_moved_when_one_axis_given_then_other_kept(self):
        """moved() only changes the axes it is given."""
        item = GridItem("a", 1, 2, 1, 1, min_w=1)
        moved = item.moved(y=5)
        assert (moved.x, moved.y) == (1, 5)
        assert moved.min_w == 1
        assert (item.x, item.y) == (1, 2)

    def test_resized_when_called_then_returns_copy(self):
        item = GridItem("a", 0, 0, 1, 1)
        assert item.resized(w=3).w == 3
        assert item.w == 1

    def test_with_id_when_called_then_keeps_geometry(self):
        item = GridItem("a", 1, 2, 3, 4, static=True)
        renamed = item.with_id("b")
        assert renamed.id == "b"
        assert (renamed.x, renamed.y, renamed.w, renamed.h, renamed.static) == (1, 2, 3, 4, True)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_to_dict_when_optional_fields_unset_then_omitted(self):
        """Only set bounds and a true static flag are written."""
        assert GridItem("a", 0, 1, 2, 3).to_dict() == {"id": "a", "x": 0, "y": 1, "w": 2, "h": 3}
        data = GridItem("a", 0, 0, 2, 1, min_w=2, static=True).to_dict()
        assert data["min_w"] == 2
        assert data["static"] is True
        assert "max_w" not in data

    def test_from_dict_when_minimal_then_defaults_applied(self):
        item = GridItem.from_dict({"id": 7, "x": 0, "y": 0, "w": 1, "h": 1})
        assert item.id == "7"
        assert item.static is False
        assert item.max_h is None

    def test_repr_when_static_then_flagged(self):
        assert repr(GridItem("a", 1, 2, 3, 4)) == "GridItem('a'@1,2 3x4)"
        assert repr(GridItem("s", 0, 0, 1, 1, static=True)) == "GridItem('s'@0,0 1x1, static)"


class TestValidate:
    """Tests for validate()."""

    def test_validate_when_valid_then_no_error(self):
        validate(GridItem("a", 0, 0, 2, 2, min_w=1, max_w=3), GridConfig(cols=4))

    def test_validate_when_negative_position_then_raises(self):
        with pytest.raises(InvalidItemBounds, match="negative position"):
            validate(GridItem("a", -1, 0, 1, 1))

    def test_validate_when_zero_width_then_raises(self):
        with pytest.raises(InvalidItemBounds, match="non-positive w"):
            validate(GridItem("a", 0, 0, 0, 1))

    def test_validate_when_below_min_then_raises(self):
        with pytest.raises(InvalidItemBounds, match="below min_h"):
            validate(GridItem("a", 0, 0, 1, 1, min_h=2))

    def test_validate_when_above_max_then_raises(self):
        with pytest.raises(InvalidItemBounds, match="above max_w"):
            validate(GridItem("a", 0, 0, 5, 1, max_w=4))

    def test_validate_when_wider_than_grid_then_raises(self):
        with pytest.raises(InvalidItemBounds, match="wider"):
            validate(GridItem("a", 0, 0, 5, 1), GridConfig(cols=4))

    def test_validate_when_error_then_carries_item_id(self):
        with pytest.raises(InvalidItemBounds) as exc_info:
            validate(GridItem("bad", 0, -2, 1, 1))
        assert exc_info.value.item_id == "bad"

    def test_validate_when_error_then_is_value_error(self):
        """InvalidItemBounds doubles as ValueError for generic callers."""
        with pytest.raises(ValueError):
            validate(GridItem("a", 0, 0, 1, 0))


class TestLayoutHelpers:
    """Tests for id-based layout helpers."""

    @pytest.fixture
    def layout(self):
        return (GridItem("a", 0, 0, 1, 1), GridItem("b", 1, 0, 1, 3))

    def test_find_item_when_missing_then_none(self, layout):
        assert find_item(layout, "b").h == 3
        assert find_item(layout, "zzz") is None

    def test_get_item_when_missing_then_raises_unknown_id(self, layout):
        with pytest.raises(UnknownItemId, match="zzz"):
            get_item(layout, "zzz")

    def test_replace_item_when_id_matches_then_swapped_in_place(self, layout):
        replaced = replace_item(layout, GridItem("a", 3, 3, 1, 1))
        assert [item.id for item in replaced] == ["a", "b"]
        assert replaced[0].x == 3
        assert layout[0].x == 0

    def test_without_item_when_present_then_removed(self, layout):
        assert [item.id for item in without_item(layout, "a")] == ["b"]

    def test_layout_bottom_when_empty_then_zero(self, layout):
        assert layout_bottom(()) == 0
        assert layout_bottom(layout) == 3

    def test_items_equal_when_only_constraints_differ_then_true(self):
        assert items_equal(GridItem("a", 0, 0, 1, 1), GridItem("a", 0, 0, 1, 1, max_w=2))
        assert not items_equal(GridItem("a", 0, 0, 1, 1), GridItem("a", 0, 1, 1, 1))
