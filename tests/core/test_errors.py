"""
Unit Tests for the Error Hierarchy
"""

from grid_toolkit.core.errors import (
    ConfigMismatch,
    DisplacementCycle,
    ErrorKind,
    GridError,
    GridUnavailable,
    InvalidItemBounds,
    UnknownItemId,
)


class TestErrorHierarchy:
    """Every error derives from GridError and carries its kind."""

    def test_kinds_when_instantiated_then_match_class(self):
        assert InvalidItemBounds("x").kind is ErrorKind.INVALID_ITEM_BOUNDS
        assert UnknownItemId("a").kind is ErrorKind.UNKNOWN_ITEM_ID
        assert DisplacementCycle("a").kind is ErrorKind.DISPLACEMENT_CYCLE
        assert ConfigMismatch("x").kind is ErrorKind.CONFIG_MISMATCH
        assert GridUnavailable("g").kind is ErrorKind.GRID_DESTROYED

    def test_base_when_catching_grid_error_then_all_caught(self):
        for error in (InvalidItemBounds("x"), UnknownItemId("a"), ConfigMismatch("x")):
            assert isinstance(error, GridError)

    def test_unknown_item_id_when_grid_given_then_in_message(self):
        error = UnknownItemId("a", "left")
        assert str(error) == "Unknown item id 'a' in grid 'left'"
        assert error.item_id == "a"
        assert error.grid_id == "left"

    def test_unknown_item_id_when_no_grid_then_short_message(self):
        assert str(UnknownItemId("a")) == "Unknown item id 'a'"
