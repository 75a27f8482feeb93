"""
Module: core.errors

Purpose:
    Exception hierarchy for the grid toolkit. Geometry problems are
    recoverable (clamping, fallbacks); only structural violations such as
    an unknown item id abort an interaction session.

Key Classes:
    - GridError: Base class for all toolkit errors
    - InvalidItemBounds: Malformed item geometry
    - UnknownItemId: Id missing from the working layout
    - DisplacementCycle: Collision push revisited an item
    - ConfigMismatch: Unusable grid configuration (e.g. "fit" without height)
    - GridUnavailable: Grid destroyed or not registered

Used By:
    - core.models.items: validate()
    - engine.*: Compaction, displacement, render mapping
    - interaction.machine: Maps errors to ErrorReported / Cancelled
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Error categories surfaced through listener notifications."""

    INVALID_ITEM_BOUNDS = "invalid_item_bounds"
    UNKNOWN_ITEM_ID = "unknown_item_id"
    DISPLACEMENT_CYCLE = "displacement_cycle"
    CONFIG_MISMATCH = "config_mismatch"
    GRID_DESTROYED = "grid_destroyed"


class GridError(Exception):
    """Base error for grid layout operations."""

    kind: ErrorKind | None = None


class InvalidItemBounds(GridError, ValueError):
    """Item geometry violates its own bounds or the grid's."""

    kind = ErrorKind.INVALID_ITEM_BOUNDS

    def __init__(self, message: str, item_id: str | None = None):
        super().__init__(message)
        self.item_id = item_id


class UnknownItemId(GridError):
    """A tick referenced an id absent from the working layout."""

    kind = ErrorKind.UNKNOWN_ITEM_ID

    def __init__(self, item_id: str, grid_id: str | None = None):
        where = f" in grid {grid_id!r}" if grid_id else ""
        super().__init__(f"Unknown item id {item_id!r}{where}")
        self.item_id = item_id
        self.grid_id = grid_id


class DisplacementCycle(GridError):
    """Collision push recursion came back to an already displaced item."""

    kind = ErrorKind.DISPLACEMENT_CYCLE

    def __init__(self, item_id: str):
        super().__init__(f"Displacement cycle at item {item_id!r}")
        self.item_id = item_id


class ConfigMismatch(GridError):
    """Grid configuration cannot produce finite geometry."""

    kind = ErrorKind.CONFIG_MISMATCH


class GridUnavailable(GridError):
    """Operation on a grid that has been destroyed or never registered."""

    kind = ErrorKind.GRID_DESTROYED

    def __init__(self, grid_id: str):
        super().__init__(f"Grid {grid_id!r} is not available")
        self.grid_id = grid_id
