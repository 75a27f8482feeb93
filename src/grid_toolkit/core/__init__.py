"""
Core Package

Models, errors and interchange helpers shared by every other layer.
Nothing in here depends on the engine, the simulator or Qt.
"""

from .errors import (
    ConfigMismatch,
    DisplacementCycle,
    ErrorKind,
    GridError,
    GridUnavailable,
    InvalidItemBounds,
    UnknownItemId,
)
from .models import GridItem, Layout, validate

__all__ = [
    "GridItem",
    "Layout",
    "validate",
    "ErrorKind",
    "GridError",
    "InvalidItemBounds",
    "UnknownItemId",
    "DisplacementCycle",
    "ConfigMismatch",
    "GridUnavailable",
]
