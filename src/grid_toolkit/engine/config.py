"""
Module: engine.config

Purpose:
    Configuration for grid geometry and interaction behaviour.
    Immutable dataclasses, coerced and validated on construction.

Key Classes:
    - CompactType: Direction of automatic compaction
    - GridConfig: Columns, row height, gap, collision and compaction policy
    - InteractionConfig: Throttling and auto-scroll settings

Dependencies:
    - dataclasses (std)

Used By:
    - engine.render: Pixel mapping
    - engine.displacement: Collision policy
    - simulation.*: Drag/resize ticks
    - interaction.grid: Grid instances
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional, Union

from grid_toolkit.core.errors import ConfigMismatch

FIT = "fit"

DEFAULT_COLS = 6
DEFAULT_ROW_HEIGHT = 100
DEFAULT_THROTTLE_MS = 20
DEFAULT_SCROLL_SPEED = 2
# Fraction of the scroll container's size that counts as "near the edge"
DEFAULT_SCROLL_PROXIMITY = 0.05


class CompactType(Enum):
    """
    Direction in which items are pulled to remove gaps.

    A grid with ``compact_type=None`` performs no compaction at all.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def parse(cls, value: Union[CompactType, str, None]) -> Optional[CompactType]:
        """Accept enum members, their string values, or None."""
        if value is None or isinstance(value, CompactType):
            return value
        return cls(value)


RowHeight = Union[float, str]


@dataclass(frozen=True)
class GridConfig:
    """
    Geometry and collision policy of one grid (immutable).

    Values are coerced the same way the grid inputs always were: columns
    and numeric row heights are rounded and clamped to >= 1, gap and
    height are clamped to >= 0.

    Attributes:
        cols: Number of columns
        row_height: Row height in pixels, or "fit" to divide the available
            height evenly between the layout's rows
        height: Fixed grid height in pixels, or None to grow with content
        gap: Gap between cells in pixels
        prevent_collision: If True, a drag into an occupied cell is blocked
            instead of pushing the other items away
        compact_type: Compaction direction, or None for free placement

    Example:
        >>> config = GridConfig(cols=12, row_height=50, gap=10)
        >>> config.is_fit
        False
    """

    cols: int = DEFAULT_COLS
    row_height: RowHeight = DEFAULT_ROW_HEIGHT
    height: Optional[float] = None
    gap: float = 0
    prevent_collision: bool = False
    compact_type: Optional[CompactType] = CompactType.VERTICAL

    def __post_init__(self) -> None:
        """Coerce and validate configuration on construction."""
        # frozen: coercion goes through object.__setattr__
        object.__setattr__(self, "cols", max(1, round(self.cols)))
        if self.row_height != FIT:
            if isinstance(self.row_height, str):
                raise ValueError(f"row_height must be a number or 'fit': {self.row_height!r}")
            object.__setattr__(self, "row_height", max(1, round(self.row_height)))
        object.__setattr__(self, "gap", max(0, self.gap))
        if self.height is not None:
            object.__setattr__(self, "height", max(0, self.height))
        object.__setattr__(self, "compact_type", CompactType.parse(self.compact_type))

    @property
    def is_fit(self) -> bool:
        """Whether rows stretch to the available height."""
        return self.row_height == FIT

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data = asdict(self)
        data["compact_type"] = self.compact_type.value if self.compact_type else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GridConfig:
        """Build a config from a settings dict; unknown keys are rejected."""
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown grid config keys: {sorted(unknown)}")
        return cls(**data)


@dataclass(frozen=True)
class InteractionConfig:
    """
    Timing and auto-scroll behaviour of interaction sessions (immutable).

    Attributes:
        throttle_ms: Minimal interval between two processed move/scroll ticks
        scroll_speed: Pixels scrolled per auto-scroll step
        scroll_proximity: Fraction of the scroll container's width/height
            around each edge that triggers auto-scroll
        compact_on_props_change: Whether grids re-compact when their layout,
            columns or compaction type change
    """

    throttle_ms: float = DEFAULT_THROTTLE_MS
    scroll_speed: float = DEFAULT_SCROLL_SPEED
    scroll_proximity: float = DEFAULT_SCROLL_PROXIMITY
    compact_on_props_change: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.throttle_ms < 0:
            raise ValueError(f"throttle_ms must be non-negative: {self.throttle_ms}")
        if self.scroll_speed < 0:
            raise ValueError(f"scroll_speed must be non-negative: {self.scroll_speed}")
        if not 0 <= self.scroll_proximity <= 0.5:
            raise ValueError(f"scroll_proximity must be within [0, 0.5]: {self.scroll_proximity}")


def require_fit_height(config: GridConfig, measured_height: Optional[float]) -> float:
    """
    Return the pixel height a "fit" grid divides between its rows.

    Falls back to the measured container height when the config has no
    fixed height.

    Raises:
        ConfigMismatch: If neither height is usable
    """
    if config.height is not None and config.height > 0:
        return config.height
    if measured_height is not None and measured_height > 0:
        return measured_height
    raise ConfigMismatch(
        "row_height='fit' requires a grid height; set GridConfig.height "
        "or provide a measured container height"
    )
