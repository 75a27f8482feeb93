"""
Module: core.models.items

Purpose:
    Provides the GridItem dataclass and the Layout alias - the canonical
    cell-space description of what sits where on a grid. Layouts are
    tuples of frozen items; every operation returns a new tuple and
    never mutates its input.

Key Functions:
    - validate(item, config): Raise InvalidItemBounds for malformed geometry
    - find_item / replace_item / without_item: Id-based layout access
    - layout_bottom(): Lowest occupied row (exclusive)
    - items_equal(): Geometry equality ignoring constraints

Dependencies:
    - dataclasses (std)

Used By:
    - engine.*: Collision, compaction, displacement, render mapping
    - simulation.*: Drag/resize candidates
    - interaction.*: Session working layouts
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from ..errors import InvalidItemBounds, UnknownItemId

if TYPE_CHECKING:
    from grid_toolkit.engine.config import GridConfig


@dataclass(frozen=True, slots=True)
class GridItem:
    """
    One rectangular item placed on the grid, in cell units.

    Attributes:
        id: Identifier, unique within a layout
        x: Column index of the left edge (origin top-left)
        y: Row index of the top edge
        w: Width in columns
        h: Height in rows
        min_w / max_w: Optional width bounds
        min_h / max_h: Optional height bounds
        static: If True the item never moves and only acts as an obstacle

    Invariants:
        - x >= 0, y >= 0
        - w >= max(1, min_w) and w <= max_w when set (same for h)

    Construction does not enforce the invariants so that malformed input
    can be inspected and repaired; call validate() to check them.

    Example:
        >>> item = GridItem("a", x=0, y=0, w=2, h=1)
        >>> item.right, item.bottom
        (2, 1)
    """

    id: str
    x: int
    y: int
    w: int
    h: int
    min_w: Optional[int] = None
    max_w: Optional[int] = None
    min_h: Optional[int] = None
    max_h: Optional[int] = None
    static: bool = False

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """First column to the right of the item (exclusive)."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """First row below the item (exclusive)."""
        return self.y + self.h

    # ─────────────────────────────────────────────────────────────────────────
    # Copies
    # ─────────────────────────────────────────────────────────────────────────

    def moved(self, x: Optional[int] = None, y: Optional[int] = None) -> GridItem:
        """Return a copy at a new position (unchanged axes keep their value)."""
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
        )

    def resized(self, w: Optional[int] = None, h: Optional[int] = None) -> GridItem:
        """Return a copy with a new size."""
        return replace(
            self,
            w=self.w if w is None else w,
            h=self.h if h is None else h,
        )

    def with_id(self, item_id: str) -> GridItem:
        """Return a copy carrying another id (used for placeholders)."""
        return replace(self, id=item_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON interchange.

        Optional bounds and the static flag are only written when set.
        """
        d = {"id": self.id, "x": self.x, "y": self.y, "w": self.w, "h": self.h}
        for key in ("min_w", "max_w", "min_h", "max_h"):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        if self.static:
            d["static"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict) -> GridItem:
        """Deserialize from dictionary (no validation)."""
        return cls(
            id=str(data["id"]),
            x=data["x"],
            y=data["y"],
            w=data["w"],
            h=data["h"],
            min_w=data.get("min_w"),
            max_w=data.get("max_w"),
            min_h=data.get("min_h"),
            max_h=data.get("max_h"),
            static=data.get("static", False),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        flag = ", static" if self.static else ""
        return f"GridItem({self.id!r}@{self.x},{self.y} {self.w}x{self.h}{flag})"


Layout = tuple[GridItem, ...]


def validate(item: GridItem, config: Optional[GridConfig] = None) -> None:
    """
    Check an item's geometry against its own bounds and the grid.

    Args:
        item: Item to check
        config: Grid configuration; when given, the item must also fit
            within ``config.cols`` columns

    Raises:
        InvalidItemBounds: On the first violated invariant
    """
    if item.x < 0 or item.y < 0:
        raise InvalidItemBounds(
            f"Item {item.id!r} has negative position ({item.x}, {item.y})", item.id
        )
    _validate_span(item, "w", item.w, item.min_w, item.max_w)
    _validate_span(item, "h", item.h, item.min_h, item.max_h)
    if config is not None and item.w > config.cols:
        raise InvalidItemBounds(
            f"Item {item.id!r} is wider ({item.w}) than the grid ({config.cols} cols)",
            item.id,
        )


def _validate_span(
    item: GridItem,
    name: str,
    value: int,
    minimum: Optional[int],
    maximum: Optional[int],
) -> None:
    if value < 1:
        raise InvalidItemBounds(f"Item {item.id!r} has non-positive {name}={value}", item.id)
    if minimum is not None and value < minimum:
        raise InvalidItemBounds(
            f"Item {item.id!r} has {name}={value} below min_{name}={minimum}", item.id
        )
    if maximum is not None and value > maximum:
        raise InvalidItemBounds(
            f"Item {item.id!r} has {name}={value} above max_{name}={maximum}", item.id
        )


# ─────────────────────────────────────────────────────────────────────────────
# Layout helpers
# ─────────────────────────────────────────────────────────────────────────────

def as_layout(items: Iterable[GridItem]) -> Layout:
    """Normalize any iterable of items into a Layout tuple."""
    return tuple(items)


def find_item(layout: Sequence[GridItem], item_id: str) -> Optional[GridItem]:
    """Return the item with ``item_id`` or None."""
    for item in layout:
        if item.id == item_id:
            return item
    return None


def get_item(layout: Sequence[GridItem], item_id: str) -> GridItem:
    """
    Return the item with ``item_id``.

    Raises:
        UnknownItemId: If no item carries that id
    """
    item = find_item(layout, item_id)
    if item is None:
        raise UnknownItemId(item_id)
    return item


def replace_item(layout: Sequence[GridItem], item: GridItem) -> Layout:
    """Return a layout where the entry sharing ``item.id`` is swapped for ``item``."""
    return tuple(item if current.id == item.id else current for current in layout)


def without_item(layout: Sequence[GridItem], item_id: str) -> Layout:
    """Return a layout without the entry ``item_id``."""
    return tuple(item for item in layout if item.id != item_id)


def layout_bottom(layout: Sequence[GridItem]) -> int:
    """Return the first fully free row below every item (0 when empty)."""
    return max((item.bottom for item in layout), default=0)


def items_equal(a: GridItem, b: GridItem) -> bool:
    """Compare id and geometry, ignoring min/max constraints."""
    return (a.id, a.x, a.y, a.w, a.h) == (b.id, b.x, b.y, b.w, b.h)
