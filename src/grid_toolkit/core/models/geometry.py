"""
Module: core.models.geometry

Purpose:
    Pixel-space value types shared by render mapping, the drag/resize
    simulator and the interaction layer. Everything here is a plain
    immutable number bag; no rendering surface is ever touched.

Key Classes:
    - Point: Pointer position in client coordinates
    - ClientRect: Element rectangle in client coordinates
    - ScrollOffset: Cumulative scroll delta since a session started
    - RenderRect: Pixel rectangle of one item inside its grid

Dependencies:
    - dataclasses (std)

Used By:
    - engine.render: Produces RenderRects
    - simulation.drag / simulation.resize: Pointer and rect inputs
    - interaction.events: Event payloads
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Pointer position in client (viewport) pixels."""

    x: float
    y: float

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class ScrollOffset:
    """
    Cumulative scroll delta of a scrollable ancestor.

    Reported relative to the moment the session subscribed, so a fresh
    session always starts at (0, 0).
    """

    top: float = 0.0
    left: float = 0.0


@dataclass(frozen=True, slots=True)
class ClientRect:
    """
    Axis-aligned rectangle in client pixels.

    Attributes:
        left: X of the left edge
        top: Y of the top edge
        width: Width in pixels (>= 0)
        height: Height in pixels (>= 0)

    Example:
        >>> rect = ClientRect(left=10, top=20, width=100, height=50)
        >>> rect.right, rect.bottom
        (110, 70)
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, point: Point) -> bool:
        """Return whether a point lies inside the rectangle (edges included)."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def translated(self, dx: float, dy: float) -> ClientRect:
        """Return a copy moved by (dx, dy)."""
        return ClientRect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass(frozen=True, slots=True)
class RenderRect:
    """
    Pixel rectangle of one grid item, relative to its grid container.

    Values are kept as floats; the rendering surface owns final snapping.

    Example:
        >>> RenderRect("a", top=0, left=0, width=200, height=100).to_css()
        {'id': 'a', 'top': '0px', 'left': '0px', 'width': '200px', 'height': '100px'}
    """

    id: str
    top: float
    left: float
    width: float
    height: float

    def to_css(self) -> dict[str, str]:
        """Format as CSS-style pixel strings for style-based renderers."""
        return {
            "id": self.id,
            "top": f"{_fmt(self.top)}px",
            "left": f"{_fmt(self.left)}px",
            "width": f"{_fmt(self.width)}px",
            "height": f"{_fmt(self.height)}px",
        }


def _fmt(value: float) -> str:
    # 200.0 -> "200", 12.5 -> "12.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)
