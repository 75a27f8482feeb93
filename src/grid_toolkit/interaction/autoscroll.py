"""
Module: interaction.autoscroll

Purpose:
    Scroll the grid's scrollable ancestor while a dragged item is held
    near one of its edges.

Key Functions:
    - scroll_direction(): Which way to scroll for a pointer position

Key Classes:
    - ScrollDirection: Vertical/horizontal step signs
    - ScrollContainer: Protocol the host's scrollable element implements
    - AutoScroller: Steps a container while a direction is active

Behaviour:
    A band of ``proximity`` times the container's height (width) along
    the top and bottom (left and right) edges triggers scrolling. The band
    extends outside the container too, so holding the pointer just past
    the edge keeps scrolling. Each pump asks for ``speed`` pixels; the
    container reports how much it really moved.

Used By:
    - interaction.machine: Direction per drag tick
    - interaction.dispatcher: Drives the AutoScroller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from grid_toolkit.core.models.geometry import ClientRect, Point
from grid_toolkit.engine.config import DEFAULT_SCROLL_PROXIMITY, DEFAULT_SCROLL_SPEED

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScrollDirection:
    """
    Step signs per axis: -1 up/left, 0 none, 1 down/right.

    Example:
        >>> ScrollDirection(vertical=1).is_idle
        False
    """

    vertical: int = 0
    horizontal: int = 0

    @property
    def is_idle(self) -> bool:
        return self.vertical == 0 and self.horizontal == 0


NO_SCROLL = ScrollDirection()


class ScrollContainer(Protocol):
    """
    Scrollable element hosting one or more grids.

    ``scroll_by`` must return the (dx, dy) it actually applied. A container
    already at its top/bottom (left/right) limit returns 0 on that axis;
    only the applied delta shifts the dragged item.
    """

    def scroll_by(self, dx: float, dy: float) -> Tuple[float, float]:
        ...

    def client_rect(self) -> ClientRect:
        ...


def _axis_direction(position: float, start: float, end: float, threshold: float) -> int:
    if start - threshold <= position <= start + threshold:
        return -1
    if end - threshold <= position <= end + threshold:
        return 1
    return 0


def scroll_direction(
    pointer: Point,
    rect: Optional[ClientRect],
    proximity: float = DEFAULT_SCROLL_PROXIMITY,
) -> ScrollDirection:
    """
    Direction to auto-scroll for a pointer position.

    Args:
        pointer: Pointer position in client pixels
        rect: Client rect of the scroll container (None: no container)
        proximity: Edge band as a fraction of the container size

    Returns:
        ScrollDirection, NO_SCROLL when the pointer is away from every edge
    """
    if rect is None:
        return NO_SCROLL

    y_threshold = rect.height * proximity
    x_threshold = rect.width * proximity
    # Only react while the pointer is over the container (plus the band)
    if not (
        rect.left - x_threshold <= pointer.x <= rect.right + x_threshold
        and rect.top - y_threshold <= pointer.y <= rect.bottom + y_threshold
    ):
        return NO_SCROLL

    return ScrollDirection(
        vertical=_axis_direction(pointer.y, rect.top, rect.bottom, y_threshold),
        horizontal=_axis_direction(pointer.x, rect.left, rect.right, x_threshold),
    )


class AutoScroller:
    """
    Scrolls a container step by step while a direction is active.

    Usage:
        scroller = AutoScroller(speed=2)
        scroller.start(container, ScrollDirection(vertical=1))
        dx, dy = scroller.step()   # once per pump
        scroller.stop()            # at session end
    """

    def __init__(self, speed: float = DEFAULT_SCROLL_SPEED) -> None:
        self.speed = speed
        self._container: Optional[ScrollContainer] = None
        self._direction = NO_SCROLL

    @property
    def is_active(self) -> bool:
        return self._container is not None and not self._direction.is_idle

    @property
    def direction(self) -> ScrollDirection:
        return self._direction

    def start(self, container: Optional[ScrollContainer], direction: ScrollDirection) -> None:
        """Scroll ``container`` in ``direction`` from now on (idle direction stops)."""
        if container is None or direction.is_idle:
            self.stop()
            return
        if (container, direction) != (self._container, self._direction):
            logger.debug(f"Auto-scroll {direction}")
        self._container = container
        self._direction = direction

    def step(self) -> Tuple[float, float]:
        """Scroll one step; returns the (dx, dy) the container applied."""
        if not self.is_active:
            return 0.0, 0.0
        dx = self._direction.horizontal * self.speed
        dy = self._direction.vertical * self.speed
        applied_dx, applied_dy = self._container.scroll_by(dx, dy)
        return applied_dx, applied_dy

    def stop(self) -> None:
        if self._container is not None:
            logger.debug("Auto-scroll stopped")
        self._container = None
        self._direction = NO_SCROLL
