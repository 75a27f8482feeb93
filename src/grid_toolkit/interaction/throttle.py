"""
Module: interaction.throttle

Purpose:
    Collapse high-frequency pointer-move and scroll ticks.

Key Classes:
    - TickCoalescer: Throttle with trailing delivery

Behaviour:
    - A tick arriving at least ``throttle_ms`` after the last delivered
      tick is delivered at once.
    - A faster tick is held back; a later tick of the same kind replaces
      it (latest wins).
    - Held ticks are delivered by due() once the interval has passed, or
      immediately before any non-tick event, so a pointer-up never
      overtakes the move that preceded it.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .events import Event, is_tick

logger = logging.getLogger(__name__)


class TickCoalescer:
    """
    Throttle for tick events, keyed by event type.

    Usage:
        coalescer = TickCoalescer(throttle_ms=20)
        for event in coalescer.offer(PointerMove(p, timestamp=105.0), now=105.0):
            handle(event)
        for event in coalescer.due(now=130.0):
            handle(event)
    """

    def __init__(self, throttle_ms: float) -> None:
        self.throttle_ms = throttle_ms
        self._pending: Dict[type, Event] = {}
        self._last_delivery: Optional[float] = None

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def offer(self, event: Event, now: float) -> List[Event]:
        """
        Submit an event; returns the events to process now, in order.

        Args:
            event: Incoming event
            now: Current time in milliseconds
        """
        if not is_tick(event):
            return [*self.flush(now), event]

        if self._ready(now) and not self._pending:
            self._last_delivery = now
            return [event]

        # dicts keep first-insertion order, so kinds stay in arrival order
        self._pending[type(event)] = event
        return self.due(now)

    def due(self, now: float) -> List[Event]:
        """Deliver held ticks whose interval has elapsed."""
        if not self._pending or not self._ready(now):
            return []
        return self.flush(now)

    def flush(self, now: Optional[float] = None) -> List[Event]:
        """Deliver every held tick regardless of the interval."""
        if not self._pending:
            return []
        events = list(self._pending.values())
        self._pending.clear()
        if now is not None:
            self._last_delivery = now
        logger.debug(f"Flushing {len(events)} coalesced tick(s)")
        return events

    def reset(self) -> None:
        """Drop held ticks and forget the last delivery."""
        self._pending.clear()
        self._last_delivery = None

    def _ready(self, now: float) -> bool:
        return self._last_delivery is None or now - self._last_delivery >= self.throttle_ms
