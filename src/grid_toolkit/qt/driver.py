"""Timer-driven pump for interaction sessions.

Held (throttled) ticks and auto-scroll steps only advance when the
dispatcher is pumped. The driver runs a QTimer for exactly as long as a
session is active.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from grid_toolkit.interaction.context import DragContext
from grid_toolkit.interaction.state import RUNNING_STATES, State

logger = logging.getLogger(__name__)

# Lower bound so a zero throttle does not spin the event loop
MIN_INTERVAL_MS = 1


class QtInteractionDriver(QObject):
    """Pumps a DragContext from the Qt event loop.

    Usage:
        driver = QtInteractionDriver(context)
        driver.session_started.connect(lambda: self.setCursor(Qt.ClosedHandCursor))
        driver.session_finished.connect(self.unsetCursor)
    """

    # Emitted when a drag/resize session starts
    session_started = Signal()
    # Emitted when it completes or is cancelled
    session_finished = Signal()

    def __init__(self, context: DragContext, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.context = context
        self._timer = QTimer(self)
        self._timer.setInterval(max(MIN_INTERVAL_MS, round(context.settings.throttle_ms)))
        self._timer.timeout.connect(self.pump)
        context.add_observer(self._on_state)

    def is_running(self) -> bool:
        """Check if the pump timer is active."""
        return self._timer.isActive()

    def pump(self) -> None:
        """Advance the dispatcher by one step."""
        self.context.pump()

    def _on_state(self, state: State) -> None:
        if isinstance(state, RUNNING_STATES):
            if not self._timer.isActive():
                self._timer.start()
                logger.debug("Interaction pump started")
                self.session_started.emit()
        elif self._timer.isActive():
            self._timer.stop()
            logger.debug("Interaction pump stopped")
            self.session_finished.emit()
