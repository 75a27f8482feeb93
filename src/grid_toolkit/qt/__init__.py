"""
Qt Adapter Package

PySide6 glue: notifications as Qt signals and a QTimer pump for the
interaction dispatcher.
"""

from .driver import QtInteractionDriver
from .signals import GridSignals

__all__ = ["GridSignals", "QtInteractionDriver"]
