"""
Tests for the Qt signal bridge.
"""

import pytest

from grid_toolkit.core.errors import ErrorKind
from grid_toolkit.core.models.geometry import ClientRect, Point
from grid_toolkit.core.models.items import GridItem
from grid_toolkit.engine.config import FIT, GridConfig, InteractionConfig
from grid_toolkit.interaction import DragContext, Grid
from grid_toolkit.qt import GridSignals

CONFIG = GridConfig(cols=4, row_height=100)


@pytest.fixture
def context(clock):
    return DragContext(InteractionConfig(throttle_ms=0), clock=clock)


@pytest.fixture
def signals(qtbot):
    return GridSignals()


class TestGridSignals:
    """GridSignals re-emits listener notifications."""

    def test_layout_updated_emitted_on_compaction(self, context, signals, qtbot):
        with qtbot.waitSignal(signals.layout_updated, timeout=1000) as blocker:
            Grid("g1", context, CONFIG, [GridItem("a", 0, 3, 1, 1)],
                 client_rect=ClientRect(0, 0, 400, 400), listener=signals)
        assert blocker.args[0] == (GridItem("a", 0, 0, 1, 1),)

    def test_rendered_emitted_with_rects_and_height(self, context, signals, qtbot):
        with qtbot.waitSignal(signals.rendered, timeout=1000) as blocker:
            Grid("g1", context, CONFIG, [GridItem("a", 0, 0, 2, 1)],
                 client_rect=ClientRect(0, 0, 400, 400), listener=signals)
        rects, height = blocker.args
        assert rects["a"].width == 200
        assert height == 100.0

    def test_drag_signals_emitted_in_order(self, context, signals, qtbot):
        grid = Grid("g1", context, CONFIG, [GridItem("a", 0, 0, 1, 1)],
                    client_rect=ClientRect(0, 0, 400, 400), listener=signals)
        seen = []
        signals.drag_started.connect(lambda item, layout: seen.append(("start", item.id)))
        signals.drag_ended.connect(lambda item, layout: seen.append(("end", item.id)))

        grid.start_drag("a", Point(50, 50))
        context.pointer_move(Point(280, 50))
        context.pointer_up()

        assert seen == [("start", "a"), ("end", "a")]

    def test_item_resized_emitted_with_pixel_size(self, context, signals, qtbot):
        grid = Grid("g1", context, CONFIG, [GridItem("a", 0, 0, 1, 1)],
                    client_rect=ClientRect(0, 0, 400, 400), listener=signals)
        grid.start_resize("a", Point(100, 100))

        with qtbot.waitSignal(signals.item_resized, timeout=1000) as blocker:
            context.pointer_move(Point(200, 100))
        assert blocker.args == [200.0, 100.0, "a"]

    def test_dropped_emitted_with_source_grid(self, context, qtbot):
        source_signals, target_signals = GridSignals(), GridSignals()
        source = Grid("A", context, CONFIG, [GridItem("a", 0, 0, 1, 1)],
                      client_rect=ClientRect(0, 0, 400, 400), listener=source_signals)
        target = Grid("B", context, CONFIG, [], client_rect=ClientRect(500, 0, 400, 400),
                      connected_to={"A"}, listener=target_signals)

        source.start_drag("a", Point(50, 50))
        context.pointer_move(Point(550, 50))
        target.pointer_enter()
        with qtbot.waitSignals([target_signals.dropped, source_signals.item_removed], timeout=1000):
            context.pointer_up()

    def test_error_emitted_with_kind(self, context, signals, qtbot):
        with qtbot.waitSignal(signals.error, timeout=1000) as blocker:
            Grid("g1", context, GridConfig(row_height=FIT), [GridItem("a", 0, 0, 1, 1)],
                 client_rect=ClientRect(0, 0, 400, 0), listener=signals)
        assert blocker.args[0] is ErrorKind.CONFIG_MISMATCH
