import os
import pytest
import sys

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
from pathlib import Path

# Add src to sys.path so we can import grid_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from grid_toolkit.core.models.geometry import ClientRect  # noqa: E402
from grid_toolkit.interaction.listener import GridListener  # noqa: E402


class RecordingListener(GridListener):
    """GridListener that records every notification as (name, args)."""

    def __init__(self):
        self.calls = []

    def names(self):
        return [name for name, _ in self.calls]

    def last(self, name):
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        return None

    def on_layout_updated(self, layout):
        self.calls.append(("layout_updated", (layout,)))

    def on_drag_start(self, item, layout):
        self.calls.append(("drag_start", (item, layout)))

    def on_drag_end(self, item, layout):
        self.calls.append(("drag_end", (item, layout)))

    def on_resize_start(self, item, layout):
        self.calls.append(("resize_start", (item, layout)))

    def on_resize_end(self, item, layout):
        self.calls.append(("resize_end", (item, layout)))

    def on_item_resize(self, width, height, item_id):
        self.calls.append(("item_resize", (width, height, item_id)))

    def on_drag_enter(self, item, layout):
        self.calls.append(("drag_enter", (item, layout)))

    def on_drag_exit(self, item, layout):
        self.calls.append(("drag_exit", (item, layout)))

    def on_drop(self, item, source_grid_id, layout):
        self.calls.append(("drop", (item, source_grid_id, layout)))

    def on_item_removed(self, item, layout):
        self.calls.append(("item_removed", (item, layout)))

    def on_render(self, rects, grid_height):
        self.calls.append(("render", (dict(rects), grid_height)))

    def on_error(self, kind, message):
        self.calls.append(("error", (kind, message)))


class FakeClock:
    """Manually advanced millisecond clock for dispatcher tests."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FakeScrollContainer:
    """Scroll container recording scroll_by calls, clamped to [0, max_*]."""

    def __init__(self, rect, scroll_top=0.0, scroll_left=0.0, max_top=None, max_left=None):
        self.rect = rect
        self.scroll_top = scroll_top
        self.scroll_left = scroll_left
        self.max_top = float("inf") if max_top is None else max_top
        self.max_left = float("inf") if max_left is None else max_left
        self.scrolls = []

    def scroll_by(self, dx, dy):
        self.scrolls.append((dx, dy))
        top = min(max(self.scroll_top + dy, 0.0), self.max_top)
        left = min(max(self.scroll_left + dx, 0.0), self.max_left)
        applied = (left - self.scroll_left, top - self.scroll_top)
        self.scroll_top, self.scroll_left = top, left
        return applied

    def client_rect(self):
        return self.rect


# Common test fixtures
@pytest.fixture
def make_listener():
    """Factory for recording listeners."""
    return RecordingListener


@pytest.fixture
def clock():
    """Fake dispatcher clock starting at 0 ms."""
    return FakeClock()


@pytest.fixture
def make_scroll_container():
    """Factory for fake scroll containers."""
    def _make(rect=ClientRect(0, 0, 400, 400), **position):
        return FakeScrollContainer(rect, **position)
    return _make
