from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from idle_nudge.listener import StopKeyHandler  # noqa: E402
from idle_nudge.window import StopWindow  # noqa: E402


class FakeWatcher:
    def __init__(self):
        self.alive = True
        self.stopped = False

    def is_alive(self):
        return self.alive

    def stop(self):
        self.stopped = True


@pytest.fixture
def window():
    watcher = FakeWatcher()
    try:
        win = StopWindow(StopKeyHandler(watcher.stop), watcher)
    except tk.TclError:
        pytest.skip("no display")
    yield win
    if not win.closed:
        win.close()


def test_escape_in_window_stops_watcher(window):
    window.on_key(SimpleNamespace(keysym="Escape"))
    assert window.watcher.stopped


def test_other_key_in_window_is_ignored(window):
    window.on_key(SimpleNamespace(keysym="a"))
    assert not window.watcher.stopped


def test_window_closes_when_watcher_ends(window):
    window.check_watcher()
    assert not window.closed
    window.watcher.alive = False
    window.check_watcher()
    assert window.closed


def test_closing_window_stops_watcher(window):
    window.close()
    assert window.closed
    assert window.watcher.stopped
