from __future__ import annotations

import threading

import pytest

from tuneview.tui.navigator import BrowsePage, DefaultPage
from tuneview.tui.state import UIState
from tuneview.tui.store import SharedUIState
from tuneview.tui.window import PlaylistWindow


def test_lock_yields_the_shared_state():
    state = UIState()
    store = SharedUIState(state)

    with store.lock() as locked:
        assert locked is state


def test_lock_is_released_after_exception():
    store = SharedUIState()

    with pytest.raises(RuntimeError):
        with store.lock() as state:
            state.is_running = False
            raise RuntimeError("boom")

    # Would deadlock if the lock had leaked.
    with store.lock() as state:
        assert state.is_running is False


def test_update_and_read_return_callable_result():
    store = SharedUIState()

    store.update(lambda s: s.push_page(BrowsePage("x")))

    assert store.read(lambda s: s.page) == BrowsePage("x")


def test_snapshot_is_independent_of_later_updates():
    store = SharedUIState()
    store.update(lambda s: setattr(s, "window", PlaylistWindow()))
    store.update(lambda s: s.window_select(1))

    snapshot = store.snapshot()
    store.update(lambda s: s.window_select(5))
    store.update(lambda s: s.push_page(BrowsePage("y")))

    assert snapshot.window_selected() == 1
    assert snapshot.history == [DefaultPage()]
    assert store.read(lambda s: s.window_selected()) == 5


def test_concurrent_updates_are_not_lost():
    store = SharedUIState()

    def worker():
        for _ in range(200):
            store.update(lambda s: s.push_page(BrowsePage("ctx")))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.read(lambda s: len(s.history)) == 1 + 4 * 200
