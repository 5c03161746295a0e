"""Lock-guarded access to the shared UI state."""
from __future__ import annotations

import copy
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from .state import UIState

R = TypeVar("R")


class SharedUIState:
    """The single UIState shared by the input handler and the renderer.

    Every access goes through one exclusive lock over the whole aggregate, so
    a reader never sees a half-applied update. Nothing done under the lock
    blocks or performs I/O.
    """

    def __init__(self, state: UIState | None = None):
        self._state = state if state is not None else UIState()
        self._lock = threading.Lock()

    @contextmanager
    def lock(self) -> Iterator[UIState]:
        with self._lock:
            yield self._state

    def read(self, fn: Callable[[UIState], R]) -> R:
        with self._lock:
            return fn(self._state)

    def update(self, fn: Callable[[UIState], R]) -> R:
        with self._lock:
            return fn(self._state)

    def snapshot(self) -> UIState:
        """Deep copy of the state for drawing one frame outside the lock."""
        with self._lock:
            return copy.deepcopy(self._state)
