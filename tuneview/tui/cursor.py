"""Selection cursor for a rendered list or table."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass
class Cursor:
    """Optional selected index plus the scroll offset the renderer maintains.

    The cursor knows nothing about the list it points into; callers pass
    valid indices or the list length when moving.
    """

    selected: int | None = None
    offset: int = 0

    def select(self, index: int | None) -> None:
        self.selected = index
        if index is None:
            self.offset = 0

    def item(self, items: Sequence[T]) -> T | None:
        """Return the selected item, or None when nothing valid is selected."""
        if self.selected is None or not 0 <= self.selected < len(items):
            return None
        return items[self.selected]

    def select_next(self, length: int) -> None:
        if length <= 0:
            return
        if self.selected is None:
            self.select(0)
        else:
            self.select(min(self.selected + 1, length - 1))

    def select_previous(self, length: int) -> None:
        if length <= 0:
            return
        if self.selected is None:
            self.select(0)
        else:
            self.select(max(min(self.selected, length) - 1, 0))

    def select_first(self, length: int) -> None:
        if length > 0:
            self.select(0)

    def scroll_into_view(self, height: int, length: int) -> range:
        """Adjust `offset` so the selection shows in a `height`-row viewport.

        Returns the index range of the rows to draw.
        """
        if height <= 0 or length <= 0:
            self.offset = 0
            return range(0)
        if self.selected is not None:
            if self.selected < self.offset:
                self.offset = self.selected
            elif self.selected >= self.offset + height:
                self.offset = self.selected - height + 1
        # The list may have shrunk since the last frame.
        self.offset = max(0, min(self.offset, length - height))
        return range(self.offset, min(self.offset + height, length))
