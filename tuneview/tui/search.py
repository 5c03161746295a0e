"""Live text filter over the items shown while a search popup is open."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .popup import ContextSearchPopup, PopupState

T = TypeVar("T")


def query_match(text: str, query: str) -> bool:
    """True when every whitespace-separated token of `query` occurs in `text`.

    Both sides are lowercased. An empty query has no tokens and matches
    everything, so opening the search popup initially shows the whole list.
    """
    haystack = text.lower()
    return all(token in haystack for token in query.lower().split())


def search_filtered_items(popup: PopupState, items: Sequence[T]) -> list[T]:
    """Items to display, narrowed by the query while a search popup is open.

    Order is preserved and the returned list references the original objects.
    """
    if isinstance(popup, ContextSearchPopup):
        return [item for item in items if query_match(str(item), popup.query)]
    return list(items)
