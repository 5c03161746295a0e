"""Cyclic sub-focus rings."""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Focusable(Protocol):
    """Something with a ring of sub-foci, stepped in place either way."""

    def next(self) -> None: ...

    def previous(self) -> None: ...


def cycle(ring: Sequence[T], current: T, step: int) -> T:
    """Move `step` places around `ring` from `current`, wrapping at both ends."""
    return ring[(ring.index(current) + step) % len(ring)]


class ArtistFocus(Enum):
    """Which of the Artist window's three lists receives selection commands."""

    TOP_TRACKS = "top_tracks"
    ALBUMS = "albums"
    RELATED_ARTISTS = "related_artists"

    def following(self) -> ArtistFocus:
        return cycle(ARTIST_FOCUS_RING, self, 1)

    def preceding(self) -> ArtistFocus:
        return cycle(ARTIST_FOCUS_RING, self, -1)


ARTIST_FOCUS_RING: tuple[ArtistFocus, ...] = (
    ArtistFocus.TOP_TRACKS,
    ArtistFocus.ALBUMS,
    ArtistFocus.RELATED_ARTISTS,
)
