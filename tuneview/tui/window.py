"""Main content window state.

The window is a closed set of variants; every operation dispatches over all
of them with `match`. Switching variants is done by assigning a fresh value,
which discards the previous cursors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .cursor import Cursor
from .focus import ArtistFocus, Focusable


@dataclass
class UnknownWindow:
    """Nothing loaded yet."""

    def next(self) -> None:
        pass

    def previous(self) -> None:
        pass


@dataclass
class PlaylistWindow:
    tracks: Cursor = field(default_factory=Cursor)

    # No sub-foci.
    def next(self) -> None:
        pass

    def previous(self) -> None:
        pass


@dataclass
class AlbumWindow:
    tracks: Cursor = field(default_factory=Cursor)

    def next(self) -> None:
        pass

    def previous(self) -> None:
        pass


@dataclass
class ArtistWindow:
    """Top tracks, albums and related artists, each with its own cursor."""

    top_tracks: Cursor = field(default_factory=Cursor)
    albums: Cursor = field(default_factory=Cursor)
    related_artists: Cursor = field(default_factory=Cursor)
    focus: ArtistFocus = ArtistFocus.TOP_TRACKS

    def focused_cursor(self) -> Cursor:
        match self.focus:
            case ArtistFocus.TOP_TRACKS:
                return self.top_tracks
            case ArtistFocus.ALBUMS:
                return self.albums
            case ArtistFocus.RELATED_ARTISTS:
                return self.related_artists

    def next(self) -> None:
        self.focus = self.focus.following()

    def previous(self) -> None:
        self.focus = self.focus.preceding()


WindowState = Union[UnknownWindow, PlaylistWindow, AlbumWindow, ArtistWindow]


def cursor_handle(window: WindowState) -> Cursor | None:
    """The cursor that selection commands currently act on."""
    match window:
        case UnknownWindow():
            return None
        case PlaylistWindow(tracks=tracks) | AlbumWindow(tracks=tracks):
            return tracks
        case ArtistWindow():
            return window.focused_cursor()


def track_table_cursor(window: WindowState) -> Cursor | None:
    """The track table's cursor, independent of the Artist focus."""
    match window:
        case UnknownWindow():
            return None
        case PlaylistWindow(tracks=tracks) | AlbumWindow(tracks=tracks):
            return tracks
        case ArtistWindow(top_tracks=top_tracks):
            return top_tracks


def select(window: WindowState, index: int | None) -> None:
    cursor = cursor_handle(window)
    if cursor is not None:
        cursor.select(index)


def selected(window: WindowState) -> int | None:
    cursor = cursor_handle(window)
    return cursor.selected if cursor is not None else None


def focus_next(window: Focusable) -> None:
    window.next()


def focus_previous(window: Focusable) -> None:
    window.previous()


def window_label(window: WindowState) -> str:
    match window:
        case UnknownWindow():
            return "Unknown"
        case PlaylistWindow():
            return "Playlist"
        case AlbumWindow():
            return "Album"
        case ArtistWindow(focus=focus):
            return f"Artist ({focus.value.replace('_', ' ')})"
