"""Popup overlay state.

At most one popup is shown; `NoPopup` means nothing is drawn over the
window. List popups keep their own snapshot of the items they display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ..models import Artist, Theme
from .cursor import Cursor


@dataclass
class NoPopup:
    pass


@dataclass
class CommandHelpPopup:
    pass


@dataclass
class ContextSearchPopup:
    query: str = ""


@dataclass
class PlaylistListPopup:
    cursor: Cursor = field(default_factory=Cursor)


@dataclass
class DeviceListPopup:
    cursor: Cursor = field(default_factory=Cursor)


@dataclass
class ArtistListPopup:
    artists: list[Artist] = field(default_factory=list)
    cursor: Cursor = field(default_factory=Cursor)


@dataclass
class ThemeListPopup:
    themes: list[Theme] = field(default_factory=list)
    cursor: Cursor = field(default_factory=Cursor)


PopupState = Union[
    NoPopup,
    CommandHelpPopup,
    ContextSearchPopup,
    PlaylistListPopup,
    DeviceListPopup,
    ArtistListPopup,
    ThemeListPopup,
]


def list_cursor(popup: PopupState) -> Cursor | None:
    """Cursor of the current list popup, None for non-list popups."""
    match popup:
        case PlaylistListPopup(cursor=cursor) | DeviceListPopup(cursor=cursor):
            return cursor
        case ArtistListPopup(cursor=cursor) | ThemeListPopup(cursor=cursor):
            return cursor
        case NoPopup() | CommandHelpPopup() | ContextSearchPopup():
            return None


def list_items(popup: PopupState) -> list | None:
    """Items owned by the popup, for popups that carry their own list."""
    match popup:
        case ArtistListPopup(artists=artists):
            return artists
        case ThemeListPopup(themes=themes):
            return themes
        case _:
            return None


def selected(popup: PopupState) -> int | None:
    cursor = list_cursor(popup)
    return cursor.selected if cursor is not None else None


def select(popup: PopupState, index: int | None) -> None:
    cursor = list_cursor(popup)
    if cursor is not None:
        cursor.select(index)


def popup_label(popup: PopupState) -> str | None:
    match popup:
        case NoPopup():
            return None
        case CommandHelpPopup():
            return "Commands"
        case ContextSearchPopup():
            return "Search"
        case PlaylistListPopup():
            return "Playlists"
        case DeviceListPopup():
            return "Devices"
        case ArtistListPopup():
            return "Artists"
        case ThemeListPopup():
            return "Themes"
