from __future__ import annotations

import pytest

from tuneview.models import Artist, Theme
from tuneview.tui import popup as popups
from tuneview.tui.popup import (
    ArtistListPopup,
    CommandHelpPopup,
    ContextSearchPopup,
    DeviceListPopup,
    NoPopup,
    PlaylistListPopup,
    ThemeListPopup,
)


def _list_popups():
    return [
        PlaylistListPopup(),
        DeviceListPopup(),
        ArtistListPopup(artists=[Artist("1", "Daft Punk")]),
        ThemeListPopup(themes=[Theme("default")]),
    ]


@pytest.mark.parametrize("popup", _list_popups(), ids=["playlists", "devices", "artists", "themes"])
def test_selection_round_trip(popup):
    popups.select(popup, 3)
    assert popups.selected(popup) == 3
    assert popups.list_cursor(popup).selected == 3

    popups.select(popup, None)
    assert popups.selected(popup) is None


@pytest.mark.parametrize(
    "popup",
    [NoPopup(), CommandHelpPopup(), ContextSearchPopup("punk")],
    ids=["none", "help", "search"],
)
def test_non_list_popups_ignore_selection(popup):
    before = repr(popup)

    popups.select(popup, 3)

    assert popups.selected(popup) is None
    assert popups.list_cursor(popup) is None
    assert repr(popup) == before


def test_list_items_returns_owned_snapshot():
    artists = [Artist("1", "Daft Punk"), Artist("2", "Gorillaz")]
    popup = ArtistListPopup(artists=artists)

    assert popups.list_items(popup) is artists
    assert popups.list_items(PlaylistListPopup()) is None
    assert popups.list_items(NoPopup()) is None


def test_popup_label():
    assert popups.popup_label(NoPopup()) is None
    assert popups.popup_label(ContextSearchPopup()) == "Search"
    assert popups.popup_label(ThemeListPopup()) == "Themes"
