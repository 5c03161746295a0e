"""Unit tests for Navigator class."""
from __future__ import annotations

from tuneview.tui.navigator import BrowsePage, DefaultPage, Navigator


def test_navigator_initial_state():
    """Test navigator starts at the default page."""
    nav = Navigator()
    assert nav.current() == DefaultPage()
    assert nav.depth() == 1
    assert nav.breadcrumbs() == "Home"


def test_navigator_push():
    """Test pushing pages onto the stack."""
    nav = Navigator()

    nav.push(BrowsePage("playlist-1"))
    assert nav.current() == BrowsePage("playlist-1")
    assert nav.depth() == 2
    assert nav.breadcrumbs() == "Home > Browse: playlist-1"

    nav.push(BrowsePage("album-7"))
    assert nav.current() == BrowsePage("album-7")
    assert nav.depth() == 3
    assert nav.breadcrumbs() == "Home > Browse: playlist-1 > Browse: album-7"


def test_navigator_pop():
    """Test popping pages from the stack."""
    nav = Navigator()
    nav.push(BrowsePage("playlist-1"))
    nav.push(BrowsePage("album-7"))

    popped = nav.pop()
    assert popped == BrowsePage("album-7")
    assert nav.current() == BrowsePage("playlist-1")
    assert nav.depth() == 2

    popped = nav.pop()
    assert popped == BrowsePage("playlist-1")
    assert nav.current() == DefaultPage()
    assert nav.depth() == 1


def test_navigator_pop_at_root():
    """Test popping at root returns None and doesn't change state."""
    nav = Navigator()

    popped = nav.pop()
    assert popped is None
    assert nav.stack == [DefaultPage()]


def test_navigator_push_then_pop_restores_previous_page():
    nav = Navigator()
    nav.push(BrowsePage("a"))
    before = list(nav.stack)

    nav.push(BrowsePage("x"))
    nav.pop()

    assert nav.stack == before
    assert nav.current() == BrowsePage("a")


def test_navigator_home():
    """Test home resets to the default page."""
    nav = Navigator()
    nav.push(BrowsePage("a"))
    nav.push(BrowsePage("b"))

    nav.home()
    assert nav.current() == DefaultPage()
    assert nav.depth() == 1
    assert nav.breadcrumbs() == "Home"


def test_navigator_allows_repeated_pages():
    """History is a plain stack; the same context may appear more than once."""
    nav = Navigator()
    nav.push(BrowsePage("a"))
    nav.push(BrowsePage("b"))
    nav.push(BrowsePage("a"))

    assert nav.depth() == 4
    assert nav.stack[0] == DefaultPage()
