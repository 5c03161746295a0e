"""Command registry and dispatch onto the shared UI state."""
from __future__ import annotations

import logging
from typing import Any, Callable

from ..models import BUILTIN_THEMES, Artist, Theme
from . import popup as popups
from . import window as windows
from .cursor import Cursor
from .navigator import BrowsePage
from .popup import (
    ArtistListPopup,
    CommandHelpPopup,
    ContextSearchPopup,
    ThemeListPopup,
)
from .state import UIState
from .store import SharedUIState

logger = logging.getLogger(__name__)

CommandHandler = Callable[[UIState, Any], None]


class Dispatcher:
    """Applies named commands to the shared state.

    The key-binding layer decodes key presses into command names; the
    dispatcher looks the name up in the registry and runs the handler while
    holding the state lock.
    """

    def __init__(self, store: SharedUIState):
        """Initialize dispatcher with the state it mutates.

        Args:
            store: Lock-guarded UI state
        """
        self.store = store

    def dispatch(self, command: str, arg: Any = None) -> bool:
        """Run one command.

        Args:
            command: Command name or alias (e.g. "select_next", "esc")
            arg: Command argument (list length, text, item list, ...)

        Returns:
            True if the command was handled, False if it is unknown
        """
        name = self._normalize_command(command)
        handler = COMMANDS.get(name) if name else None
        if handler is None:
            logger.debug("Ignoring unknown command %r", command)
            return False

        with self.store.lock() as state:
            handler(state, arg)
        return True

    @staticmethod
    def _normalize_command(command: str | None) -> str | None:
        """Normalize aliases and spelling variants to registered command names."""
        if command is None:
            return None
        s = str(command).strip().lower().replace("-", "_").replace(" ", "_")
        if not s:
            return None
        return _ALIASES.get(s, s)


_ALIASES = {
    "q": "quit",
    "exit": "quit",
    "esc": "close_popup",
    "escape": "close_popup",
    "b": "back",
    "previous_page": "back",
    "h": "home",
    "tab": "focus_next",
    "backtab": "focus_previous",
    "shift_tab": "focus_previous",
    "j": "select_next",
    "down": "select_next",
    "k": "select_previous",
    "up": "select_previous",
    "?": "open_command_help",
    "help": "open_command_help",
    "/": "open_search",
    "search": "open_search",
}


# Command registry - maps command names to handler functions
COMMANDS: dict[str, CommandHandler] = {}


def register_command(name: str):
    """Decorator to register a command handler.

    Usage:
        @register_command("quit")
        def quit_app(state: UIState, arg) -> None:
            ...
    """
    def decorator(fn: CommandHandler):
        COMMANDS[name] = fn
        return fn
    return decorator


def _active_cursor(state: UIState) -> Cursor | None:
    # An open list popup captures selection commands.
    cursor = popups.list_cursor(state.popup)
    if cursor is not None:
        return cursor
    return windows.cursor_handle(state.window)


def _length(arg: Any) -> int:
    try:
        return max(0, int(arg or 0))
    except (TypeError, ValueError):
        return 0


@register_command("quit")
def quit_app(state: UIState, arg: Any) -> None:
    state.is_running = False


@register_command("back")
def go_back(state: UIState, arg: Any) -> None:
    if state.pop_page() is None:
        logger.debug("Back at the default page; nothing to pop")


@register_command("home")
def go_home(state: UIState, arg: Any) -> None:
    state.go_home()


@register_command("browse")
def browse(state: UIState, arg: Any) -> None:
    context_id = str(arg or "").strip()
    if not context_id:
        return
    # Re-browsing the current context refreshes in place.
    if state.page != BrowsePage(context_id):
        state.push_page(BrowsePage(context_id))


@register_command("focus_next")
def focus_next(state: UIState, arg: Any) -> None:
    state.focus_next()


@register_command("focus_previous")
def focus_previous(state: UIState, arg: Any) -> None:
    state.focus_previous()


@register_command("select_next")
def select_next(state: UIState, arg: Any) -> None:
    cursor = _active_cursor(state)
    if cursor is not None:
        cursor.select_next(_length(arg))


@register_command("select_previous")
def select_previous(state: UIState, arg: Any) -> None:
    cursor = _active_cursor(state)
    if cursor is not None:
        cursor.select_previous(_length(arg))


@register_command("select_first")
def select_first(state: UIState, arg: Any) -> None:
    cursor = _active_cursor(state)
    if cursor is not None:
        cursor.select_first(_length(arg))


@register_command("open_command_help")
def open_command_help(state: UIState, arg: Any) -> None:
    state.open_popup(CommandHelpPopup())


@register_command("open_search")
def open_search(state: UIState, arg: Any) -> None:
    state.open_popup(ContextSearchPopup(query=str(arg or "")))
    windows.select(state.window, 0)


@register_command("search_input")
def search_input(state: UIState, arg: Any) -> None:
    if isinstance(state.popup, ContextSearchPopup):
        state.popup.query += str(arg or "")
        # The filtered list changed; restart selection at the top.
        windows.select(state.window, 0)


@register_command("search_backspace")
def search_backspace(state: UIState, arg: Any) -> None:
    if isinstance(state.popup, ContextSearchPopup):
        state.popup.query = state.popup.query[:-1]
        windows.select(state.window, 0)


@register_command("close_popup")
def close_popup(state: UIState, arg: Any) -> None:
    state.close_popup()


@register_command("open_theme_list")
def open_theme_list(state: UIState, arg: Any) -> None:
    if arg is None or isinstance(arg, str):
        themes: list[Theme] = [Theme(name=t.name, palette=dict(t.palette)) for t in BUILTIN_THEMES]
    else:
        themes = list(arg)
    cursor = Cursor()
    cursor.select_first(len(themes))
    state.open_popup(ThemeListPopup(themes=themes, cursor=cursor))


@register_command("open_artist_list")
def open_artist_list(state: UIState, arg: Any) -> None:
    artists: list[Artist] = [] if isinstance(arg, str) else list(arg or [])
    cursor = Cursor()
    cursor.select_first(len(artists))
    state.open_popup(ArtistListPopup(artists=artists, cursor=cursor))


@register_command("apply_theme")
def apply_theme(state: UIState, arg: Any) -> None:
    if not isinstance(state.popup, ThemeListPopup):
        return
    theme = state.popup.cursor.item(state.popup.themes)
    if theme is None:
        return
    logger.info("Switching theme to %s", theme.name)
    state.theme = theme
    state.close_popup()
