"""UI state: what the renderer draws and the input handler mutates."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from ..models import KeySequence, Rect, Theme, default_theme, find_theme
from . import popup as popups
from . import window as windows
from .navigator import Navigator, PageState
from .popup import NoPopup, PopupState
from .search import search_filtered_items
from .window import UnknownWindow, WindowState

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class UIState:
    """Presentation state for one interactive session.

    Owns the page history, the main window, the popup overlay and a few
    cross-cutting fields. It is mutated in place for the lifetime of the
    process; share it between threads through `SharedUIState`.
    """

    is_running: bool = True
    theme: Theme = field(default_factory=default_theme)
    input_key_sequence: KeySequence = field(default_factory=KeySequence)

    nav: Navigator = field(default_factory=Navigator)
    popup: PopupState = field(default_factory=NoPopup)
    window: WindowState = field(default_factory=UnknownWindow)

    progress_bar_rect: Rect = field(default_factory=Rect)

    @classmethod
    def from_settings(cls, settings: Settings) -> UIState:
        """Build the startup state, resolving the configured theme name."""
        name = settings.TUNEVIEW_THEME
        theme = find_theme(name)
        if theme is None:
            logger.warning("Unknown theme %r, falling back to the default theme", name)
            theme = default_theme()
        return cls(theme=theme)

    # Page / history

    @property
    def page(self) -> PageState:
        return self.nav.current()

    @property
    def history(self) -> list[PageState]:
        """Copy of the page stack; change it through push_page/pop_page/go_home."""
        return list(self.nav.stack)

    def push_page(self, page: PageState) -> None:
        self.nav.push(page)

    def pop_page(self) -> PageState | None:
        """Go back one page. Returns the page left, or None at the root."""
        return self.nav.pop()

    def go_home(self) -> None:
        self.nav.home()

    # Window

    def window_select(self, index: int | None) -> None:
        windows.select(self.window, index)

    def window_selected(self) -> int | None:
        return windows.selected(self.window)

    def focus_next(self) -> None:
        windows.focus_next(self.window)

    def focus_previous(self) -> None:
        windows.focus_previous(self.window)

    # Popup

    def open_popup(self, popup: PopupState) -> None:
        self.popup = popup

    def close_popup(self) -> None:
        self.popup = NoPopup()

    def popup_select(self, index: int | None) -> None:
        popups.select(self.popup, index)

    def popup_selected(self) -> int | None:
        return popups.selected(self.popup)

    def search_filtered_items(self, items: Sequence[T]) -> list[T]:
        return search_filtered_items(self.popup, items)
