"""UI state for the terminal client.

Tracks the page history, main window, popup overlay, selection cursors and
the Artist focus ring, shared between the input handler and the renderer.
"""
from .dispatcher import Dispatcher
from .navigator import BrowsePage, DefaultPage, Navigator
from .state import UIState
from .store import SharedUIState

__all__ = ["BrowsePage", "DefaultPage", "Dispatcher", "Navigator", "SharedUIState", "UIState"]
