"""Page history for the player's logical navigation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class DefaultPage:
    """The landing page (current playback context)."""


@dataclass(frozen=True)
class BrowsePage:
    """Browsing a playlist, album or artist identified by `context_id`."""

    context_id: str


PageState = Union[DefaultPage, BrowsePage]


def page_label(page: PageState) -> str:
    match page:
        case DefaultPage():
            return "Home"
        case BrowsePage(context_id=context_id):
            return f"Browse: {context_id}"


class Navigator:
    """Stack-based navigation with breadcrumbs.

    - Push on enter: browsing a context pushes a page
    - Pop on Back: returns to the previous page
    - Reset on Home: clears the stack to the default page

    The bottom of the stack is always the default page, so the stack is never
    empty and Back at the root does nothing.
    """

    def __init__(self):
        """Initialize with the default page as the only entry."""
        self.stack: list[PageState] = [DefaultPage()]

    def push(self, page: PageState) -> None:
        """Navigate to a new page by pushing onto the stack.

        Args:
            page: Page to navigate to
        """
        self.stack.append(page)

    def pop(self) -> PageState | None:
        """Go back to the previous page.

        Returns:
            The page that was popped, or None if at root
        """
        if len(self.stack) > 1:
            return self.stack.pop()
        return None

    def home(self) -> None:
        """Reset navigation to the default page."""
        self.stack = [DefaultPage()]

    def current(self) -> PageState:
        """Get the current page.

        Returns:
            Top of the history stack
        """
        return self.stack[-1]

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string.

        Returns:
            Breadcrumb path like "Home > Browse: spotify:album:1"
        """
        return " > ".join(page_label(page) for page in self.stack)

    def depth(self) -> int:
        """Get the current navigation depth.

        Returns:
            Number of pages in the stack
        """
        return len(self.stack)
