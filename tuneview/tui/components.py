"""Reusable rich renderables built from a UI state snapshot."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import popup as popups
from . import window as windows
from .cursor import Cursor
from .popup import CommandHelpPopup, ContextSearchPopup, NoPopup
from .state import UIState

if TYPE_CHECKING:
    from rich.console import Console


COMMAND_HELP = """[bold]Navigation[/bold]
  j/↓  k/↑      Move selection
  Tab/S-Tab     Cycle Artist focus
  b             Back
  h             Home
  q             Quit

[bold]Popups[/bold]
  /             Search current list
  ?             This help
  Esc           Close popup
"""


def build_list_table(
    title: str,
    items: Sequence[object],
    cursor: Cursor | None,
    selection_style: str = "bold reverse",
    height: int | None = None,
) -> Table:
    """Build a one-column table of `items`, highlighting the cursor row.

    Args:
        title: Table title
        items: Items to show, already filtered by the caller
        cursor: Cursor whose selection is highlighted (may be None)
        selection_style: Rich style for the selected row
        height: Rows to show; scrolls the cursor into view when given

    Returns:
        A rich Table ready to print
    """
    table = Table(title=f"[bold]{title}[/bold]", show_header=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Item")

    current = cursor.selected if cursor is not None else None
    rows = range(len(items))
    if height is not None:
        rows = (cursor or Cursor()).scroll_into_view(height, len(items))

    for i in rows:
        item = items[i]
        style = selection_style if i == current else None
        table.add_row(str(i + 1), escape(str(item)), style=style)

    return table


def render_breadcrumbs(console: Console, state: UIState) -> None:
    """Render page history breadcrumbs."""
    console.print(f"[dim]{escape(state.nav.breadcrumbs())}[/dim]")


def render_popup(
    console: Console,
    state: UIState,
    items: Sequence[object] | None = None,
    height: int | None = None,
) -> None:
    """Render the active popup, if any.

    Args:
        console: Rich Console for output
        state: State snapshot
        items: Window items; filtered and listed under a search popup
        height: Visible list rows, or None to show every row
    """
    popup = state.popup
    border = state.theme.style("border", "dim")

    if isinstance(popup, NoPopup):
        return

    if isinstance(popup, CommandHelpPopup):
        console.print(Panel.fit(COMMAND_HELP, title="Commands", border_style=border))
        return

    if isinstance(popup, ContextSearchPopup):
        query_style = state.theme.style("query", "bold")
        console.print(Panel.fit(f"[{query_style}]/{escape(popup.query)}[/]", title="Search", border_style=border))
        if items is not None:
            shown = state.search_filtered_items(items)
            console.print(
                build_list_table(
                    "Matches",
                    shown,
                    windows.cursor_handle(state.window),
                    state.theme.style("selection", "bold reverse"),
                    height=height,
                )
            )
        return

    owned = popups.list_items(popup)
    console.print(
        build_list_table(
            popups.popup_label(popup) or "",
            owned if owned is not None else [],
            popups.list_cursor(popup),
            state.theme.style("selection", "bold reverse"),
            height=height,
        )
    )


def render_state_summary(console: Console, state: UIState) -> None:
    """Render a compact summary panel of the current state."""
    selected = state.window_selected()
    popup_name = popups.popup_label(state.popup) or "none"
    content = (
        f"  [bold]Page[/bold] [cyan]{escape(state.nav.breadcrumbs())}[/cyan]\n"
        f"  [bold]Window[/bold] [cyan]{windows.window_label(state.window)}[/cyan]"
        f"  [bold]Selected[/bold] [cyan]{'-' if selected is None else selected}[/cyan]\n"
        f"  [bold]Popup[/bold] [cyan]{popup_name}[/cyan]"
        f"  [bold]Theme[/bold] [cyan]{state.theme.name}[/cyan]"
        f"  [bold]Running[/bold] [cyan]{'yes' if state.is_running else 'no'}[/cyan]"
    )
    console.print(Panel.fit(content, title="UI State", border_style=state.theme.style("border", "dim")))
