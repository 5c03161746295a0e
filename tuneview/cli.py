from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .logging import setup_logging
from .models import BUILTIN_THEMES
from .settings import load_settings
from .tui import Dispatcher, SharedUIState, UIState
from .tui.components import render_popup, render_state_summary

app = typer.Typer(
    add_completion=False,
    help="tuneview: presentation state for a terminal music player",
    rich_markup_mode="rich",
)
console = Console()

logger = logging.getLogger(__name__)


def _split_command(raw: str) -> tuple[str, str | None]:
    """Split "name:arg" into its parts; the argument is optional."""
    name, sep, arg = raw.partition(":")
    return name, (arg if sep else None)


@app.command("show", help="[bold cyan]S[/bold cyan]how the UI state after replaying commands")
@app.command("state", hidden=True)  # Alias
def show(
    commands: Optional[list[str]] = typer.Option(
        None, "--do", "-d", help="Command to apply first, as name or name:arg (repeatable)"
    ),
    log: bool = typer.Option(False, "--log", help="Write diagnostic logs"),
):
    """Build the startup state from settings, apply commands, and print it."""
    s = load_settings()
    if log:
        setup_logging(s, console=True)

    store = SharedUIState(UIState.from_settings(s))
    dispatcher = Dispatcher(store)

    for raw in commands or []:
        name, arg = _split_command(raw)
        if not dispatcher.dispatch(name, arg):
            console.print(f"[yellow]Unknown command:[/yellow] {name}")
            continue
        logger.debug("Applied command %s (arg=%r)", name, arg)

    snapshot = store.snapshot()
    render_state_summary(console, snapshot)
    render_popup(console, snapshot)


@app.command("themes", help="List built-in [bold cyan]t[/bold cyan]hemes")
def themes():
    """List built-in themes, marking the configured one."""
    s = load_settings()

    t = Table(title="[bold]Themes[/bold]", show_header=False)
    t.add_column("Active", justify="center", width=2)
    t.add_column("Name", style="bold")
    t.add_column("Selection", style="dim")
    for theme in BUILTIN_THEMES:
        active = "✓" if theme.name == s.TUNEVIEW_THEME.lower() else ""
        t.add_row(active, theme.name, theme.style("selection"))
    console.print(t)


def main():
    app()
