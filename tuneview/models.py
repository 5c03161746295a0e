"""Record types shared with the player's collaborators.

The backend client, the theme loader and the key-binding parser own the real
versions of these; the UI state only stores them and relies on `str()` for
display and search.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Artist:
    """An artist as returned by the backend service."""

    id: str
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Track:
    """A playable track row shown in playlist, album and artist windows."""

    id: str
    name: str
    artists: list[Artist] = field(default_factory=list)
    album: str = ""

    @property
    def artists_display(self) -> str:
        return ", ".join(a.name for a in self.artists)

    def __str__(self) -> str:
        return f"{self.name} {self.artists_display} {self.album}".strip()


@dataclass
class Theme:
    """A named color palette (role -> rich style string)."""

    name: str
    palette: dict[str, str] = field(default_factory=dict)

    def style(self, role: str, default: str = "") -> str:
        return self.palette.get(role, default)

    def __str__(self) -> str:
        return self.name


@dataclass
class KeySequence:
    """Keys pressed so far for a multi-key binding (e.g. `g g`)."""

    keys: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.keys)


@dataclass
class Rect:
    """Terminal geometry cached by the renderer."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


DEFAULT_THEME_NAME = "default"

BUILTIN_THEMES: tuple[Theme, ...] = (
    Theme(
        name=DEFAULT_THEME_NAME,
        palette={
            "selection": "bold reverse",
            "title": "bold cyan",
            "border": "dim",
            "query": "bold yellow",
        },
    ),
    Theme(
        name="dracula",
        palette={
            "selection": "bold #282a36 on #bd93f9",
            "title": "bold #ff79c6",
            "border": "#6272a4",
            "query": "bold #f1fa8c",
        },
    ),
    Theme(
        name="gruvbox",
        palette={
            "selection": "bold #282828 on #fabd2f",
            "title": "bold #fe8019",
            "border": "#928374",
            "query": "bold #b8bb26",
        },
    ),
)


def default_theme() -> Theme:
    return find_theme(DEFAULT_THEME_NAME) or Theme(name=DEFAULT_THEME_NAME)


def find_theme(name: str) -> Theme | None:
    """Look up a built-in theme by (case-insensitive) name.

    Returns a fresh copy so callers can store and mutate it freely.
    """
    wanted = str(name or "").strip().lower()
    for theme in BUILTIN_THEMES:
        if theme.name == wanted:
            return Theme(name=theme.name, palette=dict(theme.palette))
    return None
