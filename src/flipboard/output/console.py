"""Rich Console factory and themes for flipboard output.

Consoles write into a StringIO so renderers can return plain strings.
The board palette is swapped per theme; the status styles are shared.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

_BASE_STYLES: dict[str, str] = {
    "flip.ok": "bold green",
    "flip.error": "bold red",
    "flip.warning": "bold yellow",
    "flip.op": "bold cyan",
    "flip.key": "dim",
    "flip.id": "bold blue",
    "flip.url": "underline cyan",
    "flip.token": "magenta",
    "flip.counter": "dim",
}

_BOARD_STYLES: dict[str, dict[str, str]] = {
    "dark": {
        "flip.tile": "bold white on grey11",
        "flip.frame": "grey50",
        "flip.placeholder": "grey62",
    },
    "light": {
        "flip.tile": "bold black on grey93",
        "flip.frame": "grey35",
        "flip.placeholder": "grey42",
    },
}

BOARD_THEMES = tuple(_BOARD_STYLES)


def build_theme(board_theme: str = "dark") -> Theme:
    """Merge the base styles with the board styles for *board_theme*."""
    styles = {**_BASE_STYLES, **_BOARD_STYLES.get(board_theme, _BOARD_STYLES["dark"])}
    return Theme(styles)


def create_console(
    *,
    board_theme: str = "dark",
    no_color: bool = False,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        board_theme: ``"dark"`` or ``"light"`` tile palette.
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=build_theme(board_theme),
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
