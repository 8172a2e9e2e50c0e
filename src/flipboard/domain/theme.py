"""Theme modes for the board renderer.

The stored preference is a :class:`ThemeMode`; what actually gets drawn is
the resolved :class:`Theme`.  ``auto`` follows the terminal background.
"""

from __future__ import annotations

from enum import StrEnum


class ThemeMode(StrEnum):
    """User-selected theme preference."""

    AUTO = "auto"
    LIGHT = "light"
    DARK = "dark"


class Theme(StrEnum):
    """Concrete theme used for rendering."""

    LIGHT = "light"
    DARK = "dark"


_CYCLE: tuple[ThemeMode, ...] = (ThemeMode.AUTO, ThemeMode.LIGHT, ThemeMode.DARK)

# xterm colour indices that denote a light background in COLORFGBG.
_LIGHT_BACKGROUNDS = frozenset({"7", "15"})


def parse_mode(value: str | None) -> ThemeMode:
    """Parse a stored preference; anything unrecognised reads as ``auto``."""
    try:
        return ThemeMode(value)
    except ValueError:
        return ThemeMode.AUTO


def next_mode(mode: ThemeMode) -> ThemeMode:
    """auto -> light -> dark -> auto."""
    return _CYCLE[(_CYCLE.index(mode) + 1) % len(_CYCLE)]


def resolve_theme(mode: ThemeMode, colorfgbg: str | None = None) -> Theme:
    """Resolve *mode* to a concrete theme.

    For ``auto``, *colorfgbg* is the terminal's ``COLORFGBG`` value
    (``"fg;bg"`` or ``"fg;default;bg"``).  A missing or unparseable value
    resolves to dark.
    """
    if mode is ThemeMode.LIGHT:
        return Theme.LIGHT
    if mode is ThemeMode.DARK:
        return Theme.DARK
    if colorfgbg:
        background = colorfgbg.rsplit(";", 1)[-1].strip()
        if background in _LIGHT_BACKGROUNDS:
            return Theme.LIGHT
    return Theme.DARK
