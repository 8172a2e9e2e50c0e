"""Flip board layout: one cell per character, staggered reveal."""

from __future__ import annotations

from dataclasses import dataclass

from flipboard.domain.sanitizer import MAX_MESSAGE_LENGTH, is_blank, sanitize

# The composer refuses raw input longer than this.
COMPOSER_MAX_LENGTH = MAX_MESSAGE_LENGTH

DEFAULT_FLIP_DELAY_MS = 50

PLACEHOLDER = "Share a message"

NBSP = "\u00a0"


@dataclass(frozen=True)
class FlipCell:
    """A single character tile on the board."""

    char: str
    display: str
    delay_ms: int


def layout_board(
    message: str,
    *,
    delay_ms: int = DEFAULT_FLIP_DELAY_MS,
    extra_punctuation: str = "",
) -> list[FlipCell]:
    """Sanitize *message* and lay it out as flip cells.

    Cell ``i`` starts flipping ``i * delay_ms`` milliseconds after the
    first.  Spaces display as non-breaking spaces so the tile keeps its
    width.  A blank message produces no cells.
    """
    safe = sanitize(message, extra_punctuation=extra_punctuation)
    if is_blank(safe):
        return []
    return [
        FlipCell(char=ch, display=NBSP if ch == " " else ch, delay_ms=i * delay_ms)
        for i, ch in enumerate(safe)
    ]


def board_text(cells: list[FlipCell]) -> str:
    """Join the underlying characters of *cells* back into a string."""
    return "".join(cell.char for cell in cells)
