"""Staggered board reveal for interactive terminals.

Replays the per-cell ``delay_ms`` offsets computed by the board layout:
each character is written once its offset has elapsed.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def play_board(
    cells: list[dict[str, Any]],
    *,
    write: Callable[[str], None],
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Write each cell's character after its delay, then a newline."""
    elapsed_ms = 0
    for cell in cells:
        delay_ms = int(cell.get("delay_ms", 0))
        if delay_ms > elapsed_ms:
            sleep((delay_ms - elapsed_ms) / 1000)
            elapsed_ms = delay_ms
        write(str(cell.get("char", "")))
    write("\n")
