"""Command: live preview of a message on the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand, text_argument

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    cls=FlipCommand,
    examples="""\
  flipboard preview "Happy birthday!"
  flipboard --json preview "Line one
line two" """,
)
@click.argument("text")
@click.pass_obj
def preview(app: AppContext, text: str) -> None:
    """Show TEXT as a recipient would see it, with a length counter."""
    app.emit(app.messages().preview(text_argument(text)), themed=True)
