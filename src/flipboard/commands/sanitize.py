"""Command: sanitize text for display."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand, text_argument

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    "sanitize",
    cls=FlipCommand,
    examples="""\
  flipboard sanitize 'Hello <b>there</b> &amp; welcome'
  cat message.txt | flipboard -q sanitize -""",
)
@click.argument("text")
@click.pass_obj
def sanitize_cmd(app: AppContext, text: str) -> None:
    """Reduce TEXT to at most 140 allow-listed characters ('-' reads stdin)."""
    app.emit(app.messages().sanitize_text(text_argument(text)))
