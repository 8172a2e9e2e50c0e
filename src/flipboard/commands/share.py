"""Command: compose a shareable link for a message."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand, text_argument

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    cls=FlipCommand,
    examples="""\
  flipboard share "Lunch at noon?"
  flipboard -q share "Lunch at noon?" | pbcopy
  flipboard share --no-history "Not in my recents"
  FLIPBOARD_SHARE__ORIGIN=https://flip.example flipboard share "Hi" """,
)
@click.argument("message")
@click.option(
    "--history/--no-history",
    "record",
    default=True,
    help="Record the message in the recent-messages list (default: on).",
)
@click.pass_obj
def share(app: AppContext, message: str, record: bool) -> None:
    """Encode MESSAGE into a share URL ('-' reads stdin)."""
    app.emit(app.messages(record_history=record).compose_share(text_argument(message)))
