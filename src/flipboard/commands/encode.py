"""Command: encode a message into a share token."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand, text_argument

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    "encode",
    cls=FlipCommand,
    examples="""\
  flipboard encode "Hello, World!"
  echo "see you at 8" | flipboard -q encode -
  flipboard --json encode "Meet me (there)" """,
)
@click.argument("text")
@click.pass_obj
def encode_cmd(app: AppContext, text: str) -> None:
    """Encode TEXT as a URL-safe base64 token ('-' reads stdin)."""
    app.emit(app.messages().encode_message(text_argument(text)))
