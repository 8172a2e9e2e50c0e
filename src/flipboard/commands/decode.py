"""Command: decode a share token back to its original text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand, text_argument

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    "decode",
    cls=FlipCommand,
    examples="""\
  flipboard decode SGVsbG8=
  flipboard --json decode SGVsbG8sIFdvcmxkIQ==""",
)
@click.argument("token")
@click.pass_obj
def decode_cmd(app: AppContext, token: str) -> None:
    """Decode TOKEN verbatim, without sanitizing ('-' reads stdin).

    Malformed tokens decode to an empty message rather than an error.
    Use `flipboard show` to get display-safe text.
    """
    app.emit(app.messages().decode_token(text_argument(token).strip()))
