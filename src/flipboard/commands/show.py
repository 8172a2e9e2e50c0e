"""Command: display a received share link on the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand, text_argument

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    cls=FlipCommand,
    examples="""\
  flipboard show 'http://localhost:5173/?m=SGVsbG8%3D'
  flipboard show '?m=SGVsbG8='
  flipboard show SGVsbG8= --animate""",
)
@click.argument("link")
@click.option("--animate", is_flag=True, help="Reveal the board one tile at a time.")
@click.pass_obj
def show(app: AppContext, link: str, animate: bool) -> None:
    """Decode LINK (URL, query string or bare token) and show the message.

    A missing or broken token falls back to the composer prompt; it is
    not an error.
    """
    result = app.messages().open_share(text_argument(link))
    plain = app.settings.json_output or app.settings.quiet
    if animate and not plain and result.data.get("has_message"):
        from flipboard.output.animation import play_board

        play_board(result.data["cells"], write=lambda s: click.echo(s, nl=False))
        return
    app.emit(result, themed=True)
