"""Command: get, set, or cycle the board theme."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipCommand

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext


@click.command(
    cls=FlipCommand,
    examples="""\
  flipboard theme
  flipboard theme dark
  flipboard theme --cycle""",
)
@click.argument("mode", required=False)
@click.option("--cycle", is_flag=True, help="Advance auto -> light -> dark -> auto.")
@click.pass_obj
def theme(app: AppContext, mode: str | None, cycle: bool) -> None:
    """Show the theme, or set it to MODE (auto, light, dark)."""
    from flipboard.services.theme import ThemeService

    if mode and cycle:
        raise click.UsageError("Pass either MODE or --cycle, not both.")

    svc = ThemeService(app.store)
    if cycle:
        app.emit(svc.cycle())
    elif mode:
        app.emit(svc.set_mode(mode))
    else:
        app.emit(svc.get())
