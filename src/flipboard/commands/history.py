"""Command group: recently shared messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flipboard.commands._base import FlipGroup

if TYPE_CHECKING:
    from flipboard.commands._context import AppContext

_HISTORY_EXAMPLES = """\
  flipboard history list
  flipboard --json history list
  flipboard history clear"""


@click.group(cls=FlipGroup, examples=_HISTORY_EXAMPLES)
@click.pass_obj
def history(app: AppContext) -> None:
    """Recently shared messages (newest first)."""


@history.command(
    "list",
    examples="""\
  flipboard history list
  flipboard -q history list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List recent messages, sanitized for display."""
    from flipboard.services.history import HistoryService

    app.emit(HistoryService(app.store).list_entries())


@history.command(
    examples="""\
  flipboard history clear""",
)
@click.pass_obj
def clear(app: AppContext) -> None:
    """Forget all recent messages."""
    from flipboard.services.history import HistoryService

    app.emit(HistoryService(app.store).clear())
