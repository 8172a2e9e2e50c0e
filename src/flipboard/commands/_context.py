"""AppContext: the object every command receives through ``@click.pass_obj``.

Built by the root group from resolved settings.  Opens the store on
demand, wires services, and turns a ServiceResult into output and an
exit code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from sqlalchemy.exc import SQLAlchemyError

from flipboard.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from flipboard.config.settings import FlipSettings
    from flipboard.infrastructure.store import Store
    from flipboard.services.message import MessageService
    from flipboard.services.result import ServiceResult

logger = logging.getLogger(__name__)

DEFAULT_BOARD_THEME = "dark"


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is opened on first use so the pure codec commands, ``--help``
    and ``--version`` never touch the database.
    """

    def __init__(self, settings: FlipSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        from flipboard.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        """The key-value store (created lazily on first access)."""
        if self._store is None:
            from flipboard.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    def optional_store(self) -> Store | None:
        """The store, or None when the data directory cannot be opened.

        For commands where persistence is a side concern: sharing still
        produces a link and showing still draws the board.
        """
        try:
            return self.store
        except (OSError, SQLAlchemyError) as exc:
            logger.warning("Store unavailable under %s: %s", self.settings.data_dir, exc)
            return None

    def messages(self, *, record_history: bool = False) -> MessageService:
        """A MessageService, wired to history only when shares are recorded."""
        from flipboard.services.message import MessageService

        if not (record_history and self.settings.history.enabled):
            return MessageService(self.settings)

        store = self.optional_store()
        if store is None:
            return MessageService(self.settings, history_unavailable=True)

        from flipboard.services.history import HistoryService

        return MessageService(self.settings, history=HistoryService(store))

    def board_theme(self) -> str:
        """Resolved theme name for board rendering (``light`` or ``dark``)."""
        from flipboard.services.theme import ThemeService

        store = self.optional_store()
        if store is None:
            return DEFAULT_BOARD_THEME
        return str(ThemeService(store).get().data["theme"])

    def emit(self, result: ServiceResult, *, themed: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        Successes go to stdout with any warnings on stderr, so piped
        tokens and URLs stay clean.  Failures go to stderr and exit 1.
        With *themed*, the stored board theme is looked up, but only when
        the result is drawn with Rich.
        """
        plain = self.settings.json_output or self.settings.quiet
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            board_theme=self.board_theme() if themed and not plain else DEFAULT_BOARD_THEME,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Release the store if it was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None
