"""Store — key-value persistence shared by every service.

The Store is the single dependency injected into every service. It owns
the database engine and exposes string values under fixed keys (the
recent-messages log, the theme preference).  Multi-step updates run
inside :meth:`Store.transaction` so a read-modify-write either commits
as a whole or not at all.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from flipboard.infrastructure.database.engine import init_database
from flipboard.infrastructure.database.schema import kv_store

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from flipboard.config.settings import FlipSettings

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


@dataclass
class StoreTransaction:
    """Active transaction context over the ``kv_store`` table."""

    conn: Connection

    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None."""
        row = self.conn.execute(select(kv_store.c.value).where(kv_store.c.key == key)).first()
        return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value under *key*."""
        now = _now_iso()
        result = self.conn.execute(
            update(kv_store).where(kv_store.c.key == key).values(value=value, updated_at=now)
        )
        if result.rowcount == 0:
            self.conn.execute(insert(kv_store).values(key=key, value=value, updated_at=now))

    def delete(self, key: str) -> bool:
        """Remove *key*. Returns True if a row was deleted."""
        result = self.conn.execute(delete(kv_store).where(kv_store.c.key == key))
        return result.rowcount > 0

    def keys(self) -> list[str]:
        """All stored keys, sorted."""
        rows = self.conn.execute(select(kv_store.c.key).order_by(kv_store.c.key)).all()
        return [row.key for row in rows]


class Store:
    """Repository encapsulating the flipboard database.

    Constructed lazily by the CLI context from :class:`FlipSettings`.
    Services receive the Store via their :class:`BaseService` constructor.
    """

    def __init__(self, settings: FlipSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.root)
        logger.debug("Opened store under %s", self.root)

    @property
    def root(self) -> Path:
        """The data directory holding ``.flipboard/``."""
        return self._settings.data_dir

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine."""
        return self._engine

    @property
    def settings(self) -> FlipSettings:
        """The resolved settings for this store."""
        return self._settings

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Run a block of reads and writes atomically.

        Commits when the block exits normally, rolls back on exception.

        Usage::

            with store.transaction() as txn:
                entries = txn.get("flipboard_history")
                txn.set("flipboard_history", updated)
        """
        with self._engine.begin() as conn:
            yield StoreTransaction(conn=conn)

    def get(self, key: str) -> str | None:
        """Read a single key outside any caller-managed transaction."""
        with self.transaction() as txn:
            return txn.get(key)

    def set(self, key: str, value: str) -> None:
        """Write a single key in its own transaction."""
        with self.transaction() as txn:
            txn.set(key, value)

    def delete(self, key: str) -> bool:
        """Delete a single key in its own transaction."""
        with self.transaction() as txn:
            return txn.delete(key)

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
