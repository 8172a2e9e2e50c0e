"""Database engine setup for SQLite with WAL mode.

The DB is stored at {data_dir}/.flipboard/flipboard.db.

SQLAlchemy Core (not ORM) is used because flipboard is a short-lived
CLI process with a single key-value table.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from flipboard.infrastructure.database.schema import metadata

DATA_DIRNAME = ".flipboard"
DB_FILENAME = "flipboard.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL journaling."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(data_dir: Path) -> Engine:
    """Initialize the database at ``{data_dir}/.flipboard/flipboard.db``.

    Idempotent — safe to call on an existing data directory.

    Returns the engine ready for use.
    """
    db_dir = data_dir / DATA_DIRNAME
    db_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(db_dir / DB_FILENAME)
    metadata.create_all(engine)
    return engine
