"""SQLite database engine and key-value schema via SQLAlchemy Core."""

from flipboard.infrastructure.database.engine import create_db_engine, init_database
from flipboard.infrastructure.database.schema import kv_store, metadata

__all__ = [
    "create_db_engine",
    "init_database",
    "kv_store",
    "metadata",
]
