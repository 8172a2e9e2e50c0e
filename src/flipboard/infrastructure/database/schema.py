"""SQLAlchemy Core table definitions for the flipboard database.

A single string-keyed table: each persisted preference or log lives under
a fixed key with a JSON or plain-text value.
"""

from __future__ import annotations

from sqlalchemy import Column, MetaData, Table, Text

metadata = MetaData()

kv_store = Table(
    "kv_store",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated_at", Text, nullable=False),
)
