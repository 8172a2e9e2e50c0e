"""Recent-messages log: a bounded, newest-first list of shared messages.

The log is serialized as a JSON array of ``{id, message, timestamp}``
objects (``timestamp`` in epoch milliseconds) under a single storage key.
Updates are append-then-trim; persisting is the caller's job.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, TypeAdapter, ValidationError

DEFAULT_CAPACITY = 10


class HistoryEntry(BaseModel):
    """One previously shared message."""

    model_config = {"frozen": True}

    id: str
    message: str
    timestamp: int


_LOG_ADAPTER = TypeAdapter(list[HistoryEntry])


def push_entry(
    entries: list[HistoryEntry],
    entry: HistoryEntry,
    *,
    capacity: int = DEFAULT_CAPACITY,
) -> list[HistoryEntry]:
    """Return a new log with *entry* first, trimmed to *capacity*.

    Raises:
        ValueError: If *capacity* is less than 1.
    """
    if capacity < 1:
        msg = f"History capacity must be at least 1, got {capacity}"
        raise ValueError(msg)
    return [entry, *entries][:capacity]


def parse_log(raw: str | None) -> list[HistoryEntry] | None:
    """Parse a stored log.

    Returns ``[]`` for a missing value and None when the stored value is
    not a valid log (the caller decides how to report that).
    """
    if raw is None:
        return []
    try:
        return _LOG_ADAPTER.validate_json(raw)
    except ValidationError:
        return None


def dump_log(entries: list[HistoryEntry]) -> str:
    """Serialize *entries* for storage."""
    return json.dumps([entry.model_dump() for entry in entries], separators=(",", ":"))
