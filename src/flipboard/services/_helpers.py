"""Shared service-layer helper functions."""

from __future__ import annotations

import time
import uuid
from datetime import UTC, datetime


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def ms_to_iso(timestamp_ms: int) -> str:
    """Render an epoch-milliseconds timestamp as UTC ISO 8601."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC).isoformat(timespec="seconds")


def new_entry_id() -> str:
    """Random identifier for a history entry."""
    return uuid.uuid4().hex[:12]
