"""HistoryService — the recent-messages log.

The log lives under a single key in the store (``[history] storage_key``)
and holds at most ``[history] capacity`` entries, newest first.  Stored
messages are raw; they are sanitized on the way out, never on the way in.
"""

from __future__ import annotations

import logging

from flipboard.domain.history import HistoryEntry, dump_log, parse_log, push_entry
from flipboard.domain.sanitizer import sanitize
from flipboard.services._helpers import ms_to_iso, new_entry_id, now_ms
from flipboard.services.base import BaseService
from flipboard.services.result import ServiceResult

logger = logging.getLogger(__name__)

_CORRUPT_WARNING = "Stored history was unreadable and has been ignored"


class HistoryService(BaseService):
    """Append, list, and clear previously shared messages."""

    @property
    def _key(self) -> str:
        return self.settings.history.storage_key

    def append(self, message: str) -> ServiceResult:
        """Record *message* as the most recent share.

        Read, prepend, trim and write happen in one transaction.  A
        corrupt stored log is replaced rather than extended.
        """
        op = "history_append"
        capacity = self.settings.history.capacity
        warnings: list[str] = []
        entry = HistoryEntry(id=new_entry_id(), message=message, timestamp=now_ms())

        with self._store.transaction() as txn:
            existing = parse_log(txn.get(self._key))
            if existing is None:
                logger.warning("Discarding unreadable history under %s", self._key)
                warnings.append(_CORRUPT_WARNING)
                existing = []
            updated = push_entry(existing, entry, capacity=capacity)
            txn.set(self._key, dump_log(updated))

        logger.debug("History now holds %d entries", len(updated))
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": entry.id, "count": len(updated), "capacity": capacity},
            warnings=warnings,
        )

    def list_entries(self) -> ServiceResult:
        """Return the log, newest first, with display-safe messages."""
        warnings: list[str] = []
        entries = parse_log(self._store.get(self._key))
        if entries is None:
            logger.warning("History under %s is unreadable", self._key)
            warnings.append(_CORRUPT_WARNING)
            entries = []

        extra = self.settings.sanitizer.extra_punctuation
        items = [
            {
                "id": entry.id,
                "message": sanitize(entry.message, extra_punctuation=extra),
                "timestamp": entry.timestamp,
                "shared_at": ms_to_iso(entry.timestamp),
            }
            for entry in entries
        ]
        return ServiceResult(
            ok=True,
            op="history_list",
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )

    def clear(self) -> ServiceResult:
        """Remove the log.  Other stored keys are untouched."""
        removed = self._store.delete(self._key)
        return ServiceResult(ok=True, op="history_clear", data={"removed": removed})
