"""BaseService — foundation for all flipboard services.

Every service receives a :class:`Store` at construction time. The Store
provides transactional access to the key-value table and the resolved
settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flipboard.config.settings import FlipSettings
    from flipboard.infrastructure.store import Store


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class HistoryService(BaseService):
            def clear(self) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @property
    def settings(self) -> FlipSettings:
        """Settings the store was opened with."""
        return self._store.settings
