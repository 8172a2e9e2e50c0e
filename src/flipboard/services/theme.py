"""ThemeService — persisted light/dark/auto preference."""

from __future__ import annotations

import os

from flipboard.domain.theme import ThemeMode, next_mode, parse_mode, resolve_theme
from flipboard.services.base import BaseService
from flipboard.services.result import ServiceResult


class ThemeService(BaseService):
    """Read, set, and cycle the board theme."""

    @property
    def _key(self) -> str:
        return self.settings.board.theme_key

    def current_mode(self) -> ThemeMode:
        """Stored mode; unknown or missing values read as ``auto``."""
        return parse_mode(self._store.get(self._key))

    def get(self) -> ServiceResult:
        return self._result("theme_get", self.current_mode())

    def set_mode(self, mode: str) -> ServiceResult:
        """Persist *mode* (``auto``, ``light`` or ``dark``)."""
        op = "theme_set"
        try:
            parsed = ThemeMode(mode.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in ThemeMode)
            return ServiceResult.failure(
                op,
                "INVALID_THEME",
                f"Unknown theme mode {mode!r}; expected one of: {choices}",
                mode=mode,
            )
        self._store.set(self._key, parsed.value)
        return self._result(op, parsed)

    def cycle(self) -> ServiceResult:
        """Advance auto -> light -> dark -> auto and persist."""
        with self._store.transaction() as txn:
            mode = next_mode(parse_mode(txn.get(self._key)))
            txn.set(self._key, mode.value)
        return self._result("theme_cycle", mode)

    def _result(self, op: str, mode: ThemeMode) -> ServiceResult:
        theme = resolve_theme(mode, os.environ.get("COLORFGBG"))
        return ServiceResult(ok=True, op=op, data={"mode": mode.value, "theme": theme.value})
