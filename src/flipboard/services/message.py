"""MessageService — the producing and consuming sides of a share link.

Producing: raw text -> sanitize (preview only) and raw text -> encode ->
share URL (optionally recorded in history).

Consuming: share URL -> token -> decode -> sanitize -> board, falling back
to the composer when nothing displayable is left.

Decode is never asked to filter content and sanitize is never asked to
validate tokens; every path to the screen ends in ``sanitize``.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from flipboard.domain.board import COMPOSER_MAX_LENGTH, layout_board
from flipboard.domain.codec import decode, encode
from flipboard.domain.links import build_share_url, extract_token
from flipboard.domain.sanitizer import is_blank, sanitize
from flipboard.services.result import ServiceResult

if TYPE_CHECKING:
    from flipboard.config.settings import FlipSettings
    from flipboard.services.history import HistoryService

logger = logging.getLogger(__name__)

HISTORY_NOT_UPDATED = "History was not updated"


class MessageService:
    """Codec and sanitizer operations wired to settings.

    Pure apart from :meth:`compose_share`, which records the share through
    the optional *history* service.  *history_unavailable* marks a caller
    that wanted history but could not open storage; shares then carry a
    warning instead.
    """

    def __init__(
        self,
        settings: FlipSettings,
        *,
        history: HistoryService | None = None,
        history_unavailable: bool = False,
    ) -> None:
        self._settings = settings
        self._history = history
        self._history_unavailable = history_unavailable

    @property
    def _extra(self) -> str:
        return self._settings.sanitizer.extra_punctuation

    def _cells(self, message: str) -> list[dict[str, Any]]:
        cells = layout_board(
            message,
            delay_ms=self._settings.board.flip_delay_ms,
            extra_punctuation=self._extra,
        )
        return [asdict(cell) for cell in cells]

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def encode_message(self, text: str) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="encode",
            data={"token": encode(text), "length": len(text)},
        )

    def decode_token(self, token: str) -> ServiceResult:
        """Decode *token* verbatim.  The result is NOT display-safe."""
        message = decode(token)
        return ServiceResult(
            ok=True,
            op="decode",
            data={"message": message, "has_message": bool(message)},
        )

    def sanitize_text(self, text: str) -> ServiceResult:
        safe = sanitize(text, extra_punctuation=self._extra)
        return ServiceResult(
            ok=True,
            op="sanitize",
            data={"message": safe, "length": len(safe), "changed": safe != text},
        )

    # ------------------------------------------------------------------
    # Producing side
    # ------------------------------------------------------------------

    def preview(self, text: str) -> ServiceResult:
        """Live preview of what a recipient would see for *text*."""
        safe = sanitize(text, extra_punctuation=self._extra)
        warnings: list[str] = []
        if len(text) > COMPOSER_MAX_LENGTH:
            warnings.append(
                f"Message is {len(text)} characters; the limit is {COMPOSER_MAX_LENGTH}"
            )
        return ServiceResult(
            ok=True,
            op="preview",
            data={
                "message": safe,
                "has_message": not is_blank(safe),
                "length": len(text),
                "max_length": COMPOSER_MAX_LENGTH,
                "cells": self._cells(safe),
            },
            warnings=warnings,
        )

    def compose_share(self, message: str) -> ServiceResult:
        """Encode *message* into a share URL and record it in history.

        Blank messages and messages over the composer limit are refused.
        A history write failure is reported as a warning; the URL is
        still returned.
        """
        op = "share"
        if is_blank(message):
            return ServiceResult.failure(op, "EMPTY_MESSAGE", "Nothing to share: message is blank")
        if len(message) > COMPOSER_MAX_LENGTH:
            return ServiceResult.failure(
                op,
                "MESSAGE_TOO_LONG",
                f"Message is {len(message)} characters; the limit is {COMPOSER_MAX_LENGTH}",
                length=len(message),
                max_length=COMPOSER_MAX_LENGTH,
            )

        share = self._settings.share
        token = encode(message)
        url = build_share_url(share.origin, token, param=share.param)
        data: dict[str, Any] = {"url": url, "token": token, "recorded": False}
        warnings: list[str] = []

        if self._history_unavailable:
            warnings.append(HISTORY_NOT_UPDATED)
        if self._history is not None:
            try:
                recorded = self._history.append(message)
            except SQLAlchemyError:
                logger.warning("Could not record share in history", exc_info=True)
                warnings.append(HISTORY_NOT_UPDATED)
            else:
                data["recorded"] = True
                warnings.extend(recorded.warnings)

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # Consuming side
    # ------------------------------------------------------------------

    def open_share(self, link: str) -> ServiceResult:
        """Resolve a share link to a display-safe message.

        Never fails: a missing, malformed, or content-free token yields
        ``has_message=False`` and ``view="composer"``.
        """
        token = extract_token(link, param=self._settings.share.param)
        raw = decode(token)
        safe = sanitize(raw, extra_punctuation=self._extra)
        has_message = not is_blank(safe)
        if token and not raw:
            logger.debug("Share link carried an undecodable token")
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "message": safe if has_message else "",
                "has_message": has_message,
                "view": "board" if has_message else "composer",
                "cells": self._cells(safe) if has_message else [],
            },
        )
