"""Tests for MessageService: encode, decode, sanitize, preview, share, show."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.exc import SQLAlchemyError

from flipboard.config.settings import FlipSettings
from flipboard.domain.board import COMPOSER_MAX_LENGTH, NBSP
from flipboard.infrastructure.store import Store
from flipboard.services.history import HistoryService
from flipboard.services.message import MessageService
from flipboard.services.result import ServiceResult


@pytest.fixture
def svc(settings: FlipSettings) -> MessageService:
    return MessageService(settings)


class _BrokenHistory:
    def append(self, message: str) -> ServiceResult:
        raise SQLAlchemyError("database is locked")


class TestCodecOperations:
    def test_encode(self, svc: MessageService) -> None:
        result = svc.encode_message("Hello")
        assert result.ok
        assert result.op == "encode"
        assert result.data == {"token": "SGVsbG8=", "length": 5}

    def test_decode_is_verbatim(self, svc: MessageService) -> None:
        token = svc.encode_message("<b>raw</b>\n").data["token"]
        result = svc.decode_token(token)
        assert result.data == {"message": "<b>raw</b>\n", "has_message": True}

    def test_decode_invalid(self, svc: MessageService) -> None:
        result = svc.decode_token("!!!invalid!!!")
        assert result.ok
        assert result.data == {"message": "", "has_message": False}

    def test_sanitize(self, svc: MessageService) -> None:
        result = svc.sanitize_text("Hi <b>you</b>!")
        assert result.data == {"message": "Hi you!", "length": 7, "changed": True}

    def test_sanitize_unchanged(self, svc: MessageService) -> None:
        assert svc.sanitize_text("plain").data["changed"] is False

    def test_sanitize_uses_configured_extras(self, data_dir: Path) -> None:
        (data_dir / "flipboard.toml").write_text('[sanitizer]\nextra_punctuation = ":"\n')
        svc = MessageService(FlipSettings.from_cli(data_dir=data_dir))
        assert svc.sanitize_text("a:b@c").data["message"] == "a:bc"


class TestPreview:
    def test_cells_and_counter(self, svc: MessageService) -> None:
        result = svc.preview("Hi you")
        assert result.data["message"] == "Hi you"
        assert result.data["has_message"] is True
        assert result.data["length"] == 6
        assert result.data["max_length"] == COMPOSER_MAX_LENGTH
        cells = result.data["cells"]
        assert [c["char"] for c in cells] == list("Hi you")
        assert cells[2]["display"] == NBSP
        assert cells[3]["delay_ms"] == 150

    def test_blank_preview(self, svc: MessageService) -> None:
        result = svc.preview("<i></i>")
        assert result.data["has_message"] is False
        assert result.data["cells"] == []

    def test_over_limit_warns(self, svc: MessageService) -> None:
        result = svc.preview("a" * 150)
        assert result.ok
        assert result.data["length"] == 150
        assert len(result.data["message"]) == 140
        assert any("limit" in w for w in result.warnings)


class TestComposeShare:
    def test_url(self, svc: MessageService) -> None:
        result = svc.compose_share("Hello")
        assert result.ok
        assert result.data == {
            "url": "http://localhost:5173/?m=SGVsbG8%3D",
            "token": "SGVsbG8=",
            "recorded": False,
        }

    def test_configured_origin(self, data_dir: Path) -> None:
        (data_dir / "flipboard.toml").write_text('[share]\norigin = "https://flip.example/"\n')
        svc = MessageService(FlipSettings.from_cli(data_dir=data_dir))
        assert svc.compose_share("Hi").data["url"] == "https://flip.example/?m=SGk%3D"

    @pytest.mark.parametrize("message", ["", "   ", "\n\t"])
    def test_blank_refused(self, svc: MessageService, message: str) -> None:
        result = svc.compose_share(message)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EMPTY_MESSAGE"

    def test_too_long_refused(self, svc: MessageService) -> None:
        result = svc.compose_share("a" * (COMPOSER_MAX_LENGTH + 1))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MESSAGE_TOO_LONG"
        assert result.error.detail["length"] == COMPOSER_MAX_LENGTH + 1

    def test_exactly_at_limit_allowed(self, svc: MessageService) -> None:
        assert svc.compose_share("a" * COMPOSER_MAX_LENGTH).ok

    def test_records_history(self, settings: FlipSettings, store: Store) -> None:
        history = HistoryService(store)
        svc = MessageService(settings, history=history)
        result = svc.compose_share("Hello")
        assert result.data["recorded"] is True
        items = history.list_entries().data["items"]
        assert [i["message"] for i in items] == ["Hello"]

    def test_history_failure_is_a_warning(self, settings: FlipSettings) -> None:
        svc = MessageService(settings, history=_BrokenHistory())  # type: ignore[arg-type]
        result = svc.compose_share("Hello")
        assert result.ok
        assert result.data["recorded"] is False
        assert result.warnings == ["History was not updated"]

    def test_unavailable_history_is_a_warning(self, settings: FlipSettings) -> None:
        svc = MessageService(settings, history_unavailable=True)
        result = svc.compose_share("Hello")
        assert result.ok
        assert result.data["url"] == "http://localhost:5173/?m=SGVsbG8%3D"
        assert result.data["recorded"] is False
        assert result.warnings == ["History was not updated"]


class TestOpenShare:
    def test_board_view(self, svc: MessageService) -> None:
        result = svc.open_share("http://localhost:5173/?m=SGVsbG8%3D")
        assert result.ok
        assert result.data["message"] == "Hello"
        assert result.data["view"] == "board"
        assert len(result.data["cells"]) == 5

    def test_broken_token_falls_back_to_composer(self, svc: MessageService) -> None:
        result = svc.open_share("http://localhost:5173/?m=!!!invalid!!!")
        assert result.ok
        assert result.data == {"message": "", "has_message": False, "view": "composer", "cells": []}

    def test_missing_param_falls_back_to_composer(self, svc: MessageService) -> None:
        assert svc.open_share("http://localhost:5173/").data["view"] == "composer"

    def test_message_that_sanitizes_to_blank(self, svc: MessageService) -> None:
        token = svc.encode_message("<script>x()</script>   ").data["token"]
        assert svc.open_share(token).data["view"] == "composer"


class TestEndToEnd:
    def test_scenario_plain_message(self, svc: MessageService) -> None:
        token = svc.encode_message("Hello").data["token"]
        raw = svc.decode_token(token).data["message"]
        assert raw == "Hello"
        assert svc.sanitize_text(raw).data["message"] == "Hello"

    def test_scenario_hostile_message(self, svc: MessageService) -> None:
        original = 'Hello<script>alert("xss")</script>'
        token = svc.encode_message(original).data["token"]
        raw = svc.decode_token(token).data["message"]
        assert raw == original
        safe = svc.sanitize_text(raw).data["message"]
        assert "Hello" in safe
        assert "script" not in safe
        assert "alert" not in safe

    def test_scenario_malformed_token(self, svc: MessageService) -> None:
        assert svc.decode_token("!!!invalid!!!").data["has_message"] is False
        assert svc.open_share("!!!invalid!!!").data["view"] == "composer"
