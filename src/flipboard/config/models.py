"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, flipboard.toml only contains
overrides.  A fresh setup needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from flipboard.domain.board import DEFAULT_FLIP_DELAY_MS
from flipboard.domain.links import DEFAULT_PARAM
from flipboard.domain.sanitizer import invalid_extras

# --- flipboard.toml sections ---


class ShareConfig(BaseModel):
    """[share] section."""

    model_config = {"frozen": True}

    origin: str = "http://localhost:5173"
    param: str = DEFAULT_PARAM

    @field_validator("origin")
    @classmethod
    def _origin_has_scheme(cls, value: str) -> str:
        if "://" not in value:
            msg = f"origin must include a scheme (e.g. https://), got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("param")
    @classmethod
    def _param_not_empty(cls, value: str) -> str:
        if not value or not value.isidentifier():
            msg = f"param must be a simple identifier, got {value!r}"
            raise ValueError(msg)
        return value


class HistoryConfig(BaseModel):
    """[history] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    capacity: int = Field(default=10, ge=1)
    storage_key: str = "flipboard_history"


class BoardConfig(BaseModel):
    """[board] section."""

    model_config = {"frozen": True}

    flip_delay_ms: int = Field(default=DEFAULT_FLIP_DELAY_MS, ge=0)
    theme_key: str = "flipboard_theme"


class SanitizerConfig(BaseModel):
    """[sanitizer] section."""

    model_config = {"frozen": True}

    extra_punctuation: str = ""

    @field_validator("extra_punctuation")
    @classmethod
    def _safe_extras(cls, value: str) -> str:
        bad = invalid_extras(value)
        if bad:
            msg = f"extra_punctuation may not contain {''.join(bad)!r}"
            raise ValueError(msg)
        return value

