"""Tests for theme modes and resolution."""

import pytest

from flipboard.domain.theme import Theme, ThemeMode, next_mode, parse_mode, resolve_theme


class TestParseMode:
    @pytest.mark.parametrize("value", ["auto", "light", "dark"])
    def test_known(self, value: str) -> None:
        assert parse_mode(value) == ThemeMode(value)

    @pytest.mark.parametrize("value", [None, "", "blue", "DARK"])
    def test_unknown_reads_as_auto(self, value: str | None) -> None:
        assert parse_mode(value) is ThemeMode.AUTO


class TestNextMode:
    def test_cycle(self) -> None:
        assert next_mode(ThemeMode.AUTO) is ThemeMode.LIGHT
        assert next_mode(ThemeMode.LIGHT) is ThemeMode.DARK
        assert next_mode(ThemeMode.DARK) is ThemeMode.AUTO


class TestResolveTheme:
    def test_explicit_modes_ignore_terminal(self) -> None:
        assert resolve_theme(ThemeMode.LIGHT, "15;0") is Theme.LIGHT
        assert resolve_theme(ThemeMode.DARK, "0;15") is Theme.DARK

    @pytest.mark.parametrize("colorfgbg", ["0;15", "0;7", "0;default;15"])
    def test_auto_light_background(self, colorfgbg: str) -> None:
        assert resolve_theme(ThemeMode.AUTO, colorfgbg) is Theme.LIGHT

    @pytest.mark.parametrize("colorfgbg", [None, "", "15;0", "garbage", "7;default"])
    def test_auto_defaults_to_dark(self, colorfgbg: str | None) -> None:
        assert resolve_theme(ThemeMode.AUTO, colorfgbg) is Theme.DARK
