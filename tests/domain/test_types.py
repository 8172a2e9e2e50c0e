"""Tests for the boundary input type."""

import pytest

from flipboard.domain.types import Invalid, Text, classify_input


class TestClassifyInput:
    def test_string_is_text(self) -> None:
        assert classify_input("hello") == Text("hello")

    def test_empty_string_is_text(self) -> None:
        assert classify_input("") == Text("")

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (None, "NoneType"),
            (7, "int"),
            (1.0, "float"),
            ([], "list"),
            ({}, "dict"),
            (b"x", "bytes"),
        ],
    )
    def test_everything_else_is_invalid(self, value: object, kind: str) -> None:
        assert classify_input(value) == Invalid(kind)

    def test_str_subclass_is_text(self) -> None:
        class Name(str):
            pass

        result = classify_input(Name("x"))
        assert isinstance(result, Text)
        assert result.value == "x"

    def test_frozen(self) -> None:
        text = Text("a")
        with pytest.raises(AttributeError):
            text.value = "b"  # type: ignore[misc]
