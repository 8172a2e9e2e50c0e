"""Tests for the display sanitizer."""

from __future__ import annotations

import pytest

from flipboard.domain.sanitizer import (
    ALLOWED_PUNCTUATION,
    MAX_MESSAGE_LENGTH,
    invalid_extras,
    is_blank,
    sanitize,
)

IDEMPOTENCE_SAMPLES = [
    "",
    "Hello, World!",
    "&x@;",
    "&amp;lt;script&amp;gt;",
    "&lt;b&gt;bold&lt;/b&gt;",
    "<scr<script>x</script>ipt>alert(1)</script>",
    "a\r\nb\tc",
    "emoji 🎉 and symbols @#$%^&*",
    "&&amp;amp;;",
    "<<>>",
    "a" * 200,
    " " * 150 + "tail",
    "[brackets] (parens) - dash? yes!",
]


class TestNonStringInput:
    @pytest.mark.parametrize("value", [None, 0, 1.5, [], {}, ["hi"], object(), b"hi"])
    def test_returns_empty(self, value: object) -> None:
        assert sanitize(value) == ""


class TestScriptStripping:
    def test_script_element_and_contents_removed(self) -> None:
        out = sanitize('Hello <script>alert("xss")</script> world')
        assert "script" not in out
        assert "alert" not in out
        assert out == "Hello  world"

    def test_case_insensitive(self) -> None:
        out = sanitize("a<SCRIPT type='x'>steal()</ScRiPt>b")
        assert out == "ab"

    def test_non_greedy_up_to_first_close(self) -> None:
        out = sanitize("<script>one</script>keep<script>two</script>")
        assert out == "keep"

    def test_unclosed_script_falls_back_to_tag_stripping(self) -> None:
        out = sanitize("<script>alert(1)")
        assert out == "alert(1)"


class TestTagStripping:
    def test_tags_removed_text_kept(self) -> None:
        assert sanitize("<b>bold</b> and <i>italic</i>") == "bold and italic"

    def test_attributes_removed_with_tag(self) -> None:
        assert sanitize('<a href="https://evil.example">click</a>') == "click"

    def test_stray_angle_brackets_removed(self) -> None:
        assert sanitize("1 < 2") == "1  2"


class TestEntities:
    def test_decode_then_filter(self) -> None:
        out = sanitize("Hello &lt;div&gt; &amp; &quot;world&quot;")
        assert out == "Hello div  world"
        assert "<" not in out
        assert ">" not in out
        assert "&" not in out

    def test_double_encoded_script_does_not_reappear(self) -> None:
        out = sanitize("&lt;script&gt;alert(1)&lt;/script&gt;")
        assert "<" not in out
        assert out == "scriptalert(1)script"

    def test_amp_is_decoded_last(self) -> None:
        # "&amp;lt;" becomes the entity "&lt;", which is then dropped, never "<".
        assert sanitize("&amp;lt;") == ""

    def test_unknown_entities_removed(self) -> None:
        assert sanitize("a&nbsp;b&copy;c") == "abc"

    def test_numeric_reference_is_only_filtered(self) -> None:
        assert sanitize("&#39;") == "39"

    def test_apostrophe_entity_decoded_then_filtered(self) -> None:
        assert sanitize("it&apos;s") == "its"


class TestWhitespace:
    def test_newline_becomes_space(self) -> None:
        assert sanitize("a\nb") == "a b"

    def test_tab_becomes_space(self) -> None:
        assert sanitize("a\tb") == "a b"

    def test_crlf_becomes_two_spaces(self) -> None:
        assert sanitize("a\r\nb") == "a  b"

    def test_spaces_kept(self) -> None:
        assert sanitize("  a  ") == "  a  "


class TestAllowList:
    @pytest.mark.parametrize("ch", list("@$%^={}|\\<>~"))
    def test_disallowed_characters_removed(self, ch: str) -> None:
        assert sanitize(f"a{ch}b") == "ab"

    def test_allowed_punctuation_preserved(self) -> None:
        assert sanitize(ALLOWED_PUNCTUATION) == ALLOWED_PUNCTUATION

    def test_letters_digits_spaces_preserved(self) -> None:
        text = "The quick brown fox 0123456789 JUMPS"
        assert sanitize(text) == text

    @pytest.mark.parametrize("ch", ["é", "🎉", "\x00", "\x7f", "​", "'", '"', ":", "/"])
    def test_other_characters_removed(self, ch: str) -> None:
        assert sanitize(f"x{ch}y") == "xy"

    def test_extra_punctuation_widens_the_list(self) -> None:
        assert sanitize("a:b/c", extra_punctuation=":/") == "a:b/c"

    def test_forbidden_extras_are_ignored(self) -> None:
        assert sanitize("x < y & z;", extra_punctuation="<&;") == "x  y  z;"


class TestTruncation:
    def test_truncates_to_limit(self) -> None:
        out = sanitize("a" * 150)
        assert len(out) == MAX_MESSAGE_LENGTH
        assert out == "a" * 140

    def test_truncation_happens_after_filtering(self) -> None:
        out = sanitize("@" * 100 + "b" * 140)
        assert out == "b" * 140

    def test_short_input_untouched(self) -> None:
        assert sanitize("short") == "short"


class TestIdempotence:
    @pytest.mark.parametrize("sample", IDEMPOTENCE_SAMPLES)
    def test_sanitize_twice_equals_once(self, sample: str) -> None:
        once = sanitize(sample)
        assert sanitize(once) == once

    def test_idempotent_with_extras(self) -> None:
        once = sanitize("a;b:c&x@;", extra_punctuation=";:@")
        assert sanitize(once, extra_punctuation=";:@") == once


class TestInvalidExtras:
    def test_safe_extras(self) -> None:
        assert invalid_extras(":;/'\"") == []

    def test_reports_each_bad_character_once(self) -> None:
        assert invalid_extras("<<a1 &é") == ["<", "a", "1", " ", "&", "é"]


class TestIsBlank:
    @pytest.mark.parametrize("text", ["", " ", "   "])
    def test_blank(self, text: str) -> None:
        assert is_blank(text)

    def test_not_blank(self) -> None:
        assert not is_blank(" a ")
