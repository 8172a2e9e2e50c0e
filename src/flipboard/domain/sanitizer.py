"""Display sanitizer — arbitrary text to a bounded, allow-listed string.

The pipeline runs in a fixed order:

1. drop ``<script>`` elements with their contents
2. drop every other tag
3. decode ``&lt; &gt; &quot; &apos; &amp;``
4. drop any remaining entity-shaped sequence
5. turn ``\\n``, ``\\r`` and ``\\t`` into single spaces
6. keep only allow-listed characters
7. truncate to :data:`MAX_MESSAGE_LENGTH` code points

Step 3 may turn ``&lt;script&gt;`` into literal ``<script>``; no tag
stripping happens after it, and step 6 deletes the brackets.

INVARIANT: ``sanitize(sanitize(x)) == sanitize(x)``.  The allow-list never
contains ``<``, ``>`` or ``&``, so nothing step 1-4 acts on survives step 6.
"""

from __future__ import annotations

import re

from flipboard.domain.types import Invalid, classify_input

MAX_MESSAGE_LENGTH = 140

ALLOWED_PUNCTUATION = ",.!?-()[]"

# Never accepted as extra punctuation: markup delimiters and the entity
# introducer.  Letting "&" through would let "&x@;" sanitize to "&x;",
# which a second pass would strip.
FORBIDDEN_EXTRAS = frozenset("<>&")

_SCRIPT_RE = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>",
    re.IGNORECASE,
)
_TAG_RE = re.compile(r"<[^>]*>")
_UNKNOWN_ENTITY_RE = re.compile(r"&[a-zA-Z0-9]+;")
_CONTROL_WS_RE = re.compile(r"[\n\r\t]")

# "&amp;" is decoded last so "&amp;lt;" becomes "&lt;", not "<".
_NAMED_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&amp;", "&"),
)


def invalid_extras(extra_punctuation: str) -> list[str]:
    """Return the characters of *extra_punctuation* that may not be allowed.

    Forbidden are ``<``, ``>``, ``&``, whitespace, letters, digits and
    anything outside printable ASCII.
    """
    bad: list[str] = []
    for ch in extra_punctuation:
        if (
            ch in FORBIDDEN_EXTRAS
            or not ch.isascii()
            or not ch.isprintable()
            or ch.isspace()
            or ch.isalnum()
        ):
            if ch not in bad:
                bad.append(ch)
    return bad


def _disallowed_pattern(extra_punctuation: str) -> re.Pattern[str]:
    bad = set(invalid_extras(extra_punctuation))
    extras = "".join(ch for ch in dict.fromkeys(extra_punctuation) if ch not in bad)
    allowed = re.escape(ALLOWED_PUNCTUATION + extras)
    return re.compile(f"[^a-zA-Z0-9 {allowed}]")


_DEFAULT_DISALLOWED_RE = _disallowed_pattern("")


def sanitize(value: object, *, extra_punctuation: str = "") -> str:
    """Reduce *value* to a string safe to render as plain text.

    Non-string input yields ``""``.  Never raises.

    Args:
        value: Anything; only strings produce non-empty output.
        extra_punctuation: Characters to allow on top of
            :data:`ALLOWED_PUNCTUATION`.  Characters rejected by
            :func:`invalid_extras` are ignored.
    """
    classified = classify_input(value)
    if isinstance(classified, Invalid):
        return ""

    cleaned = _SCRIPT_RE.sub("", classified.value)
    cleaned = _TAG_RE.sub("", cleaned)
    for entity, literal in _NAMED_ENTITIES:
        cleaned = cleaned.replace(entity, literal)
    cleaned = _UNKNOWN_ENTITY_RE.sub("", cleaned)
    cleaned = _CONTROL_WS_RE.sub(" ", cleaned)

    disallowed = (
        _disallowed_pattern(extra_punctuation) if extra_punctuation else _DEFAULT_DISALLOWED_RE
    )
    cleaned = disallowed.sub("", cleaned)

    return cleaned[:MAX_MESSAGE_LENGTH]


def is_blank(text: str) -> bool:
    """True when *text* has nothing to show (empty or whitespace only)."""
    return not text.strip()
