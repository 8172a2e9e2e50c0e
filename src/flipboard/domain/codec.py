"""Transport codec — Unicode text to and from a base64 share token.

The codec is format-safe, not content-safe: ``decode`` reproduces exactly
what was encoded, hostile markup included.  Run the result through
:func:`flipboard.domain.sanitizer.sanitize` before displaying it.

INVARIANT: ``decode(encode(m)) == m`` for every string ``m`` that has a
UTF-8 form.  ``decode`` never raises.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from flipboard.domain.types import Invalid, classify_input

logger = logging.getLogger(__name__)

# Use with fullmatch: a trailing "$" would also accept a final newline.
TOKEN_PATTERN = re.compile(r"[A-Za-z0-9+/]*={0,2}")

# Returned by ``decode`` whenever the input is not a usable token.
NO_MESSAGE = ""


def encode(text: str) -> str:
    """Encode *text* as UTF-8 bytes in standard padded base64.

    The empty string encodes to the empty string.  Lone surrogates (which
    have no UTF-8 form) are replaced with ``?`` so this never fails.
    """
    if not text:
        return ""
    raw = text.encode("utf-8", errors="replace")
    return base64.b64encode(raw).decode("ascii")


def is_token(value: object) -> bool:
    """Return True if *value* is a non-empty string in the token alphabet."""
    return isinstance(value, str) and bool(value) and TOKEN_PATTERN.fullmatch(value) is not None


def decode(token: object) -> str:
    """Decode a share token back to text, or return ``""``.

    Anything that is not a string, not in the base64 alphabet, badly
    padded, or not valid UTF-8 once decoded yields :data:`NO_MESSAGE`.
    """
    classified = classify_input(token)
    if isinstance(classified, Invalid):
        logger.debug("Rejected non-string token of type %s", classified.kind)
        return NO_MESSAGE

    value = classified.value
    if not value:
        return NO_MESSAGE
    if TOKEN_PATTERN.fullmatch(value) is None:
        logger.debug("Rejected token outside base64 alphabet")
        return NO_MESSAGE

    try:
        raw = _forgiving_b64decode(value)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError):
        # UnicodeDecodeError is a ValueError subclass.
        logger.debug("Rejected token that does not decode to UTF-8 text")
        return NO_MESSAGE


def _forgiving_b64decode(value: str) -> bytes:
    """Decode base64 the way browsers' ``atob`` does.

    Up to two ``=`` are dropped when the length is a multiple of four,
    a remaining length of ``1 (mod 4)`` is malformed, and otherwise
    missing padding is restored before decoding.
    """
    if len(value) % 4 == 0:
        if value.endswith("=="):
            value = value[:-2]
        elif value.endswith("="):
            value = value[:-1]
    if "=" in value or len(value) % 4 == 1:
        msg = "malformed base64 padding"
        raise ValueError(msg)
    padded = value + "=" * (-len(value) % 4)
    return base64.b64decode(padded, validate=True)
