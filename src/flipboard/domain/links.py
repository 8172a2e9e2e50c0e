"""Share link composition and parsing.

A share link is ``<origin>/?m=<token>``.  The token is percent-encoded in
the query so ``+``, ``/`` and ``=`` survive query-string parsing.
"""

from __future__ import annotations

from urllib.parse import parse_qs, quote, urlsplit

from flipboard.domain.codec import is_token

DEFAULT_PARAM = "m"


def build_share_url(origin: str, token: str, *, param: str = DEFAULT_PARAM) -> str:
    """Compose the shareable URL for *token*.

    Examples:
        >>> build_share_url("https://flip.example/", "SGk=")
        'https://flip.example/?m=SGk%3D'
    """
    base = origin.rstrip("/")
    return f"{base}/?{param}={quote(token, safe='')}"


def extract_token(link: str, *, param: str = DEFAULT_PARAM) -> str:
    """Pull the token out of *link*; ``""`` when there is none.

    *link* may be a full URL, a bare query string (``?m=...``) or the
    token itself.  Query parsing turns an unescaped ``+`` into a space;
    spaces are mapped back to ``+`` since they never occur in a token.
    """
    link = link.strip()
    if not link:
        return ""
    if is_token(link):
        return link

    query = urlsplit(link).query if "?" in link else link
    values = parse_qs(query, keep_blank_values=True).get(param)
    if not values:
        return ""
    return values[0].replace(" ", "+")
