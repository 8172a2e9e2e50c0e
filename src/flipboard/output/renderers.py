"""Operation-specific Rich renderers for ServiceResult.

:func:`render_result` looks up a renderer by ``result.op``; ops without one
get a plain key/value listing.  Everything is drawn on a StringIO-backed
console from :mod:`flipboard.output.console`.

Message text reaching this module has already been sanitized by the
service layer, but it is still wrapped in :class:`rich.text.Text` so Rich
never interprets it as console markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from flipboard.domain.board import PLACEHOLDER
from flipboard.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from flipboard.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    board_theme: str = "dark",
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Output carries no ANSI codes unless Rich sees a terminal.
    """
    console = create_console(board_theme=board_theme)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


_RAW_OPS = frozenset({"decode"})

# Primary value printed per op in --quiet mode.
_QUIET_KEYS: dict[str, str] = {
    "encode": "token",
    "decode": "message",
    "sanitize": "message",
    "preview": "message",
    "share": "url",
    "show": "message",
    "theme_get": "mode",
    "theme_set": "mode",
    "theme_cycle": "mode",
}


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None:
        value = str(result.data.get(key, ""))
        # Decoded text is unsanitized; keep control characters escaped.
        return repr(value) if result.op in _RAW_OPS else value

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("message", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="flip.ok")
    op = Text(f"  {result.op}", style="flip.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="flip.key")
    if not style and (key == "id" or key.endswith("_id")):
        style = "flip.id"
    console.print(k, Text(str(value), style=style), sep="")


def _board(cells: list[dict[str, Any]]) -> Text:
    """Lay out flip tiles on one line; Rich wraps at the console width."""
    tiles = Text()
    for i, cell in enumerate(cells):
        if i:
            tiles.append(" ")
        tiles.append(f" {cell.get('display', cell.get('char', ''))} ", style="flip.tile")
    return tiles


def _render_board_panel(console: Console, cells: list[dict[str, Any]]) -> None:
    if cells:
        body: Any = _board(cells)
    else:
        body = Align.center(Text(PLACEHOLDER, style="flip.placeholder"))
    console.print(Panel(body, border_style="flip.frame", expand=False))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="flip.error")
    op = Text(f"  {result.op}", style="flip.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Codec renderers ───────────────────────────────────────────────────


def _render_encode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "token", result.data.get("token", ""), style="flip.token")
    if verbose:
        _field(console, "length", result.data.get("length", 0))


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Show decoded text with control characters made visible.

    Decoded text is raw (unsanitized); ``repr`` keeps escapes, newlines
    and other control characters from reaching the terminal.
    """
    _status_line(console, result)
    if result.data.get("has_message"):
        _field(console, "message", repr(result.data.get("message", "")))
    else:
        _field(console, "message", "(no message)", style="flip.warning")


def _render_sanitize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "message", result.data.get("message", ""))
    if verbose:
        _field(console, "length", result.data.get("length", 0))
        _field(console, "changed", result.data.get("changed", False))


# ── Board renderers ───────────────────────────────────────────────────


def _render_preview(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Live preview: the board plus a character counter."""
    _render_board_panel(console, result.data.get("cells", []))
    length = result.data.get("length", 0)
    limit = result.data.get("max_length", 0)
    style = "flip.warning" if limit and length > limit else "flip.counter"
    console.print(Text(f"{length} / {limit}", style=style))


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Received message on the board, or the composer placeholder."""
    _render_board_panel(console, result.data.get("cells", []))
    if verbose:
        _field(console, "view", result.data.get("view", ""))


# ── Share / history renderers ─────────────────────────────────────────


def _render_share(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "url", result.data.get("url", ""), style="flip.url")
    if verbose:
        _field(console, "token", result.data.get("token", ""), style="flip.token")
        _field(console, "recorded", result.data.get("recorded", False))


def _render_history_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(Text("No recent messages.", style="flip.placeholder"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Message")
    table.add_column("Shared", style="dim", no_wrap=True)
    if verbose:
        table.add_column("ID", style="flip.id", no_wrap=True)

    for i, item in enumerate(items, start=1):
        row: list[Any] = [
            str(i),
            Text(str(item.get("message", ""))),
            str(item.get("shared_at", "")),
        ]
        if verbose:
            row.append(str(item.get("id", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} messages")


def _render_history_clear(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    removed = result.data.get("removed", False)
    console.print(Text("  history cleared" if removed else "  history was already empty"))


def _render_theme(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "mode", result.data.get("mode", ""))
    _field(console, "theme", result.data.get("theme", ""))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "encode": _render_encode,
    "decode": _render_decode,
    "sanitize": _render_sanitize,
    "preview": _render_preview,
    "show": _render_show,
    "share": _render_share,
    "history_list": _render_history_list,
    "history_clear": _render_history_clear,
    "theme_get": _render_theme,
    "theme_set": _render_theme,
    "theme_cycle": _render_theme,
}
