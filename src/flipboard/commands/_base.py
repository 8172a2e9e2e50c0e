"""Shared Click building blocks for flipboard commands.

- FlipCommand / FlipGroup accept an ``examples`` string and expose it
  through an eager ``--examples`` flag, keeping ``--help`` short.
- :func:`text_argument` reads a message argument, where ``-`` means
  "read it from stdin" so messages can be piped in.
"""

from __future__ import annotations

from typing import Any

import click

STDIN_MARKER = "-"


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class FlipCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class FlipGroup(click.Group):
    """Group with an optional ``--examples`` flag.

    Subcommands default to :class:`FlipCommand`, so ``examples=`` works on
    ``@group.command(...)`` without passing ``cls=``.
    """

    command_class = FlipCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def text_argument(value: str) -> str:
    """Resolve a message argument, reading stdin when it is ``-``.

    A single trailing newline (as added by ``echo``) is dropped; any
    other whitespace is part of the message.
    """
    if value != STDIN_MARKER:
        return value
    text = click.get_text_stream("stdin").read()
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text
