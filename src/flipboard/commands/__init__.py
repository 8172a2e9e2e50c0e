"""Subcommand modules for flipboard.

Provides register_commands() which uses deferred imports to keep
``flipboard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from flipboard.commands.history import history

    cli.add_command(history)

    # --- Standalone commands ---
    from flipboard.commands.decode import decode_cmd
    from flipboard.commands.encode import encode_cmd
    from flipboard.commands.preview import preview
    from flipboard.commands.sanitize import sanitize_cmd
    from flipboard.commands.share import share
    from flipboard.commands.show import show
    from flipboard.commands.theme import theme

    cli.add_command(encode_cmd)
    cli.add_command(decode_cmd)
    cli.add_command(sanitize_cmd)
    cli.add_command(preview)
    cli.add_command(share)
    cli.add_command(show)
    cli.add_command(theme)
