"""Subcommand modules for valuetypes.

Provides register_commands() which uses deferred imports to keep
``valuetypes --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from valuetypes.commands.types_cmd import types_cmd
    from valuetypes.commands.value import value

    cli.add_command(types_cmd)
    cli.add_command(value)
