"""Subcommand modules for offspring.

Provides register_commands() which uses deferred imports to keep
``offspring --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from offspring.commands.check import check
    from offspring.commands.inspect_cmd import inspect_cmd
    from offspring.commands.type_cmd import type_cmd

    cli.add_command(type_cmd)
    cli.add_command(check)
    cli.add_command(inspect_cmd)
