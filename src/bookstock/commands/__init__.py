"""Subcommand modules for bookstock.

Provides register_commands() which uses deferred imports to keep
``bookstock --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from bookstock.commands.bootstrap import bootstrap
    from bookstock.commands.catalog import buy, get, restock
    from bookstock.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(get)
    cli.add_command(buy)
    cli.add_command(restock)
    cli.add_command(bootstrap)
