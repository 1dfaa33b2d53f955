"""Subcommand modules for shipctl.

Provides register_commands() which uses deferred imports to keep
``shipctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from shipctl.commands.init_cmd import init_cmd
    from shipctl.commands.labels import labels
    from shipctl.commands.plugins import plugins

    cli.add_command(init_cmd)
    cli.add_command(plugins)
    cli.add_command(labels)
