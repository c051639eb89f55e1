"""Subcommand modules for digitgroup.

Provides register_commands() which uses deferred imports to keep
``digitgroup --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from digitgroup.commands.group import commas_cmd, group_cmd, preset_cmd, si_cmd
    from digitgroup.commands.presets import presets_cmd

    cli.add_command(group_cmd)
    cli.add_command(commas_cmd)
    cli.add_command(si_cmd)
    cli.add_command(preset_cmd)
    cli.add_command(presets_cmd)
