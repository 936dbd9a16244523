"""Subcommand modules for uxr-ds.

Provides register_commands() which uses deferred imports to keep
``uxr-ds --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from uxr_ds.commands.format_cmd import format_cmd
    from uxr_ds.commands.inspect import assets, funcs
    from uxr_ds.commands.paginate import paginate
    from uxr_ds.commands.render import render

    cli.add_command(funcs)
    cli.add_command(assets)
    cli.add_command(paginate)
    cli.add_command(format_cmd)
    cli.add_command(render)
