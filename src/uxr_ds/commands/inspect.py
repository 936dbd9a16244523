"""Commands: list registered template functions and packaged assets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uxr_ds.commands._base import DsCommand
from uxr_ds.infrastructure.assets import ASSET_KINDS, list_assets
from uxr_ds.infrastructure.templates import collect_template_functions
from uxr_ds.output.formatters import format_assets, format_names

if TYPE_CHECKING:
    from uxr_ds.commands._context import AppContext


@click.command(
    cls=DsCommand,
    examples="""\
  uxr-ds funcs
  uxr-ds --json funcs""",
)
@click.pass_obj
def funcs(app: AppContext) -> None:
    """List the template functions available to templates."""
    names = sorted(collect_template_functions(app.settings))
    app.emit({"functions": names}, format_names("Template functions", names))


@click.command(
    cls=DsCommand,
    examples="""\
  uxr-ds assets
  uxr-ds assets components
  uxr-ds --json assets css""",
)
@click.argument("kind", required=False, type=click.Choice(ASSET_KINDS))
@click.pass_obj
def assets(app: AppContext, kind: str | None) -> None:
    """List packaged asset files, optionally for one KIND."""
    kinds = [kind] if kind else list(ASSET_KINDS)
    found = {k: list_assets(k) for k in kinds}
    app.emit(found, format_assets(found))
