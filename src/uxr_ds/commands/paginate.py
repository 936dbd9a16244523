"""Command: preview a pagination window."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uxr_ds.commands._base import DsCommand
from uxr_ds.domain.pagination import build_pagination
from uxr_ds.output.formatters import format_pagination

if TYPE_CHECKING:
    from uxr_ds.commands._context import AppContext


@click.command(
    cls=DsCommand,
    examples="""\
  uxr-ds paginate 1 5
  uxr-ds paginate 5 10
  uxr-ds --json paginate 9 40""",
)
@click.argument("current", type=int)
@click.argument("total", type=int)
@click.pass_obj
def paginate(app: AppContext, current: int, total: int) -> None:
    """Show which page links a pager renders for page CURRENT of TOTAL."""
    pagination = build_pagination(current, total)
    app.emit(pagination.model_dump(), format_pagination(pagination))
