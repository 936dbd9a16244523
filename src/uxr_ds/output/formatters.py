"""Human/JSON renderings of CLI command results."""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from uxr_ds.output.console import create_console, get_output

if TYPE_CHECKING:
    from uxr_ds.domain.pagination import Pagination


def format_json(data: Any) -> str:
    return _json.dumps(data, indent=2, sort_keys=True, default=str)


def format_names(title: str, names: list[str]) -> str:
    """Render a sorted name list as a single-column table."""
    console = create_console()
    console.print(f"[bold]{escape(title)}[/bold]")
    table = Table(show_header=False, box=None)
    table.add_column("name", style="ds.name")
    for name in sorted(names):
        table.add_row(name)
    console.print(table)
    return get_output(console)


def format_assets(assets: dict[str, list[str]]) -> str:
    """Render asset paths grouped by kind."""
    console = create_console()
    for kind, paths in assets.items():
        console.print(f"[ds.kind]{kind}/[/ds.kind]")
        for path in paths:
            console.print(f"  [ds.path]{path}[/ds.path]")
    return get_output(console)


def format_pagination(pagination: Pagination) -> str:
    """Render a pager line such as ``1 ... 4 [5] 6 ... 10``."""
    parts: list[str] = []
    for page, gap_before in pagination.gaps():
        if gap_before:
            parts.append("[ds.gap]...[/ds.gap]")
        if page == pagination.current_page:
            parts.append(f"[ds.current]\\[{page}][/ds.current]")
        else:
            parts.append(f"[ds.page]{page}[/ds.page]")
    console = create_console()
    console.print(" ".join(parts))
    return get_output(console)
