"""Command: run one of the display formatters on a value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from uxr_ds.commands._base import DsCommand
from uxr_ds.domain.numbers import format_number
from uxr_ds.domain.text import truncate
from uxr_ds.domain.timefmt import format_date, format_datetime, format_time, time_ago

if TYPE_CHECKING:
    from uxr_ds.commands._context import AppContext

_TIME_FORMATTERS = {
    "date": format_date,
    "time": format_time,
    "datetime": format_datetime,
    "ago": time_ago,
}

FORMAT_KINDS = ("number", *_TIME_FORMATTERS, "truncate")


def _time_input(value: str) -> str | int:
    """Treat all-digit input as epoch seconds, anything else as a string."""
    if value.lstrip("-").isdigit():
        return int(value)
    return value


@click.command(
    "format",
    cls=DsCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  uxr-ds format number 1234567
  uxr-ds format date 2024-06-15
  uxr-ds format datetime 2024-06-15T14:30:00Z
  uxr-ds format ago 1718461800
  uxr-ds format truncate "hello world" --max-len 8""",
)
@click.argument("kind", type=click.Choice(FORMAT_KINDS))
@click.argument("value")
@click.option("--max-len", default=20, type=int, help="Maximum length for truncate.")
@click.pass_obj
def format_cmd(app: AppContext, kind: str, value: str, max_len: int) -> None:
    """Format VALUE with the KIND formatter."""
    if kind == "number":
        try:
            result = format_number(int(value))
        except ValueError:
            app.fail(f"Not an integer: {value!r}")
    elif kind == "truncate":
        result = truncate(value, max_len)
    else:
        result = _TIME_FORMATTERS[kind](_time_input(value))
    app.emit({"kind": kind, "input": value, "output": result}, result)
