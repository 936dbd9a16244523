"""The shared template function map.

Helpers are registered under fixed names so templates in every UXR
application call them the same way. Applications layer their own
functions on top with :func:`merge_func_maps`.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from jinja2.defaults import DEFAULT_FILTERS
from markupsafe import Markup

from uxr_ds.domain import numbers, text, values
from uxr_ds.domain.pagination import build_pagination
from uxr_ds.domain.timefmt import (
    Clock,
    format_date,
    format_datetime,
    format_time,
    system_clock,
    time_ago,
)

if TYPE_CHECKING:
    from jinja2 import Environment

logger = logging.getLogger(__name__)

FuncMap = dict[str, Callable[..., Any]]


def build_func_map(*, clock: Clock | None = None) -> FuncMap:
    """Return a fresh map of every shared template helper.

    Args:
        clock: Source of "now" for ``now`` and ``timeAgo``. Defaults to
            the system clock; tests pass a fixed instant.
    """
    now = clock or system_clock

    def time_ago_now(value: object) -> str:
        return time_ago(value, now=now())

    return {
        # HTML safety
        "safe": Markup,
        "safeHTML": Markup,
        "safeAttr": Markup,
        "safeURL": Markup,
        "safeJS": Markup,
        "safeCSS": Markup,
        # Dictionary: pass several values to an included component
        "dict": values.make_dict,
        # Math
        "add": numbers.add,
        "sub": numbers.sub,
        "mul": numbers.mul,
        "div": numbers.div,
        "mod": numbers.mod,
        "seq": numbers.seq,
        # Comparison
        "eq": operator.eq,
        "ne": operator.ne,
        "lt": operator.lt,
        "le": operator.le,
        "gt": operator.gt,
        "ge": operator.ge,
        # Strings
        "truncate": text.truncate,
        "lower": str.lower,
        "upper": str.upper,
        "title": text.title,
        "trim": str.strip,
        "contains": text.contains,
        "hasPrefix": text.has_prefix,
        "hasSuffix": text.has_suffix,
        "replace": text.replace,
        "split": text.split,
        "join": text.join,
        "boolState": text.bool_state,
        "boolYesNo": text.bool_yes_no,
        # Time
        "formatTime": format_time,
        "formatDate": format_date,
        "formatDateTime": format_datetime,
        "timeAgo": time_ago_now,
        "now": now,
        # Numbers
        "formatNumber": numbers.format_number,
        # Conditional
        "default": values.default,
        "coalesce": values.coalesce,
        # Sequences
        "first": values.first,
        "last": values.last,
        "length": values.length,
        # Components
        "pagination": build_pagination,
    }


def merge_func_maps(
    base: Mapping[str, Callable[..., Any]],
    extra: Mapping[str, Callable[..., Any]],
) -> FuncMap:
    """Return a new map with *extra* entries added over *base*.

    Neither input is modified. On a name collision *extra* wins.
    """
    overridden = sorted(base.keys() & extra.keys())
    if overridden:
        logger.debug("Overriding template functions: %s", ", ".join(overridden))
    return {**base, **extra}


def install_funcs(env: Environment, funcs: Mapping[str, Callable[..., Any]]) -> None:
    """Expose *funcs* in a Jinja2 environment.

    Every entry becomes a global (``{{ formatNumber(n) }}``). Entries whose
    name is not a Jinja2 built-in filter also become filters
    (``{{ n | formatNumber }}``); built-ins such as ``default`` and
    ``truncate`` keep their Jinja2 argument order.
    """
    env.globals.update(funcs)
    for name, func in funcs.items():
        if name not in DEFAULT_FILTERS:
            env.filters[name] = func
