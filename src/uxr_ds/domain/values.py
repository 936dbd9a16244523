"""Zero-value defaulting, sequence accessors, and dict construction.

A value is "zero" when it carries nothing to display: None, ``""``,
``False``, numeric zero, or anything sized with length 0 (strings,
collections). Jinja2 undefined values are zero too, checked before
``len()`` so a ``StrictUndefined`` argument does not raise. Anything
else, including arbitrary objects, counts as present.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Sized
from numbers import Number
from typing import Any, TypeVar

from jinja2 import Undefined

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_zero_value(value: object) -> bool:
    """Return True if *value* is None or the empty value of its type."""
    if value is None or isinstance(value, Undefined):
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    if isinstance(value, (bool, Number)):
        return value == 0
    return False


def default(default_value: Any, value: Any) -> Any:
    """Return *value* unless it is a zero value, else *default_value*.

    The fallback comes first: ``{{ default("n/a", user.name) }}``.
    """
    if is_zero_value(value):
        return default_value
    return value


def coalesce(*values: Any) -> Any:
    """Return the first argument that is not a zero value, or None."""
    for value in values:
        if not is_zero_value(value):
            return value
    return None


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def first(items: Sequence[T] | object) -> T | None:
    """First element of a non-empty sequence, else None."""
    if _is_sequence(items) and items:
        return items[0]  # type: ignore[index]
    return None


def last(items: Sequence[T] | object) -> T | None:
    """Last element of a non-empty sequence, else None."""
    if _is_sequence(items) and items:
        return items[-1]  # type: ignore[index]
    return None


def length(value: object) -> int:
    """Length of a sequence, mapping or string; 0 for anything else."""
    if isinstance(value, (str, Sequence, Mapping)):
        return len(value)
    return 0


def make_dict(*pairs: Any) -> dict[str, Any] | None:
    """Build a dict from alternating ``key, value`` arguments.

    Lets a template pass several values into an included component::

        {% with ctx = dict("title", page.title, "items", rows) %}

    Returns None for an odd argument count. Pairs whose key is not a
    string are skipped.
    """
    if len(pairs) % 2 != 0:
        logger.debug("dict() called with odd argument count: %d", len(pairs))
        return None
    result: dict[str, Any] = {}
    for key, value in zip(pairs[::2], pairs[1::2]):
        if not isinstance(key, str):
            logger.debug("dict() skipping non-string key: %r", key)
            continue
        result[key] = value
    return result
