"""Time-like value normalization and display formatting.

Templates receive timestamps in several shapes: ``datetime``/``date``
objects from the ORM, RFC 3339 or ``YYYY-MM-DD`` strings from JSON
payloads, and integer epoch seconds from caches. :func:`to_datetime`
dispatches on the concrete type and returns a ``datetime`` or None.

INVARIANT: formatters never raise. Absent values (None, ``""``, ``0``,
``datetime.min``) render as ``""``; a non-empty string that is not a
date renders unchanged.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def system_clock() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


@functools.singledispatch
def to_datetime(value: object) -> datetime | None:
    """Coerce a time-like value to a ``datetime``, or None if not possible."""
    return None


@to_datetime.register
def _(value: datetime) -> datetime | None:
    if value.replace(tzinfo=None) == datetime.min:
        return None
    return value


@to_datetime.register
def _(value: date) -> datetime | None:
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


@to_datetime.register
def _(value: str) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Unparseable time value: %r", value)
        return None
    # RFC 3339 requires an explicit offset.
    if parsed.tzinfo is None:
        logger.debug("Time value without offset: %r", value)
        return None
    return parsed


@to_datetime.register
def _(value: bool) -> datetime | None:
    return None


@to_datetime.register
def _(value: int) -> datetime | None:
    if value == 0:
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError):
        logger.debug("Epoch value out of range: %r", value)
        return None


def _aware(value: datetime) -> datetime:
    """Attach the local offset to naive datetimes."""
    if value.tzinfo is not None:
        return value
    try:
        return value.astimezone()
    except (OverflowError, OSError, ValueError):
        return value.replace(tzinfo=timezone.utc)


def _passthrough(value: object) -> str:
    if isinstance(value, str) and value:
        return value
    return ""


# ---------------------------------------------------------------------------
# Absolute formatting
# ---------------------------------------------------------------------------


def _date_part(dt: datetime, *, pad_day: bool = False) -> str:
    day = f"{dt.day:02d}" if pad_day else str(dt.day)
    return f"{_MONTHS[dt.month - 1]} {day}, {dt.year:04d}"


def _format_with(value: object, render: Callable[[datetime], str]) -> str:
    dt = to_datetime(value)
    if dt is None:
        return _passthrough(value)
    return render(dt)


def format_date(value: object) -> str:
    """Format as ``Jun 15, 2024``."""
    return _format_with(value, _date_part)


def format_time(value: object) -> str:
    """Format as ``Jun 15, 2024 10:30 AM``."""

    def render(dt: datetime) -> str:
        hour = dt.hour % 12 or 12
        meridiem = "AM" if dt.hour < 12 else "PM"
        return f"{_date_part(dt)} {hour}:{dt.minute:02d} {meridiem}"

    return _format_with(value, render)


def format_datetime(value: object) -> str:
    """Format as ``Jun 15, 2024 14:30`` (24-hour clock)."""
    return _format_with(
        value,
        lambda dt: f"{_date_part(dt, pad_day=True)} {dt.hour:02d}:{dt.minute:02d}",
    )


# ---------------------------------------------------------------------------
# Relative formatting
# ---------------------------------------------------------------------------


def _ago(count: int, unit: str) -> str:
    if count == 1:
        return f"1 {unit} ago"
    return f"{count} {unit}s ago"


def describe_elapsed(elapsed: timedelta) -> str:
    """Bucket an elapsed duration into a coarse English phrase.

    Counts are truncated, never rounded. Negative durations (instants in
    the future) read as ``"just now"``.
    """
    seconds = elapsed.total_seconds()
    if seconds < _MINUTE:
        return "just now"
    if seconds < _HOUR:
        return _ago(int(seconds // _MINUTE), "minute")
    if seconds < _DAY:
        return _ago(int(seconds // _HOUR), "hour")
    days = int(seconds // _DAY)
    if days < 7:
        return "yesterday" if days == 1 else f"{days} days ago"
    if days < 30:
        return _ago(days // 7, "week")
    if days < 365:
        return _ago(days // 30, "month")
    return _ago(days // 365, "year")


def time_ago(value: object, *, now: datetime | None = None) -> str:
    """Return a human-readable relative time such as ``"5 minutes ago"``.

    Args:
        value: Any time-like value accepted by :func:`to_datetime`.
        now: Reference instant. Defaults to :func:`system_clock`.
    """
    dt = to_datetime(value)
    if dt is None:
        return _passthrough(value)
    current = _aware(now if now is not None else system_clock())
    return describe_elapsed(current - _aware(dt))
