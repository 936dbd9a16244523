"""String helpers exposed to templates."""

from __future__ import annotations

import re

ELLIPSIS = "..."

_WORD_START = re.compile(r"(?<!\w)\w")


def truncate(s: str, max_len: int) -> str:
    """Truncate *s* to *max_len* characters, ending with ``...`` when cut.

    Lengths count code points, not rendered width. When *max_len* leaves
    no room for the ellipsis (3 or less) the text is cut without one.

    Examples:
        >>> truncate("hello world", 8)
        'hello...'
        >>> truncate("hello", 3)
        'hel'
    """
    if len(s) <= max_len:
        return s
    if max_len <= len(ELLIPSIS):
        return s[: max(max_len, 0)]
    return s[: max_len - len(ELLIPSIS)] + ELLIPSIS


def bool_state(ok: bool, fallback: str | None = None) -> str:
    """Return ``"pass"`` if *ok*, otherwise *fallback* or ``"fail"``."""
    if ok:
        return "pass"
    if fallback is not None:
        return fallback
    return "fail"


def bool_yes_no(ok: bool) -> str:
    return "Yes" if ok else "No"


def title(s: str) -> str:
    """Uppercase the first letter of every word; the rest is left as is.

    A word starts after any character that is not a letter, digit or
    underscore, so ``"hello-world"`` becomes ``"Hello-World"``.
    """
    return _WORD_START.sub(lambda m: m.group().upper(), s)


def contains(s: str, sub: str) -> bool:
    return sub in s


def has_prefix(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


def has_suffix(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def replace(s: str, old: str, new: str) -> str:
    return s.replace(old, new)


def split(s: str, sep: str) -> list[str]:
    """Split on *sep*; an empty separator splits into characters."""
    if not sep:
        return list(s)
    return s.split(sep)


def join(items: list[str], sep: str) -> str:
    return sep.join(items)
