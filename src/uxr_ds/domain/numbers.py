"""Integer display formatting and template arithmetic.

Division and modulo by zero return 0 instead of raising, so a template
computing ``div total per_page`` with an empty page size still renders.
"""

from __future__ import annotations


def format_number(n: int | float) -> str:
    """Format an integer with comma separators.

    Floats (from Jinja2's ``/`` operator) are truncated toward zero first.

    Examples:
        >>> format_number(1234567)
        '1,234,567'
        >>> format_number(-1234)
        '-1,234'
    """
    n = int(n)
    digits = str(abs(n))
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    grouped = ",".join(groups)
    return f"-{grouped}" if n < 0 else grouped


def add(a: int, b: int) -> int:
    return a + b


def sub(a: int, b: int) -> int:
    return a - b


def mul(a: int, b: int) -> int:
    return a * b


def div(a: int, b: int) -> int:
    """Integer division truncating toward zero; 0 when *b* is 0."""
    if b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def mod(a: int, b: int) -> int:
    """Remainder carrying the sign of *a*; 0 when *b* is 0."""
    if b == 0:
        return 0
    return a - div(a, b) * b


def seq(start: int, end: int) -> list[int]:
    """Inclusive integer range; empty when *end* < *start*."""
    return list(range(start, end + 1))
