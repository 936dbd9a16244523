"""Pagination window: which page links a pager renders.

Short ranges show every page. Long ranges keep both endpoints visible and
collapse the rest around the current page; the template draws a gap
wherever two rendered pages are not adjacent.

INVARIANT: ``page_numbers`` is strictly increasing for in-range input.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

# Ranges up to this many pages are rendered in full.
FULL_RANGE_MAX = 7

# Size of the leading/trailing block shown near either end of a long range.
EDGE_BLOCK = 5


class Pagination(BaseModel):
    """Pager data handed to ``components/pagination.html``.

    Attributes:
        current_page: The page being viewed (1-based).
        total_pages: Number of pages in the full range.
        page_numbers: The page links to render, in order.
    """

    model_config = {"frozen": True}

    current_page: int
    total_pages: int
    page_numbers: tuple[int, ...] = ()

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def previous_page(self) -> int:
        return self.current_page - 1

    @property
    def next_page(self) -> int:
        return self.current_page + 1

    def gaps(self) -> Iterator[tuple[int, bool]]:
        """Yield ``(page, gap_before)`` for each rendered page.

        ``gap_before`` is True when the previous rendered page is not
        ``page - 1``, i.e. the template should draw an ellipsis first.
        """
        prev: int | None = None
        for page in self.page_numbers:
            yield page, prev is not None and page != prev + 1
            prev = page


def _window(current_page: int, total_pages: int) -> list[int]:
    if total_pages <= FULL_RANGE_MAX:
        return list(range(1, total_pages + 1))
    if current_page <= EDGE_BLOCK - 1:
        return [*range(1, EDGE_BLOCK + 1), total_pages]
    if current_page >= total_pages - (EDGE_BLOCK - 2):
        return [1, *range(total_pages - (EDGE_BLOCK - 1), total_pages + 1)]
    return [1, current_page - 1, current_page, current_page + 1, total_pages]


def build_pagination(current_page: int, total_pages: int) -> Pagination:
    """Build pagination data with a collapsed page-number window.

    Bounds are not validated: callers pass ``1 <= current_page <= total_pages``.
    Out-of-range input still produces a deterministic window.

    Examples:
        >>> build_pagination(1, 10).page_numbers
        (1, 2, 3, 4, 5, 10)
        >>> build_pagination(5, 10).page_numbers
        (1, 4, 5, 6, 10)
        >>> build_pagination(9, 10).page_numbers
        (1, 6, 7, 8, 9, 10)
    """
    return Pagination(
        current_page=current_page,
        total_pages=total_pages,
        page_numbers=tuple(_window(current_page, total_pages)),
    )
