"""Pagination engine for in-memory sequences.

Derives a page window over any ``Sequence``. The engine stores only the
requested page and the page size; everything else (page count, slice bounds,
adjacency flags, the page slice itself) is recomputed from the live backing
sequence on every read. A sequence that shrinks out of band therefore never
leaves the engine pointing past its last page: ``current_page`` is reported
clamped into ``[1, total_pages]``.

Example::

    pager = PaginationEngine(rows, initial_page_size=25)
    table.set_rows(pager.paginated_data)
    next_button.setEnabled(pager.has_next_page)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

from ..services.settings_service import SettingsService

__all__ = ["PaginationEngine", "PaginationState"]

T = TypeVar("T")


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(low, value), high)


@dataclass(frozen=True)
class PaginationState:
    """Snapshot of a pagination window."""

    current_page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.page_size))


class PaginationEngine(Generic[T]):
    """Page window over an ordered collection.

    Parameters
    ----------
    items:
        Backing sequence. Held by reference, so in-place changes are picked up
        on the next read.
    initial_page:
        1-indexed starting page (``SettingsService.instance.default_page`` when
        omitted). Out-of-range values are clamped on read.
    initial_page_size:
        Items per page (``SettingsService.instance.default_page_size`` when
        omitted). Values below 1 become 1.
    """

    def __init__(
        self,
        items: Sequence[T],
        *,
        initial_page: Optional[int] = None,
        initial_page_size: Optional[int] = None,
    ) -> None:
        settings = SettingsService.instance
        self._items: Sequence[T] = items
        self._page = int(settings.default_page if initial_page is None else initial_page)
        size = settings.default_page_size if initial_page_size is None else initial_page_size
        self._page_size = max(1, int(size))

    # Source ----------------------------------------------------------
    @property
    def items(self) -> Sequence[T]:
        return self._items

    def set_items(self, items: Sequence[T]) -> None:
        """Swap the backing sequence; the current page is kept and clamped on read."""
        self._items = items

    # Derived state ---------------------------------------------------
    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_items(self) -> int:
        return len(self._items)

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self._page_size))

    @property
    def current_page(self) -> int:
        return _clamp(self._page, 1, self.total_pages)

    @property
    def start_index(self) -> int:
        """Index of the first item on the current page (0-indexed)."""
        return (self.current_page - 1) * self._page_size

    @property
    def end_index(self) -> int:
        """Index one past the last item on the current page."""
        return min(self.start_index + self._page_size, self.total_items)

    @property
    def paginated_data(self) -> List[T]:
        return list(self._items[self.start_index : self.end_index])

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def state(self) -> PaginationState:
        return PaginationState(
            current_page=self.current_page,
            page_size=self._page_size,
            total_items=self.total_items,
        )

    # Navigation ------------------------------------------------------
    def go_to_page(self, page: int) -> None:
        self._page = _clamp(int(page), 1, self.total_pages)

    def next_page(self) -> None:
        if self.has_next_page:
            self._page = self.current_page + 1

    def prev_page(self) -> None:
        if self.has_prev_page:
            self._page = self.current_page - 1

    def set_page_size(self, size: int) -> None:
        """Change items per page (minimum 1) and restart at page 1."""
        self._page_size = max(1, int(size))
        self._page = 1

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return (
            f"PaginationEngine(page={self.current_page}/{self.total_pages}, "
            f"page_size={self._page_size}, items={self.total_items})"
        )
