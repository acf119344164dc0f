"""Pagination utilities."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TypeVar, Generic

T = TypeVar("T")

# Up to this many pages every page number is shown
MAX_UNWINDOWED_PAGES = 5


class PageGap(Enum):
    """Ellipsis marker in a page window. Two gaps in one window are distinct."""

    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of a collection as reported by the server."""

    items: list[T] = field(default_factory=list)
    page_index: int = 0
    page_count: int = 0
    total_count: int = 0
    page_size: int = 10

    @classmethod
    def empty(cls, page_size: int) -> "PageResult[T]":
        return cls(items=[], page_index=0, page_count=0, total_count=0, page_size=page_size)

    @property
    def is_first(self) -> bool:
        return self.page_index == 0

    @property
    def is_last(self) -> bool:
        return self.page_index >= self.page_count - 1

    @property
    def is_empty(self) -> bool:
        return not self.items

    def with_items(self, items: list[T], total_count: int) -> "PageResult[T]":
        """Copy for a client-held list whose whole content sits on one page."""
        return replace(
            self,
            items=list(items),
            page_index=0,
            page_count=1 if total_count > 0 else 0,
            total_count=total_count,
        )


def page_count(total: int, page_size: int) -> int:
    """
    Calculate the number of pages needed for a collection.

    Args:
        total: Total number of items
        page_size: Number of items per page

    Returns:
        Number of pages, 0 when the collection is empty
    """
    return (total + page_size - 1) // page_size if total > 0 else 0


def page_window(current_page: int, total_pages: int) -> list[int | PageGap]:
    """
    Page numbers to render as pagination controls.

    Args:
        current_page: Current page number (0-indexed)
        total_pages: Number of pages in the collection

    Returns:
        Page indices in order, with PageGap markers standing in for the
        omitted ranges
    """
    if total_pages <= MAX_UNWINDOWED_PAGES:
        return list(range(total_pages))

    last = total_pages - 1
    if current_page <= 2:
        return [0, 1, 2, 3, PageGap.FIRST, last]
    if current_page >= total_pages - 3:
        return [0, PageGap.FIRST, last - 3, last - 2, last - 1, last]
    return [
        0,
        PageGap.FIRST,
        current_page - 1,
        current_page,
        current_page + 1,
        PageGap.SECOND,
        last,
    ]


def item_range(current_page: int, page_size: int, total_count: int) -> tuple[int, int]:
    """1-indexed (start, end) of the visible items, for "Showing X-Y of Z"."""
    if total_count == 0:
        return 0, 0
    start = current_page * page_size + 1
    end = min((current_page + 1) * page_size, total_count)
    return start, end
