"""Utility functions and helpers."""

from roster_console.utils.pagination import (
    PageGap,
    PageResult,
    item_range,
    page_count,
    page_window,
)
from roster_console.utils.query_state import QueryState, SortDirection

__all__ = [
    "PageGap",
    "PageResult",
    "item_range",
    "page_count",
    "page_window",
    "QueryState",
    "SortDirection",
]
