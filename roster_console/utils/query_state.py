"""Filter, sort and page state of a collection view."""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class SortDirection(str, Enum):
    """Sort direction as sent to the backend."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class QueryState:
    """
    Records what the next fetch of a collection should ask for.

    Filter keys and sort columns are attribute names of the entity; both
    are translated to the backend's parameter names by ``to_query``.
    Changing filters or sort never moves ``page`` here: the controller
    decides when a change invalidates the page position and calls
    ``reset_to_first_page``.
    """

    def __init__(
        self,
        *,
        filter_params: Mapping[str, str],
        sort_params: Mapping[str, str],
        default_sort: str,
        default_direction: SortDirection = SortDirection.ASC,
        page_size: int = 10,
    ):
        if default_sort not in sort_params:
            raise ValueError(f"Unknown sort column: {default_sort}")
        if page_size < 1:
            raise ValueError(f"Page size must be at least 1, got {page_size}")
        self._filter_params = dict(filter_params)
        self._sort_params = dict(sort_params)
        self._defaults = (default_sort, SortDirection(default_direction), page_size)

        self.page = 0
        self.page_size = page_size
        self.filters: dict[str, Any] = {}
        self.sort_column = default_sort
        self.sort_direction = SortDirection(default_direction)

    @property
    def filter_keys(self) -> frozenset[str]:
        return frozenset(self._filter_params)

    @property
    def sort_columns(self) -> frozenset[str]:
        return frozenset(self._sort_params)

    def set_filter(self, key: str, value: Any) -> None:
        """Store a filter value, or drop the key when the value is empty."""
        if key not in self._filter_params:
            raise ValueError(f"Unknown filter: {key}")
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            self.filters.pop(key, None)
        else:
            self.filters[key] = value

    def set_filters(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.set_filter(key, value)

    def clear_filters(self) -> None:
        self.filters.clear()

    def set_sort(self, column: str) -> None:
        """Sort by column; the active column flips direction instead."""
        if column not in self._sort_params:
            raise ValueError(f"Unknown sort column: {column}")
        if column == self.sort_column:
            self.sort_direction = self.sort_direction.flipped()
        else:
            self.sort_column = column
            self.sort_direction = SortDirection.ASC

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"Page size must be at least 1, got {page_size}")
        self.page_size = page_size

    def reset_to_first_page(self) -> None:
        self.page = 0

    def reset(self) -> None:
        """Back to the state the view was opened with."""
        default_sort, default_direction, page_size = self._defaults
        self.page = 0
        self.page_size = page_size
        self.filters.clear()
        self.sort_column = default_sort
        self.sort_direction = default_direction

    @property
    def sort(self) -> str:
        return f"{self._sort_params[self.sort_column]},{self.sort_direction.value}"

    def to_query(self) -> dict[str, Any]:
        """
        Render the collection query for the fetch collaborator.

        Returns:
            Dictionary with page, size, sort and the non-empty filters
            under their backend parameter names
        """
        query: dict[str, Any] = {
            "page": self.page,
            "size": self.page_size,
            "sort": self.sort,
        }
        for key, value in self.filters.items():
            query[self._filter_params[key]] = value
        return query
