"""Tests for pagination utilities."""

import pytest
from roster_console.utils.pagination import (
    PageGap,
    PageResult,
    item_range,
    page_count,
    page_window,
)


class TestPageWindow:
    """Tests for page_window."""

    @pytest.mark.parametrize("total_pages", [0, 1, 2, 3, 4, 5])
    def test_small_collections_show_every_page(self, total_pages):
        """Should list every page without gaps for five pages or fewer."""
        for current in range(max(total_pages, 1)):
            assert page_window(current, total_pages) == list(range(total_pages))

    def test_near_start(self):
        """Should show the first four pages, a gap and the last page."""
        assert page_window(0, 10) == [0, 1, 2, 3, PageGap.FIRST, 9]
        assert page_window(2, 10) == [0, 1, 2, 3, PageGap.FIRST, 9]

    def test_near_end(self):
        """Should show the first page, a gap and the last four pages."""
        assert page_window(9, 10) == [0, PageGap.FIRST, 6, 7, 8, 9]
        assert page_window(7, 10) == [0, PageGap.FIRST, 6, 7, 8, 9]

    def test_middle(self):
        """Should show neighbours of the current page between two gaps."""
        assert page_window(5, 10) == [0, PageGap.FIRST, 4, 5, 6, PageGap.SECOND, 9]

    def test_six_pages_has_no_middle_region(self):
        """Should switch straight from the start to the end layout."""
        assert page_window(2, 6) == [0, 1, 2, 3, PageGap.FIRST, 5]
        assert page_window(3, 6) == [0, PageGap.FIRST, 2, 3, 4, 5]

    def test_gaps_are_distinct_and_not_page_numbers(self):
        """Two gaps in one window should be told apart by the view."""
        window = page_window(50, 100)
        gaps = [token for token in window if isinstance(token, PageGap)]

        assert len(gaps) == len(set(gaps)) == 2
        assert all(not isinstance(gap, int) for gap in gaps)

    def test_window_is_bounded(self):
        """Should never produce more than seven controls."""
        for current in range(1000):
            assert len(page_window(current, 1000)) <= 7


class TestItemRange:
    """Tests for item_range."""

    def test_first_page(self):
        assert item_range(0, 10, 25) == (1, 10)

    def test_partial_last_page(self):
        assert item_range(2, 10, 25) == (21, 25)

    def test_empty_collection(self):
        assert item_range(0, 10, 0) == (0, 0)


class TestPageCount:
    """Tests for page_count utility."""

    def test_rounds_up(self):
        """Should round up total pages when not evenly divisible."""
        assert page_count(25, 10) == 3

    def test_exact_division(self):
        assert page_count(20, 10) == 2

    def test_handles_zero_total(self):
        """Should return 0 pages when total is 0."""
        assert page_count(0, 10) == 0


class TestPageResult:
    """Tests for PageResult dataclass."""

    def test_empty_page(self):
        result = PageResult.empty(20)

        assert result.items == []
        assert result.page_size == 20
        assert result.page_count == 0
        assert result.is_first
        assert result.is_empty

    def test_is_last(self):
        result = PageResult(items=["a"], page_index=2, page_count=3, total_count=21, page_size=10)

        assert result.is_last
        assert not result.is_first

    def test_with_items_holds_whole_collection_on_one_page(self):
        """Should report one page for a non-empty client-held list."""
        result = PageResult.empty(10).with_items(["a", "b"], total_count=2)

        assert result.items == ["a", "b"]
        assert result.page_count == 1
        assert result.total_count == 2

        assert result.with_items([], total_count=0).page_count == 0
