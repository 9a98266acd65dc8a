"""
tests/unit/test_pagination.py

Unit tests for eventrooms.models.schemas.pagination.PagedResult.build.

Coverage
--------
  - total_pages is ceil(total_count / page_size)
  - has_previous_page / has_next_page at the first, middle and last page
  - empty result sets and pages past the end keep count metadata
"""
from __future__ import annotations

import pytest

from eventrooms.models.schemas.pagination import PagedResult


class TestTotalPages:
    @pytest.mark.parametrize(
        ("total_count", "page_size", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (25, 1, 25)],
    )
    def test_ceil_division(self, total_count: int, page_size: int, expected: int) -> None:
        page = PagedResult.build([], page_index=1, page_size=page_size, total_count=total_count)
        assert page.total_pages == expected


class TestNavigationFlags:
    def test_first_of_three_pages(self) -> None:
        page = PagedResult.build(list(range(10)), page_index=1, page_size=10, total_count=25)
        assert page.has_previous_page is False
        assert page.has_next_page is True

    def test_middle_page(self) -> None:
        page = PagedResult.build(list(range(10)), page_index=2, page_size=10, total_count=25)
        assert page.has_previous_page is True
        assert page.has_next_page is True

    def test_last_page(self) -> None:
        page = PagedResult.build(list(range(5)), page_index=3, page_size=10, total_count=25)
        assert page.has_previous_page is True
        assert page.has_next_page is False

    def test_single_page(self) -> None:
        page = PagedResult.build([1, 2], page_index=1, page_size=10, total_count=2)
        assert page.has_previous_page is False
        assert page.has_next_page is False


class TestEmptyPages:
    def test_no_matches(self) -> None:
        page = PagedResult.build([], page_index=1, page_size=10, total_count=0)
        assert page.items == []
        assert page.total_count == 0
        assert page.total_pages == 0
        assert page.has_next_page is False
        assert page.has_previous_page is False

    def test_no_matches_on_later_page_has_previous(self) -> None:
        page = PagedResult.build([], page_index=4, page_size=10, total_count=0)
        assert page.has_previous_page is True
        assert page.has_next_page is False

    def test_page_past_end_keeps_metadata(self) -> None:
        page = PagedResult.build([], page_index=7, page_size=10, total_count=25)
        assert page.items == []
        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.has_next_page is False


class TestSerialisation:
    def test_dump_has_expected_keys(self) -> None:
        page = PagedResult.build([1], page_index=1, page_size=5, total_count=1)
        assert set(page.model_dump()) == {
            "items",
            "page_index",
            "page_size",
            "total_count",
            "total_pages",
            "has_previous_page",
            "has_next_page",
        }
