"""
livecomponents Kernel -- Pagination arithmetic tests
"""

import math

import pytest

from livecomponents.kernel.pagination import clamp_page, page_bounds, total_pages


class TestTotalPages:
    @pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 25, 100])
    @pytest.mark.parametrize("page_size", [1, 3, 10, 25])
    def test_matches_ceiling(self, count, page_size):
        assert total_pages(count, page_size) == max(1, math.ceil(count / page_size))

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_unpaginated_is_one_page(self, page_size):
        assert total_pages(500, page_size) == 1

    def test_empty_is_one_page(self):
        assert total_pages(0, 10) == 1


class TestClampPage:
    def test_clamps_into_range(self):
        assert clamp_page(5, 3) == 2
        assert clamp_page(-1, 3) == 0
        assert clamp_page(1, 3) == 1

    def test_zero_pages(self):
        assert clamp_page(4, 0) == 0


class TestPageBounds:
    def test_middle_and_last_pages(self):
        assert page_bounds(0, 10, 25) == (0, 10)
        assert page_bounds(2, 10, 25) == (20, 25)

    def test_past_the_end_is_empty(self):
        assert page_bounds(5, 10, 25) == (25, 25)

    def test_unpaginated_covers_everything(self):
        assert page_bounds(3, 0, 25) == (0, 25)
