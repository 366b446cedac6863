"""
livecomponents Kernel — Pagination

Page arithmetic shared by paginated components. Pages are 0-based
internally; display indices are 1-based.
"""

from __future__ import annotations

import math


def total_pages(count: int, page_size: int) -> int:
    if page_size <= 0:
        return 1
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 0), max(pages - 1, 0))


def page_bounds(page: int, page_size: int, count: int) -> tuple[int, int]:
    """0-based half-open slice [start, end) of the page within `count` rows."""
    if page_size <= 0:
        return 0, count
    start = min(page * page_size, count)
    return start, min(start + page_size, count)

