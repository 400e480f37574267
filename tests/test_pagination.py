"""
Unit tests for the pager.
"""

import pytest

from app.utils.pagination import Pager, make_pager


class TestPager:

    def test_defaults(self):
        pager = Pager()
        assert (pager.page, pager.limit, pager.offset) == (1, 10, 0)

    def test_offset(self):
        assert Pager(page=3, limit=7).offset == 14

    @pytest.mark.parametrize("total,limit,pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 4, 7)])
    def test_total_pages_is_ceiling(self, total, limit, pages):
        meta = Pager(page=1, limit=limit).metadata(total)
        assert meta == {
            "currentPage": 1,
            "totalPages": pages,
            "totalItems": total,
            "itemsPerPage": limit,
        }

    def test_limit_is_capped(self):
        assert make_pager(page=2, limit=5000, max_limit=100) == Pager(page=2, limit=100)

    def test_small_limit_untouched(self):
        assert make_pager(page=1, limit=3, max_limit=100).limit == 3
