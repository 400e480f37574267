"""
Page/limit handling for listing endpoints.
"""

import math
from dataclasses import dataclass

from fastapi import Query

from app.core.config import get_settings

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Pager:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def metadata(self, total: int) -> dict:
        """Pagination block; total is the count for the whole filter."""
        return {
            "currentPage": self.page,
            "totalPages": math.ceil(total / self.limit),
            "totalItems": total,
            "itemsPerPage": self.limit,
        }


def make_pager(page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT, max_limit: int = None) -> Pager:
    """Build a pager, clamping limit to the configured maximum."""
    max_limit = max_limit or get_settings().max_page_limit
    return Pager(page=page, limit=min(limit, max_limit))


async def get_pager(
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number, starting at 1"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, description="Items per page (capped)"),
) -> Pager:
    """Pagination parameters dependency."""
    return make_pager(page, limit)
