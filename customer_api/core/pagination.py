"""Pagination Policy — limit/page query inputs → limit/skip for the store.

Invariants:
    - Absent limit → 12, absent page → 1
    - skip = (page - 1) * limit
    - Zero/negative limit and page < 1 pass through unchanged (permissive policy)
    - skip is never negative: MongoDB's skip is unsigned, so a negative product
      raises PaginationError instead of reaching the driver
    - limit and skip both fit a signed 64-bit integer (BSON int64); larger
      values raise PaginationError
"""

from typing import NamedTuple

from customer_api.core.errors import PaginationError

DEFAULT_LIMIT = 12
DEFAULT_PAGE = 1

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Page(NamedTuple):
    limit: int
    skip: int


def resolve(limit: int | None = None, page: int | None = None) -> Page:
    """Derive the effective limit and zero-based skip count."""
    effective_limit = DEFAULT_LIMIT if limit is None else limit
    effective_page = DEFAULT_PAGE if page is None else page
    skip = (effective_page - 1) * effective_limit
    if skip < 0:
        raise PaginationError(
            effective_limit, effective_page, "gives a negative offset",
        )
    if not INT64_MIN <= effective_limit <= INT64_MAX or skip > INT64_MAX:
        raise PaginationError(
            effective_limit, effective_page, "exceeds the 64-bit range",
        )
    return Page(effective_limit, skip)
