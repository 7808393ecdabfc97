"""Pagination over the results of a search."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yelp_search.search.criteria import SearchCriteria


class Pagination:
    """Pages of a search whose total number of results is known.

    The total usually comes from the response to a previous request made with the
    same criteria. Pages are 1-indexed. Pages past `total_pages` are not rejected;
    the API answers them with no businesses.

    Attributes:
        limit: Number of results per page.
        offset: Offset of the criteria the pagination was created from.
        total: Total number of results of the search.
        current_page: Page the criteria's offset falls into.
        total_pages: Number of pages needed to show every result.
    """

    def __init__(self, criteria: SearchCriteria, total: int) -> None:
        if total < 0:
            raise ValueError(f"Total cannot be negative, got {total}")

        self._criteria = criteria._copy()
        self.limit = criteria.limit()
        self.offset = criteria.offset()
        self.total = total
        self.current_page = self.offset // self.limit + 1
        self.total_pages = math.ceil(total / self.limit)

    @classmethod
    def from_search(cls, criteria: SearchCriteria, total: int) -> Pagination:
        return cls(criteria, total)

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def next_page(self) -> int | None:
        return self.current_page + 1 if self.has_next_page else None

    @property
    def previous_page(self) -> int | None:
        return self.current_page - 1 if self.has_previous_page else None

    def criteria_for_page(self, page: int) -> SearchCriteria:
        """Return a copy of the criteria with its offset moved to `page`.

        Raises:
            ValueError: If `page` is lower than 1.
        """
        if page < 1:
            raise ValueError(f"Pages start at 1, got {page}")
        return self._criteria._copy().offset((page - 1) * self.limit)

    def query_string_for_page(self, page: int) -> str:
        """Render the query string of a 1-indexed page."""
        return self.criteria_for_page(page).to_query_string()

    def __repr__(self) -> str:
        return (
            f"Pagination(page={self.current_page}/{self.total_pages}, "
            f"limit={self.limit}, total={self.total})"
        )
