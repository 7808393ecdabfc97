"""Rendering of search parameters as URL query strings."""

from __future__ import annotations

import urllib.parse
from collections.abc import Mapping


def encode(parameters: Mapping[str, str]) -> str:
    """Encode parameters as a query string, including the leading "?".

    Values are form-encoded: spaces become "+" and reserved characters such as
    "," are percent-encoded. Keys keep the order of `parameters`.

    Args:
        parameters: Already stringified parameter values, by name.

    Returns:
        The query string, or an empty string when there are no parameters.
    """
    if not parameters:
        return ""
    return "?" + urllib.parse.urlencode(parameters)


class QueryString:
    """A set of search parameters bound to a page size.

    The page size is needed to rewrite the offset when rendering a specific page.

    Attributes:
        limit: Number of results per page.
    """

    def __init__(self, parameters: Mapping[str, str], limit: int) -> None:
        self._parameters = dict(parameters)
        self.limit = limit

    @classmethod
    def build(cls, parameters: Mapping[str, str], limit: int) -> QueryString:
        return cls(parameters, limit)

    def offset_for_page(self, page: int) -> int:
        """Return the offset of the first result of a 1-indexed page.

        Raises:
            ValueError: If `page` is lower than 1.
        """
        if page < 1:
            raise ValueError(f"Pages start at 1, got {page}")
        return (page - 1) * self.limit

    def for_page(self, page: int) -> str:
        """Render the parameters with the offset of `page`."""
        parameters = dict(self._parameters)
        parameters["offset"] = str(self.offset_for_page(page))
        return encode(parameters)

    def __str__(self) -> str:
        return encode(self._parameters)

    def __repr__(self) -> str:
        return f"QueryString({self._parameters!r}, limit={self.limit})"
