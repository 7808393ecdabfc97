"""Search criteria builder.

A `SearchCriteria` accumulates the parameters of a business search. Every mutator
validates its input as soon as it is called, so an invalid search fails before any
request is sent, and returns the criteria itself so calls can be chained::

    criteria = (
        SearchCriteria.by_location("San Antonio")
        .with_term("restaurants")
        .within_a_radius_of(Distance.in_miles(2))
        .limit(5)
    )
    criteria.to_query_string()
"""

from __future__ import annotations

import logging
import operator
from collections.abc import MutableMapping
from datetime import datetime
from typing import overload

from yelp_search.distance import Distance, UnitOfLength
from yelp_search.exceptions import AreaTooLarge, IncompatibleCriteria, TooManyResults
from yelp_search.models import Coordinates, PricingLevel
from yelp_search.search.options import Attribute, SortingMode
from yelp_search.search.pagination import Pagination
from yelp_search.search.query_string import QueryString

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0
MAX_LIMIT = 50


class SearchCriteria:
    """Parameters of a business search.

    A search is centered either on a free-text location or on a pair of coordinates.
    The choice is made by the factory used to create the criteria and cannot be
    changed afterwards.

    Create instances with `by_location`, `by_coordinates` or `by_point`; the
    constructor only takes keyword-only private arguments.
    """

    def __init__(self, *, _parameters: dict[str, str]) -> None:
        self._parameters = dict(_parameters)

    @classmethod
    def _from_parameters(cls, parameters: dict[str, str]) -> SearchCriteria:
        return cls(_parameters=parameters)

    @classmethod
    def by_location(cls, location: str) -> SearchCriteria:
        """Search around a free-text location, e.g. "San Antonio" or an address."""
        return cls._from_parameters({"location": location})

    @classmethod
    def by_coordinates(cls, latitude: float, longitude: float) -> SearchCriteria:
        """Search around a point.

        Raises:
            pydantic.ValidationError: If the coordinates are out of range.
        """
        return cls.by_point(Coordinates(latitude=latitude, longitude=longitude))

    @classmethod
    def by_point(cls, coordinates: Coordinates) -> SearchCriteria:
        return cls._from_parameters(
            {
                "latitude": str(coordinates.latitude),
                "longitude": str(coordinates.longitude),
            }
        )

    @overload
    def limit(self) -> int: ...

    @overload
    def limit(self, limit: int) -> SearchCriteria: ...

    def limit(self, limit: int | None = None) -> SearchCriteria | int:
        """Set the number of results per page, or return it when called without arguments.

        Args:
            limit: Number of results per page, at most 50.

        Returns:
            The criteria when setting a value, otherwise the current page size
            (20 unless set).

        Raises:
            TooManyResults: If `limit` is bigger than 50.
            ValueError: If `limit` is lower than 1.
            TypeError: If `limit` is not an integer.
        """
        if limit is None:
            return int(self._parameters.get("limit", DEFAULT_LIMIT))

        limit = operator.index(limit)
        if limit > MAX_LIMIT:
            logger.debug("Rejected limit of %s results", limit)
            raise TooManyResults.requested(limit)
        if limit < 1:
            raise ValueError(f"At least one result must be requested, got {limit}")

        self._parameters["limit"] = str(limit)
        return self

    @overload
    def offset(self) -> int: ...

    @overload
    def offset(self, offset: int) -> SearchCriteria: ...

    def offset(self, offset: int | None = None) -> SearchCriteria | int:
        """Set how many results to skip, or return it when called without arguments.

        Raises:
            ValueError: If `offset` is negative.
            TypeError: If `offset` is not an integer.
        """
        if offset is None:
            return int(self._parameters.get("offset", DEFAULT_OFFSET))

        offset = operator.index(offset)
        if offset < 0:
            raise ValueError(f"Offset cannot be negative, got {offset}")

        self._parameters["offset"] = str(offset)
        return self

    def sort_by(self, mode: SortingMode) -> SearchCriteria:
        self._parameters["sort_by"] = mode.token
        return self

    def with_term(self, term: str) -> SearchCriteria:
        """Restrict the search to a term, e.g. "food" or a business name."""
        self._parameters["term"] = term
        return self

    def within_a_radius_of(self, distance: Distance) -> SearchCriteria:
        """Restrict the search to a radius around its center.

        The radius is sent in whole meters, dropping the fractional part.

        Args:
            distance: The radius, in any unit, up to 40000 meters.

        Raises:
            AreaTooLarge: If `distance` is bigger than `Distance.largest()`.
        """
        if distance.bigger_than(Distance.largest()):
            logger.debug("Rejected search radius of %s", distance)
            raise AreaTooLarge.with_a_distance_of(distance)

        self._parameters["radius"] = str(int(distance.convert_to(UnitOfLength.METERS).value))
        return self

    def open_now(self) -> SearchCriteria:
        """Only return businesses open at the time of the request.

        Raises:
            IncompatibleCriteria: If `open_at` was already set.
        """
        if "open_at" in self._parameters:
            raise IncompatibleCriteria.mixing("open_at", "open_now")

        self._parameters["open_now"] = "true"
        return self

    def open_at(self, timestamp: int | datetime) -> SearchCriteria:
        """Only return businesses open at a given time.

        Args:
            timestamp: Unix time in seconds, or a datetime. Naive datetimes are
                interpreted in local time.

        Raises:
            IncompatibleCriteria: If `open_now` was already set.
            TypeError: If `timestamp` is neither an integer nor a datetime.
        """
        if "open_now" in self._parameters:
            raise IncompatibleCriteria.mixing("open_now", "open_at")

        if isinstance(timestamp, datetime):
            seconds = int(timestamp.timestamp())
        else:
            seconds = operator.index(timestamp)

        self._parameters["open_at"] = str(seconds)
        return self

    def in_categories(self, categories: str) -> SearchCriteria:
        """Restrict the search to a comma separated list of category aliases.

        Example: "bars,french".
        """
        self._parameters["categories"] = categories
        return self

    def with_pricing(self, *levels: PricingLevel) -> SearchCriteria:
        """Restrict the search to one or more pricing levels.

        Raises:
            ValueError: If no level is given.
        """
        if not levels:
            raise ValueError("At least one pricing level is required")

        self._parameters["price"] = ",".join(level.code for level in levels)
        return self

    def with_attributes(self, *attributes: Attribute) -> SearchCriteria:
        """Restrict the search to businesses with all the given attributes.

        Raises:
            ValueError: If no attribute is given.
        """
        if not attributes:
            raise ValueError("At least one attribute is required")

        self._parameters["attributes"] = Attribute.join(*attributes)
        return self

    def with_locale(self, locale: str) -> SearchCriteria:
        """Set the language and region of the results, e.g. "es-MX" or "es_MX".

        Raises:
            ValueError: If `locale` is blank.
        """
        tag = locale.strip().replace("_", "-")
        if not tag:
            raise ValueError("Locale cannot be blank")

        self._parameters["locale"] = tag
        return self

    def pagination(self, total: int) -> Pagination:
        """Return the pagination of a search that found `total` businesses."""
        return Pagination.from_search(self, total)

    def to_query_string(self) -> str:
        return str(self._query_string())

    def query_string_for_page(self, page: int) -> str:
        """Render the query string of a 1-indexed page of this search."""
        return self._query_string().for_page(page)

    def query_parameters(self) -> dict[str, str]:
        """Return a copy of the parameters set so far."""
        return dict(self._parameters)

    def add_query_parameters_to(self, builder: MutableMapping[str, str]) -> None:
        """Copy the parameters into a mapping, e.g. the `params` of an HTTP request."""
        builder.update(self._parameters)

    def _query_string(self) -> QueryString:
        return QueryString.build(self._parameters, self.limit())

    def _copy(self) -> SearchCriteria:
        return SearchCriteria._from_parameters(self._parameters)

    __copy__ = _copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchCriteria):
            return NotImplemented
        return self._parameters == other._parameters

    def __repr__(self) -> str:
        return f"SearchCriteria({self._parameters!r})"

    __str__ = __repr__
