"""Custom exceptions for the yelp_search package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .distance import Distance


class YelpSearchError(Exception):
    """Base exception for all yelp_search errors."""


class ConfigurationError(YelpSearchError):
    """Raised when the client settings are invalid or incomplete."""


class YelpApiError(YelpSearchError):
    """Raised when the API cannot be reached or answers with an error status.

    Attributes:
        status_code: HTTP status of the failed response, None for connection errors.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CriteriaValidationError(YelpSearchError, ValueError):
    """Raised when a search criteria mutator receives a value the API rejects."""


class TooManyResults(CriteriaValidationError):
    """Raised when more results per page are requested than the API allows."""

    @classmethod
    def requested(cls, limit: int) -> TooManyResults:
        return cls(f"too many results: cannot request {limit} results, the maximum is 50")


class AreaTooLarge(CriteriaValidationError):
    """Raised when the search radius is bigger than the largest one allowed."""

    @classmethod
    def with_a_distance_of(cls, distance: Distance) -> AreaTooLarge:
        return cls(f"area too large: {distance} exceeds the maximum radius of 40000 meters")


class IncompatibleCriteria(CriteriaValidationError):
    """Raised when mutually exclusive parameters are combined."""

    @classmethod
    def mixing(cls, present: str, requested: str) -> IncompatibleCriteria:
        return cls(f"incompatible: {present} vs {requested}")
