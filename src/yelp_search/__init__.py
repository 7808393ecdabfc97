"""Typed client for a business search API."""

from .client.yelp import YelpClient
from .config import ApiSettings, LoggingSettings, Settings, get_settings
from .distance import Distance, UnitOfLength
from .exceptions import (
    AreaTooLarge,
    ConfigurationError,
    CriteriaValidationError,
    IncompatibleCriteria,
    TooManyResults,
    YelpApiError,
    YelpSearchError,
)
from .logger import configure_logging
from .models import Coordinates, PricingLevel
from .search import Attribute, Pagination, QueryString, SearchCriteria, SortingMode

__all__ = [
    "ApiSettings",
    "AreaTooLarge",
    "Attribute",
    "ConfigurationError",
    "Coordinates",
    "CriteriaValidationError",
    "Distance",
    "IncompatibleCriteria",
    "LoggingSettings",
    "Pagination",
    "PricingLevel",
    "QueryString",
    "SearchCriteria",
    "Settings",
    "SortingMode",
    "TooManyResults",
    "UnitOfLength",
    "YelpApiError",
    "YelpClient",
    "YelpSearchError",
    "configure_logging",
    "get_settings",
]
