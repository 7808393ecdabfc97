"""HTTP client for the business search API.

This module provides the YelpClient class which sends search criteria to the API
and returns the decoded JSON responses. It performs no retries and no caching.
"""

from __future__ import annotations

import logging
import urllib.parse
from types import TracebackType
from typing import Any

import requests

from yelp_search.config import ApiSettings
from yelp_search.exceptions import ConfigurationError, YelpApiError
from yelp_search.search.criteria import SearchCriteria
from yelp_search.search.pagination import Pagination

logger = logging.getLogger(__name__)


class YelpClient:
    """Sends requests to the business search, lookup and reviews endpoints.

    Attributes:
        settings (ApiSettings): API connection settings.
        session (requests.Session): Session carrying the authentication headers.
    """

    def __init__(self, settings: ApiSettings, session: requests.Session | None = None) -> None:
        """Initialize the client.

        Args:
            settings: API connection settings, including the API key.
            session: Optional session to reuse. A new one is created otherwise.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if not settings.api_key:
            raise ConfigurationError("An API key is required, set YELP_API__API_KEY")

        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update(settings.headers)

    def search(self, criteria: SearchCriteria) -> dict[str, Any]:
        """Search businesses matching the criteria.

        Args:
            criteria: The search to run.

        Returns:
            The decoded response, with the `businesses`, `total` and `region` keys.
        """
        params: dict[str, str] = {}
        criteria.add_query_parameters_to(params)
        return self._get("/businesses/search", params)

    def search_page(self, criteria: SearchCriteria, page: int) -> dict[str, Any]:
        """Search a 1-indexed page of results, leaving `criteria` untouched."""
        return self.search(criteria.pagination(0).criteria_for_page(page))

    def pagination(self, criteria: SearchCriteria, response: dict[str, Any]) -> Pagination:
        """Build the pagination of a search from the response it produced."""
        return criteria.pagination(int(response.get("total", 0)))

    def business(self, business_id: str) -> dict[str, Any]:
        """Look up a business by its ID or alias."""
        return self._get(f"/businesses/{_quote(business_id)}")

    def reviews(self, business_id: str, locale: str | None = None) -> dict[str, Any]:
        """Fetch review excerpts for a business.

        Args:
            business_id: ID or alias of the business.
            locale: Optional language of the reviews, e.g. "es-MX".

        Returns:
            The decoded response, with the `reviews` and `total` keys.
        """
        params = {"locale": locale.replace("_", "-")} if locale else None
        return self._get(f"/businesses/{_quote(business_id)}/reviews", params)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> YelpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        url = f"{self.settings.base_url}{path}"
        logger.info(f"GET {path} with params {params or {}}")
        try:
            response = self.session.get(url, params=params, timeout=self.settings.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exception:
            status_code = exception.response.status_code if exception.response is not None else None
            logger.error(f"API request to '{path}' failed with status {status_code}: {exception}")
            raise YelpApiError(f"Request to {path} failed: {exception}", status_code) from exception
        except requests.JSONDecodeError as exception:
            logger.error(f"API response from '{path}' is not valid JSON: {exception}")
            raise YelpApiError(
                f"Invalid JSON from {path}: {exception}", response.status_code
            ) from exception
        except requests.RequestException as exception:
            logger.error(f"Could not reach the API at '{url}': {exception}")
            raise YelpApiError(f"Could not reach {url}: {exception}") from exception


def _quote(business_id: str) -> str:
    """Escape a business ID so it stays a single path segment."""
    return urllib.parse.quote(business_id, safe="")
