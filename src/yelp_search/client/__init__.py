"""HTTP client package for yelp_search."""

from .yelp import YelpClient

__all__ = ["YelpClient"]
