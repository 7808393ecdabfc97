"""Search criteria, options and pagination."""

from .criteria import SearchCriteria
from .options import Attribute, SortingMode
from .pagination import Pagination
from .query_string import QueryString

__all__ = ["Attribute", "Pagination", "QueryString", "SearchCriteria", "SortingMode"]
