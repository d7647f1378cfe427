"""Query construction for the select handler."""

from central_search.request.advanced_search import (
    AdvancedSearchOptions,
    make_dependency_query,
    make_license_query,
)
from central_search.request.endpoint import build_select_url
from central_search.request.query import MATCH_ALL, Query
from central_search.request.search_request import SEARCH_REQUEST_LIMIT_MAX, SearchRequest

__all__ = [
    "AdvancedSearchOptions",
    "MATCH_ALL",
    "Query",
    "SEARCH_REQUEST_LIMIT_MAX",
    "SearchRequest",
    "build_select_url",
    "make_dependency_query",
    "make_license_query",
]
