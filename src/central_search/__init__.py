"""Query builder and response decoder for the Maven Central search service."""

from central_search.config import Settings, configure_logging, get_settings
from central_search.errors import DecodeError, SearchError, TransportError
from central_search.request import (
    AdvancedSearchOptions,
    Query,
    SearchRequest,
    build_select_url,
    make_dependency_query,
    make_license_query,
)
from central_search.response import (
    Artifact,
    FacetCounts,
    SearchResponse,
    Version,
    decode_error_payload,
    decode_response,
    strip_highlight_markers,
)

__all__ = [
    "AdvancedSearchOptions",
    "Artifact",
    "DecodeError",
    "FacetCounts",
    "Query",
    "SearchError",
    "SearchRequest",
    "SearchResponse",
    "Settings",
    "TransportError",
    "Version",
    "build_select_url",
    "configure_logging",
    "decode_error_payload",
    "decode_response",
    "get_settings",
    "make_dependency_query",
    "make_license_query",
    "strip_highlight_markers",
]
