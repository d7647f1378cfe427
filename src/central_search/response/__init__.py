"""Response decoding for the select handler."""

from central_search.response.documents import (
    Artifact,
    SearchDocument,
    SearchDocumentModel,
    Version,
)
from central_search.response.error_types import (
    APIErrorDetails,
    ErrorResponse,
    decode_error_payload,
)
from central_search.response.highlighting import (
    HIGHLIGHT_POST,
    HIGHLIGHT_PRE,
    strip_highlight_fragments,
    strip_highlight_markers,
)
from central_search.response.response import (
    FacetCounts,
    ResponseBody,
    ResponseHeader,
    SearchResponse,
    decode_response,
)

__all__ = [
    "APIErrorDetails",
    "Artifact",
    "ErrorResponse",
    "FacetCounts",
    "HIGHLIGHT_POST",
    "HIGHLIGHT_PRE",
    "ResponseBody",
    "ResponseHeader",
    "SearchDocument",
    "SearchDocumentModel",
    "SearchResponse",
    "Version",
    "decode_error_payload",
    "decode_response",
    "strip_highlight_fragments",
    "strip_highlight_markers",
]
