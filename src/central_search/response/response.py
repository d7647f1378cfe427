"""Response envelope of the select handler, generic over the document shape."""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from central_search.errors import DecodeError
from central_search.response.documents import SearchDocument, SearchDocumentModel, drop_null_fields

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", bound=SearchDocumentModel)

PREVIEW_LENGTH = 200


class ResponseHeader(BaseModel):
    """Status, timing and the parameters echoed back by the service."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: int = 0
    q_time: int = Field(default=0, alias="QTime")
    params: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        return drop_null_fields(data)


class ResponseBody(BaseModel, Generic[DocT]):
    """One page of matching documents, in the order the service returned them."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    num_found: int = Field(default=0, alias="numFound")
    start: int = 0
    docs: list[DocT] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        return drop_null_fields(data)


class FacetCounts(BaseModel):
    """Facet counts block.

    ``facet_fields`` values alternate between a term and its count, e.g.
    ``["org.apache", 30, "com.google", 25]``.
    """

    model_config = ConfigDict(frozen=True)

    facet_fields: dict[str, list[Any]] = Field(default_factory=dict)
    facet_queries: dict[str, int] = Field(default_factory=dict)
    facet_dates: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        return drop_null_fields(data)


class SearchResponse(BaseModel, Generic[DocT]):
    """Decoded search response.

    ``facet_counts`` and ``highlighting`` are None when the service did not
    return them, which means the feature was not requested.

    ``highlighting`` maps document id -> field name -> fragments.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    response_header: ResponseHeader = Field(alias="responseHeader")
    response_body: ResponseBody[DocT] = Field(alias="response")
    facet_counts: FacetCounts | None = None
    highlighting: dict[str, dict[str, list[str]]] | None = None

    @property
    def docs(self) -> list[DocT]:
        return self.response_body.docs

    @property
    def num_found(self) -> int:
        return self.response_body.num_found

    @property
    def has_facets(self) -> bool:
        return self.facet_counts is not None

    @property
    def has_highlighting(self) -> bool:
        return self.highlighting is not None

    def highlights_for(self, doc: SearchDocument) -> dict[str, list[str]] | None:
        """Get the highlighted fields of a document, keyed by its id as returned."""
        if self.highlighting is None:
            return None
        return self.highlighting.get(doc.id)

    def highlighted_field(self, doc: SearchDocument, field_name: str) -> list[str]:
        """Get the fragments of one highlighted field, or an empty list."""
        highlights = self.highlights_for(doc)
        if not highlights:
            return []
        return highlights.get(field_name, [])

    def facet_values(self, field_name: str) -> list[tuple[str, int]]:
        """Pair up the alternating term/count list of a facet field.

        Returns:
            (term, count) tuples in service order; empty when the field or the
            facet block is absent
        """
        if self.facet_counts is None:
            return []
        values = self.facet_counts.facet_fields.get(field_name, [])
        return [(str(term), int(count)) for term, count in zip(values[0::2], values[1::2])]

    def facet_query_count(self, query: str) -> int | None:
        """Get the count of a facet query, or None if it was not returned."""
        if self.facet_counts is None:
            return None
        return self.facet_counts.facet_queries.get(query)


def _preview(raw: Any) -> str:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    text = raw if isinstance(raw, str) else repr(raw)
    return text[:PREVIEW_LENGTH]


def decode_response(
    raw: str | bytes | dict[str, Any],
    doc_type: type[DocT],
) -> SearchResponse[DocT]:
    """Decode a raw select response into a typed envelope.

    The document shape is chosen by the caller; it is never detected from
    the payload.

    Args:
        raw: JSON text or an already parsed JSON object
        doc_type: Document model, e.g. ``Artifact`` or ``Version``

    Returns:
        SearchResponse parameterized with ``doc_type``

    Raises:
        DecodeError: If the payload is not valid JSON, is not an object, lacks
            ``responseHeader`` or ``response``, or has mistyped fields
    """
    model = SearchResponse[doc_type]
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            result = model.model_validate_json(raw)
        else:
            result = model.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            f"Failed to decode {doc_type.__name__} response: {exc.error_count()} validation error(s)"
        )
        raise DecodeError(
            f"Invalid {doc_type.__name__} search response: {exc}",
            payload_preview=_preview(raw),
        ) from exc

    logger.debug(
        f"Decoded {len(result.docs)} {doc_type.__name__} docs "
        f"(numFound={result.num_found}, facets={result.has_facets}, "
        f"highlighting={result.has_highlighting})"
    )
    return result
