"""Search request builder rendering the select handler's parameter string."""

import logging
from dataclasses import dataclass, field

from central_search.request.query import Query

logger = logging.getLogger(__name__)

SEARCH_REQUEST_LIMIT_MAX = 200


@dataclass
class SearchRequest:
    """One search request: query, pagination, sorting, faceting and extras.

    Every mutator returns the same instance so calls can be chained. None of
    them validate input; a negative ``start`` or ``limit`` is rendered as-is.

    Attributes:
        start: Offset of the first row to return
        limit: Maximum number of rows (the service caps this at 200)
        query: Predicate rendered into ``q``
        core: Target core, e.g. ``gav`` for per-version documents
        sort_field: Field to sort by; no sort is emitted when empty
        sort_ascending: Sort direction, only meaningful with ``sort_field``
        facet_enabled: Whether facet counts are requested
        facet_fields: Fields to facet on, rendered in order
        query_key: Opaque tag for correlating batched requests; never rendered
        custom_params: Extra parameters appended last
    """

    start: int = 0
    limit: int = SEARCH_REQUEST_LIMIT_MAX
    query: Query = field(default_factory=Query)
    core: str = ""
    sort_field: str = ""
    sort_ascending: bool = True
    facet_enabled: bool = False
    facet_fields: list[str] = field(default_factory=list)
    query_key: str = ""
    custom_params: dict[str, str] = field(default_factory=dict)

    def set_start(self, start: int) -> "SearchRequest":
        self.start = start
        return self

    def set_limit(self, limit: int) -> "SearchRequest":
        self.limit = limit
        return self

    def set_query(self, query: Query) -> "SearchRequest":
        self.query = query
        return self

    def set_core(self, core: str) -> "SearchRequest":
        self.core = core
        return self

    def set_sort(self, field_name: str, ascending: bool = True) -> "SearchRequest":
        """Set the sort field and direction."""
        self.sort_field = field_name
        self.sort_ascending = ascending
        return self

    def set_sort_ascending(self, ascending: bool) -> "SearchRequest":
        """Change only the sort direction."""
        self.sort_ascending = ascending
        return self

    def enable_facet(self, *fields: str) -> "SearchRequest":
        """Request facet counts, replacing any previously set facet fields."""
        self.facet_enabled = True
        self.facet_fields = list(fields)
        return self

    def disable_facet(self) -> "SearchRequest":
        self.facet_enabled = False
        self.facet_fields = []
        return self

    def set_query_key(self, key: str) -> "SearchRequest":
        """Tag the request so a caller can match it to its batched result."""
        self.query_key = key
        return self

    def add_custom_param(self, key: str, value: str) -> "SearchRequest":
        """Add an extra parameter; a repeated key overwrites the earlier value."""
        self.custom_params[key] = value
        return self

    def enable_highlighting(self, *fields: str, snippets: int | None = None) -> "SearchRequest":
        """Request highlighted fragments through the custom parameters.

        Args:
            fields: Fields to highlight, e.g. ``fch`` for class names
            snippets: Maximum fragments per field
        """
        self.add_custom_param("hl", "true")
        if fields:
            self.add_custom_param("hl.fl", ",".join(fields))
        if snippets is not None:
            self.add_custom_param("hl.snippets", str(snippets))
        return self

    def to_request_params(self) -> str:
        """Render the encoded parameter string.

        Parameters are emitted in a fixed order: ``q``, ``rows``, ``wt``,
        ``start``, then ``core``, ``sort``, facet parameters and finally the
        custom parameters. Mandatory parameters never come from the custom
        bag, so a custom key such as ``wt`` appears a second time.

        Returns:
            Parameter string without a leading ``?``
        """
        parts = [
            f"q={self.query.to_request_param_value()}",
            f"rows={self.limit}",
            "wt=json",
            f"start={self.start}",
        ]

        if self.core:
            parts.append(f"core={self.core}")

        if self.sort_field:
            direction = "asc" if self.sort_ascending else "desc"
            parts.append(f"sort={self.sort_field}+{direction}")

        if self.facet_enabled:
            parts.append("facet=true")
            for facet_field in self.facet_fields:
                parts.append(f"facet.field={facet_field}")

        for key, value in self.custom_params.items():
            parts.append(f"{key}={value}")

        params = "&".join(parts)
        logger.debug(f"Rendered search request params: {params}")
        return params
