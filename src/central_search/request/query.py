"""Query model rendered into the service's query language."""

from dataclasses import dataclass
from urllib.parse import quote_plus

MATCH_ALL = "*:*"
CONJUNCTION = " AND "

# Field name -> clause prefix, in rendering order
CLAUSE_PREFIXES: tuple[tuple[str, str], ...] = (
    ("group_id", "g:"),
    ("artifact_id", "a:"),
    ("version", "v:"),
    ("tags", "tags:"),
    ("sha1", "1:"),
    ("class_name", "c:"),
    ("fully_qualified_class_name", "fc:"),
    ("packaging", "p:"),
    ("classifier", "l:"),
)


@dataclass
class Query:
    """A single search predicate.

    Every field is optional; an empty string means the field is unset and
    contributes no clause. ``custom_query`` is an advanced clause that, when
    set, replaces all other fields.

    Values are not escaped for the query grammar. Callers must sanitize
    metacharacters themselves.
    """

    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    tags: str = ""
    sha1: str = ""
    class_name: str = ""
    fully_qualified_class_name: str = ""
    packaging: str = ""
    classifier: str = ""
    custom_query: str = ""

    def set_group_id(self, group_id: str) -> "Query":
        self.group_id = group_id
        return self

    def set_artifact_id(self, artifact_id: str) -> "Query":
        self.artifact_id = artifact_id
        return self

    def set_version(self, version: str) -> "Query":
        self.version = version
        return self

    def set_tags(self, tags: str) -> "Query":
        self.tags = tags
        return self

    def set_sha1(self, sha1: str) -> "Query":
        self.sha1 = sha1
        return self

    def set_class_name(self, class_name: str) -> "Query":
        self.class_name = class_name
        return self

    def set_fully_qualified_class_name(self, fully_qualified_class_name: str) -> "Query":
        self.fully_qualified_class_name = fully_qualified_class_name
        return self

    def set_packaging(self, packaging: str) -> "Query":
        self.packaging = packaging
        return self

    def set_classifier(self, classifier: str) -> "Query":
        self.classifier = classifier
        return self

    def set_custom_query(self, query: str) -> "Query":
        """Set a raw advanced clause that overrides the coordinate fields."""
        self.custom_query = query
        return self

    def is_empty(self) -> bool:
        """True when no field would contribute a clause."""
        if self.custom_query:
            return False
        return not any(getattr(self, name) for name, _ in CLAUSE_PREFIXES)

    def render(self) -> str:
        """Render the predicate in the service's query language.

        Returns:
            The custom query if set, otherwise the non-empty field clauses
            joined with ``AND``, or ``*:*`` when nothing is set
        """
        if self.custom_query:
            return self.custom_query

        clauses = [
            f"{prefix}{getattr(self, name)}"
            for name, prefix in CLAUSE_PREFIXES
            if getattr(self, name)
        ]
        return CONJUNCTION.join(clauses) if clauses else MATCH_ALL

    def to_request_param_value(self) -> str:
        """Render and URL-encode the predicate for the ``q`` parameter."""
        return quote_plus(self.render(), safe="*:")
