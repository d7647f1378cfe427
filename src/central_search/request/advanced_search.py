"""Advanced search options and clause helpers."""

from dataclasses import dataclass

from central_search.request.query import Query


@dataclass
class AdvancedSearchOptions:
    """Full Maven coordinate filter for an advanced search."""

    group_id: str = ""
    artifact_id: str = ""
    version: str = ""
    packaging: str = ""
    classifier: str = ""

    def set_group_id(self, group_id: str) -> "AdvancedSearchOptions":
        self.group_id = group_id
        return self

    def set_artifact_id(self, artifact_id: str) -> "AdvancedSearchOptions":
        self.artifact_id = artifact_id
        return self

    def set_version(self, version: str) -> "AdvancedSearchOptions":
        self.version = version
        return self

    def set_packaging(self, packaging: str) -> "AdvancedSearchOptions":
        self.packaging = packaging
        return self

    def set_classifier(self, classifier: str) -> "AdvancedSearchOptions":
        self.classifier = classifier
        return self

    def to_query(self) -> Query:
        """Build a fresh Query holding only the coordinates that are set."""
        query = Query()
        if self.group_id:
            query.set_group_id(self.group_id)
        if self.artifact_id:
            query.set_artifact_id(self.artifact_id)
        if self.version:
            query.set_version(self.version)
        if self.packaging:
            query.set_packaging(self.packaging)
        if self.classifier:
            query.set_classifier(self.classifier)
        return query


def make_dependency_query(group_id: str, artifact_id: str) -> str:
    """Build a dependency clause for artifacts depending on a coordinate.

    Args:
        group_id: Group ID of the dependency, may be empty
        artifact_id: Artifact ID of the dependency, may be empty

    Returns:
        ``d:<g>:<a>``, ``d:<g>``, ``d:*:<a>``, or an empty string when
        both are empty. An empty result means "no clause", not a query.
    """
    if group_id and artifact_id:
        return f"d:{group_id}:{artifact_id}"
    if group_id:
        return f"d:{group_id}"
    if artifact_id:
        return f"d:*:{artifact_id}"
    return ""


def make_license_query(license: str) -> str:
    """Build a license clause. An empty license yields ``l:`` as-is."""
    return f"l:{license}"
