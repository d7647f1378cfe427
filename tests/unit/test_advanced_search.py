"""Unit tests for advanced search helpers."""

import pytest

from central_search.request.advanced_search import (
    AdvancedSearchOptions,
    make_dependency_query,
    make_license_query,
)


class TestMakeDependencyQuery:
    """Test suite for make_dependency_query."""

    @pytest.mark.parametrize(
        "group_id,artifact_id,expected",
        [
            ("org.slf4j", "slf4j-api", "d:org.slf4j:slf4j-api"),
            ("org.slf4j", "", "d:org.slf4j"),
            ("", "slf4j-api", "d:*:slf4j-api"),
            ("", "", ""),
        ],
    )
    def test_precedence(self, group_id, artifact_id, expected):
        """Test the group/artifact precedence table."""
        assert make_dependency_query(group_id, artifact_id) == expected


class TestMakeLicenseQuery:
    """Test suite for make_license_query."""

    def test_license(self):
        """Test license clause prefix."""
        assert make_license_query("Apache-2.0") == "l:Apache-2.0"

    def test_empty_license_not_guarded(self):
        """Test an empty license still yields the bare prefix."""
        assert make_license_query("") == "l:"


class TestAdvancedSearchOptions:
    """Test suite for AdvancedSearchOptions."""

    def test_to_query_copies_set_coordinates(self):
        """Test every set coordinate lands in the query."""
        options = (
            AdvancedSearchOptions()
            .set_group_id("org.apache.commons")
            .set_artifact_id("commons-lang3")
            .set_version("3.12.0")
            .set_packaging("jar")
            .set_classifier("sources")
        )

        query = options.to_query()

        assert query.render() == (
            "g:org.apache.commons AND a:commons-lang3 AND v:3.12.0 AND p:jar AND l:sources"
        )

    def test_to_query_partial(self):
        """Test unset coordinates stay unset."""
        query = AdvancedSearchOptions(artifact_id="guava").to_query()

        assert query.render() == "a:guava"
        assert query.group_id == ""

    def test_to_query_empty(self):
        """Test empty options produce a match-all query."""
        assert AdvancedSearchOptions().to_query().render() == "*:*"

    def test_to_query_returns_fresh_instance(self):
        """Test each call builds a new query."""
        options = AdvancedSearchOptions(group_id="g")

        assert options.to_query() is not options.to_query()
