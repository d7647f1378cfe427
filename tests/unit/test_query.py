"""Unit tests for the query model."""

import pytest

from central_search.request.query import MATCH_ALL, Query


class TestQueryRender:
    """Test suite for Query.render."""

    def test_empty_query_renders_wildcard(self):
        """Test an empty query matches everything."""
        query = Query()

        assert query.is_empty() is True
        assert query.render() == MATCH_ALL
        assert query.render() == "*:*"

    def test_single_field(self):
        """Test a single field contributes one clause."""
        assert Query().set_group_id("org.apache.commons").render() == "g:org.apache.commons"

    def test_fields_joined_with_and(self):
        """Test multiple fields are joined in a fixed order."""
        query = (
            Query()
            .set_version("3.12.0")
            .set_artifact_id("commons-lang3")
            .set_group_id("org.apache.commons")
        )

        assert query.render() == "g:org.apache.commons AND a:commons-lang3 AND v:3.12.0"

    @pytest.mark.parametrize(
        "setter,value,expected",
        [
            ("set_tags", "json", "tags:json"),
            ("set_sha1", "35379fb6526fd019f331542b4e9ae2e566c57933", "1:35379fb6526fd019f331542b4e9ae2e566c57933"),
            ("set_class_name", "FileUtils", "c:FileUtils"),
            ("set_fully_qualified_class_name", "org.junit.Assert", "fc:org.junit.Assert"),
            ("set_packaging", "jar", "p:jar"),
            ("set_classifier", "sources", "l:sources"),
        ],
    )
    def test_clause_prefixes(self, setter, value, expected):
        """Test each field renders with its prefix."""
        query = getattr(Query(), setter)(value)

        assert query.render() == expected

    def test_empty_fields_are_skipped(self):
        """Test unset fields between set fields produce no clause."""
        query = Query(group_id="junit", artifact_id="", packaging="jar")

        assert query.render() == "g:junit AND p:jar"
        assert "a:" not in query.render()

    def test_custom_query_overrides_fields(self):
        """Test a custom query replaces coordinate clauses."""
        query = Query().set_group_id("org.example").set_custom_query("d:org.example:lib")

        assert query.is_empty() is False
        assert query.render() == "d:org.example:lib"

    def test_render_is_deterministic(self):
        """Test rendering twice gives the same result and no side effects."""
        query = Query().set_group_id("g").set_artifact_id("a")

        first = query.render()
        second = query.render()

        assert first == second
        assert query.group_id == "g"

    def test_no_grammar_escaping(self):
        """Test metacharacters are passed through untouched."""
        assert Query().set_artifact_id("foo*").render() == "a:foo*"


class TestQueryRequestParamValue:
    """Test suite for URL encoding of the q parameter."""

    def test_wildcard_stays_literal(self):
        """Test the match-all clause is not percent-encoded."""
        assert Query().to_request_param_value() == "*:*"

    def test_spaces_encoded_as_plus(self):
        """Test the AND conjunction is form encoded."""
        query = Query().set_group_id("org.example").set_artifact_id("lib")

        assert query.to_request_param_value() == "g:org.example+AND+a:lib"

    def test_reserved_characters_encoded(self):
        """Test parentheses and ampersands in a custom query are encoded."""
        query = Query().set_custom_query("cve:(A&B)")

        assert query.to_request_param_value() == "cve:%28A%26B%29"

    def test_setters_return_same_instance(self):
        """Test setters support chaining on one instance."""
        query = Query()

        assert query.set_group_id("g") is query
        assert query.set_custom_query("x") is query
