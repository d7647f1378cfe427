"""Helpers for highlighted text fragments."""

HIGHLIGHT_PRE = "<em>"
HIGHLIGHT_POST = "</em>"


def strip_highlight_markers(
    fragment: str,
    pre: str = HIGHLIGHT_PRE,
    post: str = HIGHLIGHT_POST,
) -> str:
    """Remove emphasis markers from a highlighted fragment.

    The markers are removed as literal substrings. Nested or unbalanced
    markers are not supported.

    Args:
        fragment: Highlighted text, e.g. ``<em>org</em>.<em>junit</em>``
        pre: Opening marker
        post: Closing marker

    Returns:
        The fragment without markers, e.g. ``org.junit``
    """
    return fragment.replace(pre, "").replace(post, "")


def strip_highlight_fragments(fragments: list[str]) -> list[str]:
    """Strip the default markers from every fragment."""
    return [strip_highlight_markers(fragment) for fragment in fragments]
