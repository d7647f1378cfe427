"""Select handler URL composition."""

from central_search.config import Settings, get_settings
from central_search.request.search_request import SearchRequest


def build_select_url(search_request: SearchRequest, settings: Settings | None = None) -> str:
    """Build the full GET URL for a search request.

    Args:
        search_request: Request to render
        settings: Endpoint settings (defaults to the cached settings)

    Returns:
        ``<base_url><select_path>?<params>``
    """
    settings = settings or get_settings()
    base_url = settings.base_url.rstrip("/")
    return f"{base_url}{settings.select_path}?{search_request.to_request_params()}"
