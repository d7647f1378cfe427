"""Exceptions raised by the central search client."""


class SearchError(Exception):
    """Base class for all central search errors."""


class DecodeError(SearchError):
    """Raised when a response payload is malformed or structurally incomplete."""

    def __init__(self, message: str, payload_preview: str | None = None):
        super().__init__(message)
        self.message = message
        self.payload_preview = payload_preview


class TransportError(SearchError):
    """An HTTP status or network failure reported by the transport.

    This layer never raises it while rendering or decoding; transports build
    one (usually through ``decode_error_payload``) and hand it to callers.
    """

    def __init__(self, status_code: int, message: str, url: str = ""):
        super().__init__(f"HTTP {status_code}: {message} (URL: {url})")
        self.status_code = status_code
        self.message = message
        self.url = url

    @property
    def is_retryable(self) -> bool:
        """Rate limiting and server errors may succeed on a later attempt."""
        return self.status_code == 429 or self.status_code >= 500
