"""Error payloads returned by the service and their classification."""

import logging
from http import HTTPStatus

from pydantic import BaseModel, ValidationError

from central_search.errors import TransportError

logger = logging.getLogger(__name__)

BODY_PREVIEW_LENGTH = 200


class APIErrorDetails(BaseModel):
    """Detailed error information nested in an error payload."""

    code: str | None = None
    message: str | None = None


class ErrorResponse(BaseModel):
    """Error body sent alongside a non-2xx status."""

    status: int | None = None
    error: str | None = None
    message: str | None = None
    details: APIErrorDetails | None = None


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown error"


def decode_error_payload(status_code: int, body: str | bytes, url: str = "") -> TransportError:
    """Classify a failed HTTP exchange for the transport.

    The message is taken from the body's ``message`` field, then its
    ``error`` field, and falls back to the status reason phrase. When the
    body is not a JSON error object, a preview of it follows the reason
    phrase.

    Args:
        status_code: HTTP status of the failed response
        body: Raw response body
        url: Requested URL

    Returns:
        TransportError describing the failure (returned, not raised)
    """
    try:
        error_response = ErrorResponse.model_validate_json(body)
    except ValidationError:
        logger.debug(f"Error body for HTTP {status_code} is not a JSON error object")
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8", errors="replace")
        preview = body.strip()[:BODY_PREVIEW_LENGTH]
        message = _reason_phrase(status_code)
        if preview:
            message = f"{message}: {preview}"
        return TransportError(status_code, message, url)

    message = error_response.message or error_response.error or _reason_phrase(status_code)
    return TransportError(status_code, message, url)
