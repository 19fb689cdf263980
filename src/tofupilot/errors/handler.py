"""Error handling utilities for HTTP responses."""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

from tofupilot.errors.exceptions import (
    APIError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    TofuPilotError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from tofupilot.errors.models import ErrorBody

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}


def exception_class_for_status(status_code: int) -> type[APIError]:
    """Map an HTTP status code to its exception class.

    Statuses without a dedicated class map to the generic ``APIError``.
    """
    return EXCEPTION_MAP.get(status_code, APIError)


def extract_error_message(body: str | None) -> str | None:
    """Extract a human-readable message from an error body.

    Checks ``message``, then ``error`` as a string, then ``error.message``.

    Args:
        body: Raw response body text

    Returns:
        The message, or None if the body has none or is not JSON
    """
    error_body = ErrorBody.from_text(body)
    return error_body.message if error_body else None


def extract_error_code(body: str | None) -> str | None:
    """Extract the API error code (``code`` or ``error.code``) from an error body."""
    error_body = ErrorBody.from_text(body)
    return error_body.code if error_body else None


def parse_retry_after(response: httpx.Response) -> float | None:
    """Read the Retry-After hint of a 429/503 response in seconds.

    Accepts delay-seconds (``"120"``) and HTTP-date values. Missing,
    negative, past or unparseable values give None.
    """
    raw = response.headers.get("Retry-After", "").strip()
    if not raw:
        return None

    if raw.lstrip("-").isdigit():
        seconds = int(raw)
        return float(seconds) if seconds >= 0 else None

    try:
        when = parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)

    remaining = (when - datetime.now(UTC)).total_seconds()
    return remaining if remaining >= 0 else None


def error_from_response(response: httpx.Response) -> TofuPilotError:
    """Build the typed exception for a non-2xx response.

    The body must already be read. Malformed bodies never mask the
    status-derived exception class; they only degrade the message to
    ``"API error: <status>"``.

    Args:
        response: HTTP response object

    Returns:
        The APIError subclass instance for the response status
    """
    status_code = response.status_code
    body = response.text

    error_body = ErrorBody.from_text(body)
    message = error_body.message if error_body and error_body.message else None
    if message is None:
        message = f"API error: {status_code}"
    error_code = error_body.code if error_body else None

    exc_class = exception_class_for_status(status_code)

    if exc_class is RateLimitError:
        return RateLimitError(
            message,
            retry_after=parse_retry_after(response),
            status_code=status_code,
            error_code=error_code,
            response_body=body,
            response=response,
        )

    return exc_class(
        message,
        status_code=status_code,
        error_code=error_code,
        response_body=body,
        response=response,
    )


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object (body already read)

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    raise error_from_response(response)
