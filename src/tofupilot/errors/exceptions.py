"""Structured exceptions for TofuPilot API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class TofuPilotError(Exception):
    """Base exception for all TofuPilot SDK errors.

    Attributes:
        message: Human-readable description of the failure.
        status_code: HTTP status of the originating response, if any.
        error_code: Machine-readable error code returned by the API, if any.
        response_body: Raw response body text, if any.
        response: The originating ``httpx.Response``, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        response_body: str | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.response_body = response_body
        self.response = response


class APIError(TofuPilotError):
    """Non-2xx response from the API.

    Raised directly for statuses without a dedicated subclass.
    """

    pass


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: float | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class InternalServerError(ServerError):
    """500 Internal Server Error."""

    pass


class ServiceUnavailableError(ServerError):
    """503 Service Unavailable."""

    pass


class NetworkError(TofuPilotError):
    """Connection failure or timeout that outlasted every retry attempt.

    The underlying ``httpx`` exception is chained as ``__cause__``.
    """

    pass


class DeserializationError(TofuPilotError):
    """A successful response body could not be decoded into the requested type."""

    pass


class AttachmentValidationError(TofuPilotError, ValueError):
    """Attachment pre-flight validation failed; no request was sent."""

    pass


class TooManyAttachmentsError(AttachmentValidationError):
    """More files were given than the configured attachment limit."""

    def __init__(self, message: str, count: int, limit: int):
        super().__init__(message)
        self.count = count
        self.limit = limit


class AttachmentNotFoundError(AttachmentValidationError):
    """A file scheduled for upload does not exist."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class AttachmentTooLargeError(AttachmentValidationError):
    """A file scheduled for upload exceeds the maximum size."""

    def __init__(self, message: str, path: str, size: int, limit: int):
        super().__init__(message)
        self.path = path
        self.size = size
        self.limit = limit
