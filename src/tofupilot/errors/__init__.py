"""Typed exceptions and HTTP error mapping for the TofuPilot API."""

from tofupilot.errors.exceptions import (
    APIError,
    AttachmentNotFoundError,
    AttachmentTooLargeError,
    AttachmentValidationError,
    BadRequestError,
    ClientError,
    ConflictError,
    DeserializationError,
    ForbiddenError,
    InternalServerError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    TofuPilotError,
    TooManyAttachmentsError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from tofupilot.errors.handler import (
    error_from_response,
    exception_class_for_status,
    extract_error_code,
    extract_error_message,
    raise_for_status,
)
from tofupilot.errors.models import ErrorBody

__all__ = [
    "APIError",
    "AttachmentNotFoundError",
    "AttachmentTooLargeError",
    "AttachmentValidationError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DeserializationError",
    "ErrorBody",
    "ForbiddenError",
    "InternalServerError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "TofuPilotError",
    "TooManyAttachmentsError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "error_from_response",
    "exception_class_for_status",
    "extract_error_code",
    "extract_error_message",
    "raise_for_status",
]
