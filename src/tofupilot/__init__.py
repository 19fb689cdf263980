"""TofuPilot - async Python client for the TofuPilot test-management API.

Requests go through a resilient transport pipeline:
- Bearer authentication resolved per request (explicit key or ``TOFUPILOT_API_KEY``)
- Retries with exponential backoff and jitter for network failures and
  retryable statuses
- Typed exceptions for every error response
- Attachment uploads (initialize, presigned PUT, link)

Example:
    ```python
    from tofupilot import TofuPilotClient, NotFoundError

    async with TofuPilotClient(api_key="tp-key") as client:
        try:
            run = await client.runs.get("run-id")
        except NotFoundError as e:
            print(e.message)
    ```
"""

__version__ = "0.1.0"

from tofupilot.client import TofuPilotClient  # noqa: E402
from tofupilot.config import RetryPolicy, TofuPilotOptions  # noqa: E402
from tofupilot.errors import (  # noqa: E402
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
from tofupilot.http_client import TofuPilotHttpClient  # noqa: E402

__all__ = [
    "APIError",
    "AttachmentNotFoundError",
    "AttachmentTooLargeError",
    "AttachmentValidationError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DeserializationError",
    "ForbiddenError",
    "InternalServerError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "RetryPolicy",
    "ServerError",
    "ServiceUnavailableError",
    "TofuPilotClient",
    "TofuPilotError",
    "TofuPilotHttpClient",
    "TofuPilotOptions",
    "TooManyAttachmentsError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "__version__",
]
