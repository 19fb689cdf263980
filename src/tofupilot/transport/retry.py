"""Retry transport for resilient TofuPilot API calls.

``RetryTransport`` replays a request when the response status is in the
policy's retryable set (429, 500, 502, 503, 504 by default) or when the
connection fails or times out. Every attempt sends a fresh clone of the
request, built from a body that is buffered once up front, so streamed
bodies (multipart uploads, generators) are never read twice.

Backoff before retry ``k`` (1-indexed)::

    computed = min(initial_delay * backoff_multiplier ** (k - 1), max_delay)
    delay = computed ± 10% uniform jitter

## Example

```python
from tofupilot.config import RetryPolicy
from tofupilot.transport.retry import RetryTransport
import httpx

retry_transport = RetryTransport(
    wrapped_transport=httpx.AsyncHTTPTransport(),
    policy=RetryPolicy(max_retries=5, max_delay=10.0),
)

async with httpx.AsyncClient(transport=retry_transport) as client:
    response = await client.post("https://www.tofupilot.com/v2/runs", json={...})
```

Cancelling the task that awaits the request aborts the in-flight send or
the pending backoff sleep; cancellation is never retried.
"""

import asyncio
import logging
import random

import httpx

from tofupilot.config import RetryPolicy

logger = logging.getLogger(__name__)

# Connection failures and timeouts; anything else (including
# asyncio.CancelledError) propagates on the first occurrence
RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)

JITTER_RATIO = 0.1


def clone_request(request: httpx.Request, body: bytes) -> httpx.Request:
    """Build an independent copy of ``request`` carrying ``body``.

    Headers (including content headers) and extensions such as the
    timeout configuration are copied; the clone can be mutated by inner
    transport layers without touching the original.
    """
    headers = request.headers.copy()
    # The buffered body gets a Content-Length instead of chunked framing
    headers.pop("Transfer-Encoding", None)
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=body,
        extensions=dict(request.extensions),
    )


class RetryTransport(httpx.AsyncBaseTransport):
    """Retry transport with bounded exponential backoff and jitter.

    Args:
        wrapped_transport: The underlying transport to wrap
        policy: Retry configuration (default: RetryPolicy())
        rng: Random source for jitter (default: a new random.Random)

    Example:
        ```python
        transport = RetryTransport(
            wrapped_transport=httpx.AsyncHTTPTransport(),
            policy=RetryPolicy(max_retries=3),
            rng=random.Random(42),
        )
        ```
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        policy: RetryPolicy | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.policy = policy or RetryPolicy()
        self._rng = rng or random.Random()

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request, retrying retryable statuses and connection failures.

        Args:
            request: The HTTP request to send

        Returns:
            The first non-retryable response, or the last response once
            ``max_retries`` retries have been spent

        Raises:
            httpx.TransportError: If the final attempt fails at the network level
        """
        if not self.policy.enabled:
            return await self._wrapped_transport.handle_async_request(request)

        body = await request.aread()
        max_retries = self.policy.max_retries

        for attempt in range(max_retries + 1):
            try:
                response = await self._wrapped_transport.handle_async_request(clone_request(request, body))
            except RETRYABLE_EXCEPTIONS as e:
                if attempt >= max_retries:
                    raise
                reason = f"{type(e).__name__}: {e}"
            else:
                if response.status_code not in self.policy.retryable_status_codes or attempt >= max_retries:
                    return response
                reason = str(response.status_code)
                await response.aclose()

            delay = self.calculate_backoff_delay(attempt + 1)

            logger.warning(
                f"Request {request.method} {request.url} failed with {reason}, "
                f"retrying in {delay:.2f}s (attempt {attempt + 1}/{max_retries})"
            )

            await asyncio.sleep(delay)

        # Every iteration above returns or raises on its last pass
        raise AssertionError("Retry loop finished without a response")

    def calculate_backoff_delay(self, retry_number: int) -> float:
        """Calculate the jittered backoff delay before a retry.

        Args:
            retry_number: Current retry attempt (1-indexed)

        Returns:
            Delay in seconds, within ±10% of ``policy.backoff_delay(retry_number)``
        """
        delay = self.policy.backoff_delay(retry_number)
        return delay + delay * JITTER_RATIO * (self._rng.random() * 2 - 1)
