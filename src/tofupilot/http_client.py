"""Generic HTTP client for the TofuPilot API.

Every call goes through the same pipeline::

    TofuPilotHttpClient → RetryTransport → BearerAuthTransport → base transport
                        ← raise_for_status / load(response_type)

Example:
    ```python
    from tofupilot.http_client import TofuPilotHttpClient
    from tofupilot.models import Run

    async with TofuPilotHttpClient(TofuPilotOptions(api_key="tp-key")) as http:
        run = await http.get("/v2/runs/abc", response_type=Run)
    ```

All operations are coroutines. Cancelling the task awaiting one aborts
the in-flight request or the backoff sleep between retries.
"""

import logging
import random
from typing import IO, Any

import httpx

from tofupilot import __version__
from tofupilot.config import TofuPilotOptions
from tofupilot.errors.exceptions import DeserializationError, NetworkError
from tofupilot.errors.handler import raise_for_status
from tofupilot.serialization import dump, load
from tofupilot.transport.factory import create_transport_stack

logger = logging.getLogger(__name__)

USER_AGENT = f"tofupilot-python/{__version__}"


class TofuPilotHttpClient:
    """Verb-oriented client returning typed results or raising typed errors.

    Args:
        options: Client configuration (default: TofuPilotOptions())
        transport: Base transport doing the network I/O. When omitted the
            client creates an ``httpx.AsyncHTTPTransport`` and closes it in
            ``aclose()``; a transport passed in is never closed here.
        rng: Random source for retry jitter
    """

    def __init__(
        self,
        options: TofuPilotOptions | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.options = options or TofuPilotOptions()
        self._owns_transport = transport is None
        self._base_transport = transport or httpx.AsyncHTTPTransport()
        self._timeout = httpx.Timeout(self.options.timeout)
        self._client = httpx.AsyncClient(
            base_url=self.options.resolved_base_url(),
            transport=create_transport_stack(self._base_transport, self.options, rng=rng),
            timeout=self._timeout,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )
        self._closed = False

    @property
    def owns_transport(self) -> bool:
        return self._owns_transport

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> "TofuPilotHttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the connection pool if this client created it."""
        if self._closed:
            return
        self._closed = True
        if self._owns_transport:
            await self._client.aclose()

    async def get(self, uri: str, response_type: Any = None) -> Any:
        response = await self._send("GET", uri)
        return self._handle_response(response, response_type)

    async def post(self, uri: str, body: Any, response_type: Any = None) -> Any:
        response = await self._send("POST", uri, json=dump(body))
        return self._handle_response(response, response_type)

    async def patch(self, uri: str, body: Any, response_type: Any = None) -> Any:
        response = await self._send("PATCH", uri, json=dump(body))
        return self._handle_response(response, response_type)

    async def delete(self, uri: str, response_type: Any = None) -> Any:
        response = await self._send("DELETE", uri)
        return self._handle_response(response, response_type)

    async def upload_file(
        self,
        uri: str,
        stream: IO[bytes] | bytes,
        file_name: str,
        content_type: str,
        response_type: Any = None,
    ) -> Any:
        """POST a multipart body with a single ``file`` part.

        The stream is read once, when the retry layer buffers the request;
        the caller keeps ownership of it.
        """
        files = {"file": (file_name, stream, content_type)}
        response = await self._send("POST", uri, files=files)
        return self._handle_response(response, response_type)

    async def put_presigned(self, url: str, content: bytes, content_type: str) -> None:
        """PUT raw bytes to a presigned storage URL.

        Goes straight to the base transport: the URL carries its own
        credentials, so no Authorization header is added and no retries
        are attempted.

        Raises:
            APIError: Subclass matching the storage backend's non-2xx status
            NetworkError: If the connection fails
        """
        request = httpx.Request(
            "PUT",
            url,
            content=content,
            headers={"Content-Type": content_type},
            extensions={"timeout": self._timeout.as_dict()},
        )
        logger.debug(f"PUT {len(content)} bytes to presigned URL")
        try:
            response = await self._base_transport.handle_async_request(request)
            try:
                await response.aread()
            finally:
                await response.aclose()
        except httpx.TransportError as e:
            raise NetworkError(f"Upload to presigned URL failed: {e}") from e

        raise_for_status(response)

    async def _send(self, method: str, uri: str, **kwargs) -> httpx.Response:
        logger.debug(f"{method} {uri}")
        try:
            return await self._client.request(method, uri, **kwargs)
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {uri} failed: {e}") from e

    def _handle_response(self, response: httpx.Response, response_type: Any) -> Any:
        raise_for_status(response)

        context = {
            "status_code": response.status_code,
            "response_body": response.text,
            "response": response,
        }
        try:
            data = response.json()
        except ValueError as e:
            raise DeserializationError("Failed to deserialize response", **context) from e

        if data is None:
            raise DeserializationError("Failed to deserialize response", **context)

        try:
            return load(data, response_type)
        except DeserializationError as e:
            raise DeserializationError(f"Failed to deserialize response: {e}", **context) from e
