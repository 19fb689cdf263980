"""Bearer token authentication transport layer."""

import logging

import httpx

from tofupilot.auth.credentials import resolve_credential

logger = logging.getLogger(__name__)


class BearerAuthTransport(httpx.AsyncBaseTransport):
    """Transport layer that adds ``Authorization: Bearer <token>`` to requests.

    The token is resolved on every request, from the explicit ``api_key``
    first and the ``env_var_name`` environment variable second, so a key
    rotated in the environment is used without rebuilding the client.

    When no token resolves the request goes out unauthenticated and the
    server's 401 surfaces as ``UnauthorizedError``.

    Args:
        wrapped_transport: The underlying transport to wrap
        api_key: Explicit API key (default: None)
        env_var_name: Environment variable fallback (default: TOFUPILOT_API_KEY)

    Example:
        ```python
        transport = BearerAuthTransport(
            wrapped_transport=httpx.AsyncHTTPTransport(),
            env_var_name="TOFUPILOT_API_KEY",
        )
        ```
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        api_key: str | None = None,
        env_var_name: str | None = "TOFUPILOT_API_KEY",
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self._api_key = api_key
        self.env_var_name = env_var_name

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
        token = resolve_credential(self._api_key, self.env_var_name)
        if token is not None:
            request.headers["Authorization"] = f"Bearer {token}"
        else:
            logger.debug(f"No API key configured, sending {request.method} {request.url} unauthenticated")

        return await self._wrapped_transport.handle_async_request(request)
