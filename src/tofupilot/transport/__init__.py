"""Transport layer components for composable HTTP middleware.

Transport layers wrap an ``httpx.AsyncBaseTransport`` to add retry and
authentication behaviour to every request sent through an
``httpx.AsyncClient``.

Modules:
    retry: Retry logic with exponential backoff and jitter
    factory: Factory function for the standard retry → auth stack

Example:
    ```python
    from tofupilot.transport import create_transport_stack

    transport = create_transport_stack(httpx.AsyncHTTPTransport(), options)
    ```
"""

from tofupilot.transport.factory import create_transport_stack
from tofupilot.transport.retry import RetryTransport, clone_request

__all__ = ["RetryTransport", "clone_request", "create_transport_stack"]
