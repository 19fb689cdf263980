"""Authentication components for the TofuPilot client.

This module provides:
- Per-request bearer credential resolution (value → env)
- Multi-source setting resolution (value → env → .env → default)
- A bearer-token transport layer

Example:
    ```python
    from tofupilot.auth import BearerAuthTransport

    transport = BearerAuthTransport(
        wrapped_transport=httpx.AsyncHTTPTransport(),
        api_key="tp-key",
    )
    ```
"""

from tofupilot.auth.credentials import CredentialResolver, resolve_credential
from tofupilot.auth.transport import BearerAuthTransport

__all__ = [
    "BearerAuthTransport",
    "CredentialResolver",
    "resolve_credential",
]
