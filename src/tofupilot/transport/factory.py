"""Factory for the standard TofuPilot transport stack."""

import random

import httpx

from tofupilot.auth.transport import BearerAuthTransport
from tofupilot.config import TofuPilotOptions
from tofupilot.transport.retry import RetryTransport


def create_transport_stack(
    base_transport: httpx.AsyncBaseTransport,
    options: TofuPilotOptions | None = None,
    *,
    rng: random.Random | None = None,
) -> RetryTransport:
    """Wrap ``base_transport`` in the authentication and retry layers.

    Layer order, outermost first: retry → bearer auth → base transport.
    Authentication sits inside the retry loop so every attempt picks up
    the current credential.

    Args:
        base_transport: Transport that performs the actual network I/O
        options: Client options (default: TofuPilotOptions())
        rng: Random source for retry jitter

    Returns:
        The outermost transport layer
    """
    options = options or TofuPilotOptions()

    auth_transport = BearerAuthTransport(
        wrapped_transport=base_transport,
        api_key=options.api_key,
        env_var_name=options.api_key_env_var,
    )
    return RetryTransport(wrapped_transport=auth_transport, policy=options.retry, rng=rng)
