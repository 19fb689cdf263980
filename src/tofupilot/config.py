"""Client configuration.

Example:
    ```python
    from tofupilot.config import RetryPolicy, TofuPilotOptions

    options = TofuPilotOptions(
        api_key="tp-key",
        timeout=10.0,
        retry=RetryPolicy(max_retries=5, initial_delay=0.5),
    )

    # Or read everything except the API key from TOFUPILOT_* variables
    options = TofuPilotOptions.from_env()
    ```
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import TypeAdapter, ValidationError

from tofupilot.auth.credentials import CredentialResolver

DEFAULT_BASE_URL = "https://www.tofupilot.com"
DEFAULT_ENV_PREFIX = "TOFUPILOT"
DEFAULT_TIMEOUT = 30.0

# Attachment limits per parent operation
MAX_ATTACHMENTS = 20
MAX_FILE_SIZE = 50 * 1024 * 1024

DEFAULT_RETRYABLE_STATUS_CODES: frozenset[int] = frozenset([429, 500, 502, 503, 504])

_FLOAT = TypeAdapter(float)
_INT = TypeAdapter(int)
# Accepts 1/0, true/false, yes/no, on/off, t/f, y/n in any case
_BOOL = TypeAdapter(bool)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry behaviour for API requests.

    Delays are in seconds. ``max_retries`` counts retries, so a request is
    sent at most ``max_retries + 1`` times.
    """

    enabled: bool = True
    max_retries: int = 3
    initial_delay: float = 1.0
    max_delay: float = 30.0
    backoff_multiplier: float = 2.0
    retryable_status_codes: frozenset[int] = DEFAULT_RETRYABLE_STATUS_CODES

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.initial_delay < 0 or self.max_delay < 0:
            raise ValueError("Retry delays must be >= 0")
        if self.backoff_multiplier < 1:
            raise ValueError(f"backoff_multiplier must be >= 1, got {self.backoff_multiplier}")
        # Accept any iterable of ints (lists from config files etc.)
        object.__setattr__(self, "retryable_status_codes", frozenset(self.retryable_status_codes))

    @classmethod
    def disabled(cls) -> "RetryPolicy":
        """Policy that sends every request exactly once."""
        return cls(enabled=False)

    def backoff_delay(self, attempt: int) -> float:
        """Delay before retry ``attempt`` (1-indexed), without jitter.

        Uses formula: min(initial_delay * backoff_multiplier ** (attempt - 1), max_delay)
        Default sequence: 1, 2, 4, 8, 16, 30, 30... seconds
        """
        delay = self.initial_delay * self.backoff_multiplier ** (attempt - 1)
        return min(delay, self.max_delay)


@dataclass(frozen=True)
class TofuPilotOptions:
    """Configuration for a TofuPilot client.

    Attributes:
        api_key: Explicit API key. When None the key is read from
            ``<env_prefix>_API_KEY`` on every request.
        base_url: Explicit base URL. When None, ``<env_prefix>_URL`` or
            the public TofuPilot URL is used.
        timeout: Per-request timeout in seconds.
        retry: Retry policy for API requests.
        env_prefix: Prefix for environment variable fallbacks.
        max_attachments: Maximum number of files per attachment upload.
        max_file_size: Maximum size of a single attachment in bytes.
    """

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    env_prefix: str = DEFAULT_ENV_PREFIX
    max_attachments: int = MAX_ATTACHMENTS
    max_file_size: int = MAX_FILE_SIZE

    @property
    def api_key_env_var(self) -> str:
        return f"{self.env_prefix}_API_KEY"

    @property
    def url_env_var(self) -> str:
        return f"{self.env_prefix}_URL"

    def resolved_base_url(self, environ: Mapping[str, str] | None = None) -> str:
        """Return the base URL: explicit value, then environment, then default."""
        if self.base_url:
            return self.base_url.rstrip("/")
        env = os.environ if environ is None else environ
        return (env.get(self.url_env_var) or DEFAULT_BASE_URL).rstrip("/")

    def with_overrides(self, **changes) -> "TofuPilotOptions":
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        *,
        resolver: CredentialResolver | None = None,
        **overrides,
    ) -> "TofuPilotOptions":
        """Build options from ``<prefix>_*`` environment variables and ``.env``.

        Reads ``<prefix>_URL``, ``<prefix>_TIMEOUT``, ``<prefix>_RETRY_ENABLED``
        and ``<prefix>_MAX_RETRIES``. Keyword overrides win over the
        environment. The API key is deliberately left unset so that it is
        looked up fresh on every request.

        Raises:
            ValueError: If a numeric or boolean variable cannot be parsed.
        """
        resolver = resolver or CredentialResolver()

        base_url = resolver.resolve(env_var_name=f"{prefix}_URL", mask_in_logs=False)
        timeout = _parse_setting(
            _FLOAT,
            f"{prefix}_TIMEOUT",
            resolver.resolve(env_var_name=f"{prefix}_TIMEOUT", mask_in_logs=False),
            DEFAULT_TIMEOUT,
        )

        defaults = RetryPolicy()
        retry = RetryPolicy(
            enabled=_parse_setting(
                _BOOL,
                f"{prefix}_RETRY_ENABLED",
                resolver.resolve(env_var_name=f"{prefix}_RETRY_ENABLED", mask_in_logs=False),
                defaults.enabled,
            ),
            max_retries=_parse_setting(
                _INT,
                f"{prefix}_MAX_RETRIES",
                resolver.resolve(env_var_name=f"{prefix}_MAX_RETRIES", mask_in_logs=False),
                defaults.max_retries,
            ),
        )

        options = cls(base_url=base_url, timeout=timeout, retry=retry, env_prefix=prefix)
        return options.with_overrides(**overrides)


def _parse_setting(adapter: TypeAdapter, name: str, raw: str | None, default: Any) -> Any:
    if raw is None or raw.strip() == "":
        return default
    try:
        return adapter.validate_python(raw.strip())
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        raise ValueError(f"Invalid value for {name}: {raw!r} ({reason})") from None
