"""API key and setting lookup.

Two entry points:

- ``resolve_credential`` runs on every request to find the bearer token.
  It only looks at the explicit key and the process environment, and
  never caches, so rotating ``TOFUPILOT_API_KEY`` takes effect on the
  next request.
- ``CredentialResolver`` reads client settings once, at configuration
  time. It also pulls in a ``.env`` file through python-dotenv.

Example:
    ```python
    from tofupilot.auth import CredentialResolver, resolve_credential

    token = resolve_credential(options.api_key, "TOFUPILOT_API_KEY")

    resolver = CredentialResolver(dotenv_path="config/.env")
    base_url = resolver.resolve(env_var_name="TOFUPILOT_URL", mask_in_logs=False)
    ```

Values are masked in log output unless a caller opts out for
non-secret settings.
"""

import logging
import os
from collections.abc import Mapping
from threading import Lock

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

MASK = "***"


def resolve_credential(
    value: str | None,
    env_var_name: str | None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve a bearer credential from an explicit value or the environment.

    Empty strings count as absent in both sources.

    Args:
        value: Explicitly configured credential (highest priority).
        env_var_name: Environment variable to fall back to.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The credential, or None if neither source provides one.
    """
    if value:
        return value
    if not env_var_name:
        return None
    env = os.environ if environ is None else environ
    return env.get(env_var_name) or None


class CredentialResolver:
    """Look up a setting in an explicit value, then the environment, then a default.

    Entries from the ``.env`` file are merged into ``os.environ`` the first
    time the resolver is used. Variables that are already set always win over
    the file.

    Args:
        dotenv_path: ``.env`` file to read. None lets python-dotenv locate
            one with ``find_dotenv()``.
        load_dotenv: Set to False to ignore ``.env`` files entirely.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._use_dotenv = load_dotenv
        self._dotenv_loaded = False
        self._lock = Lock()

        if self._use_dotenv:
            self._load_dotenv_once()

    def _load_dotenv_once(self) -> None:
        with self._lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path, override=False)
            except OSError as e:
                logger.warning(f"Could not read .env file {self._dotenv_path or '(auto)'}: {e}")
            else:
                logger.debug(f"Merged .env file {self._dotenv_path or '(auto)'} into the environment")
            self._dotenv_loaded = True

    def _mask_credential(self, value: str | None) -> str:
        return "None" if value is None else MASK

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Return the first non-empty source: ``value``, ``env_var_name``, ``default``.

        Args:
            value: Explicit value.
            env_var_name: Environment variable to read (includes ``.env`` entries).
            default: Fallback when both are unset or empty.
            mask_in_logs: Log the resolved value as ``***``. Turn off for
                non-secret settings such as URLs and timeouts.

        Returns:
            The resolved value, or None.
        """
        if value:
            result, source = value, "explicit value"
        elif env_var_name and os.environ.get(env_var_name):
            result, source = os.environ[env_var_name], f"${env_var_name}"
        elif default is not None:
            result, source = default, "default"
        else:
            return None

        shown = self._mask_credential(result) if mask_in_logs else result
        logger.debug(f"{env_var_name or 'setting'} = {shown} (from {source})")
        return result
