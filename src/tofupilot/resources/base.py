"""Base class for API resources."""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

import httpx

from tofupilot.http_client import TofuPilotHttpClient
from tofupilot.serialization import format_datetime, to_camel


def _format_query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, float) and value.is_integer():
        # Cursors come back as JSON numbers; 50.0 goes out as "50"
        return str(int(value))
    return str(value)


class ResourceBase:
    """Shared plumbing for the resource bindings.

    Subclasses set ``base_path`` and call the HTTP client with paths
    built from it.
    """

    base_path: str = ""

    def __init__(self, http_client: TofuPilotHttpClient) -> None:
        self._http = http_client

    def _path(self, *segments: str) -> str:
        return "/".join([self.base_path, *(str(s) for s in segments)])

    @staticmethod
    def build_uri(path: str, params: Mapping[str, Any] | None = None) -> str:
        """Append query parameters to ``path``.

        Keys are converted to camelCase. ``None`` and empty values are
        skipped; list values repeat the key once per item.
        """
        pairs = []
        for key, value in (params or {}).items():
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
            for item in values:
                text = _format_query_value(item)
                if text != "":
                    pairs.append((to_camel(key), text))

        if not pairs:
            return path
        return f"{path}?{httpx.QueryParams(pairs)}"
