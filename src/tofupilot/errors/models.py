"""TofuPilot error body models."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorBody:
    """Error payload returned by the TofuPilot API.

    The API is not consistent about where it puts the message, so all of
    these shapes are accepted::

        {"message": "Not found"}
        {"error": "Unauthorized"}
        {"error": {"message": "Invalid request", "code": "BAD_INPUT"}}
    """

    message: str | None = None  # Human-readable explanation
    code: str | None = None  # Machine-readable API error code

    # The decoded JSON document the fields were taken from
    raw: dict[str, Any] | None = None

    @classmethod
    def from_text(cls, text: str | None) -> "ErrorBody | None":
        """Parse an error body from raw response text.

        Args:
            text: Response body text

        Returns:
            ErrorBody, or None if the text is not a JSON object
        """
        if not text:
            return None

        try:
            data = json.loads(text)
        except (ValueError, TypeError):
            # Not JSON at all (HTML error pages, plain text, truncated bodies)
            return None

        if not isinstance(data, dict):
            return None

        return cls(message=_find_message(data), code=_find_code(data), raw=data)


def _find_message(data: dict[str, Any]) -> str | None:
    message = data.get("message")
    if isinstance(message, str):
        return message

    error = data.get("error")
    if isinstance(error, str):
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]

    return None


def _find_code(data: dict[str, Any]) -> str | None:
    code = data.get("code")
    if isinstance(code, str):
        return code

    error = data.get("error")
    if isinstance(error, dict) and isinstance(error.get("code"), str):
        return error["code"]

    return None
