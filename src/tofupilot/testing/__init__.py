"""Testing utilities for code built on the TofuPilot client.

Example:
    ```python
    from tofupilot import TofuPilotClient
    from tofupilot.testing import RecordingHandler, error_response


    async def test_missing_run_raises():
        handler = RecordingHandler(error_response(404, "Not found"))
        async with TofuPilotClient(api_key="tp-key", transport=handler.transport()) as client:
            with pytest.raises(NotFoundError):
                await client.runs.get("missing")
    ```
"""

from tofupilot.testing.factories import RecordingHandler, error_response, json_response

__all__ = ["RecordingHandler", "error_response", "json_response"]
