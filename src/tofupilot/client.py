"""Top-level TofuPilot client.

Example:
    ```python
    from tofupilot import TofuPilotClient
    from tofupilot.models import CreateRunRequest, RunOutcome

    async with TofuPilotClient() as client:  # key from TOFUPILOT_API_KEY
        run = await client.runs.create(
            CreateRunRequest(
                outcome=RunOutcome.PASS,
                procedure_id="proc-1",
                serial_number="SN-001",
                started_at=started,
                ended_at=ended,
            )
        )
        await client.runs.attach(run.id, ["report.pdf"])
    ```
"""

import httpx

from tofupilot.config import TofuPilotOptions
from tofupilot.http_client import TofuPilotHttpClient
from tofupilot.resources import (
    AttachmentsResource,
    BatchesResource,
    PartsResource,
    ProceduresResource,
    RunsResource,
    StationsResource,
    UnitsResource,
)
from tofupilot.uploads import AttachmentUploader


class TofuPilotClient:
    """Entry point exposing one attribute per API resource.

    Args:
        api_key: API key; falls back to ``TOFUPILOT_API_KEY`` per request
        base_url: API base URL; falls back to ``TOFUPILOT_URL``
        options: Full configuration; ``api_key``/``base_url`` override it
        transport: Base transport for a client created here
        http_client: Existing HTTP client to share. It is not closed by
            ``aclose()``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        options: TofuPilotOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: TofuPilotHttpClient | None = None,
    ) -> None:
        if http_client is not None and (options is not None or transport is not None):
            raise ValueError("Pass either http_client or options/transport, not both")

        if http_client is None:
            options = (options or TofuPilotOptions()).with_overrides(api_key=api_key, base_url=base_url)
            http_client = TofuPilotHttpClient(options, transport=transport)
            self._owns_http_client = True
        else:
            self._owns_http_client = False

        self.http = http_client
        self.options = http_client.options

        uploader = AttachmentUploader(
            http_client,
            max_attachments=self.options.max_attachments,
            max_file_size=self.options.max_file_size,
        )
        self.runs = RunsResource(http_client, uploader)
        self.units = UnitsResource(http_client)
        self.parts = PartsResource(http_client)
        self.procedures = ProceduresResource(http_client)
        self.batches = BatchesResource(http_client)
        self.stations = StationsResource(http_client)
        self.attachments = AttachmentsResource(http_client, uploader)

    async def __aenter__(self) -> "TofuPilotClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http.aclose()
