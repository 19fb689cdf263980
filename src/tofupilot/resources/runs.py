"""Runs resource."""

from __future__ import annotations

import os
from collections.abc import Iterable
from datetime import datetime

from tofupilot.models.common import DeleteResponse, PaginatedResponse
from tofupilot.models.enums import RunOutcome
from tofupilot.models.runs import CreateRunRequest, Run, UpdateRunRequest
from tofupilot.resources.base import ResourceBase
from tofupilot.uploads import AttachmentUploader


class RunsResource(ResourceBase):
    base_path = "/v2/runs"

    def __init__(self, http_client, uploader: AttachmentUploader | None = None) -> None:
        super().__init__(http_client)
        self._uploader = uploader or AttachmentUploader(http_client)

    async def list(
        self,
        *,
        search_query: str | None = None,
        ids: list[str] | None = None,
        outcomes: list[RunOutcome] | None = None,
        procedure_ids: list[str] | None = None,
        procedure_versions: list[str] | None = None,
        serial_numbers: list[str] | None = None,
        part_numbers: list[str] | None = None,
        revision_numbers: list[str] | None = None,
        duration_min: str | None = None,
        duration_max: str | None = None,
        started_after: datetime | None = None,
        started_before: datetime | None = None,
        ended_after: datetime | None = None,
        ended_before: datetime | None = None,
        created_after: datetime | None = None,
        created_before: datetime | None = None,
        created_by_user_ids: list[str] | None = None,
        created_by_station_ids: list[str] | None = None,
        operated_by_ids: list[str] | None = None,
        limit: int | None = 50,
        cursor: float | None = None,
        sort_by: str | None = "started_at",
        sort_order: str | None = "desc",
    ) -> PaginatedResponse[Run]:
        params = {
            "search_query": search_query,
            "ids": ids,
            "outcomes": outcomes,
            "procedure_ids": procedure_ids,
            "procedure_versions": procedure_versions,
            "serial_numbers": serial_numbers,
            "part_numbers": part_numbers,
            "revision_numbers": revision_numbers,
            "duration_min": duration_min,
            "duration_max": duration_max,
            "started_after": started_after,
            "started_before": started_before,
            "ended_after": ended_after,
            "ended_before": ended_before,
            "created_after": created_after,
            "created_before": created_before,
            "created_by_user_ids": created_by_user_ids,
            "created_by_station_ids": created_by_station_ids,
            "operated_by_ids": operated_by_ids,
            "limit": limit,
            "cursor": cursor,
            "sort_by": sort_by,
            "sort_order": sort_order,
        }
        uri = self.build_uri(self.base_path, params)
        return await self._http.get(uri, response_type=PaginatedResponse[Run])

    async def create(self, request: CreateRunRequest) -> Run:
        return await self._http.post(self.base_path, request, response_type=Run)

    async def get(self, run_id: str) -> Run:
        return await self._http.get(self._path(run_id), response_type=Run)

    async def update(self, run_id: str, request: UpdateRunRequest) -> Run:
        return await self._http.patch(self._path(run_id), request, response_type=Run)

    async def delete(self, ids: Iterable[str]) -> DeleteResponse:
        uri = self.build_uri(self.base_path, {"ids": list(ids)})
        return await self._http.delete(uri, response_type=DeleteResponse)

    async def attach(self, run_id: str, paths: Iterable[str | os.PathLike]) -> list[str]:
        """Upload local files and link each one to the run.

        Every file is validated before the first request is sent.

        Returns:
            Upload ids in input order
        """

        async def link(upload_id: str) -> None:
            await self.update(run_id, UpdateRunRequest(attachments=[upload_id]))

        return await self._uploader.upload_and_link(paths, link)
