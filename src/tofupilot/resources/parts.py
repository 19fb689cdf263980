"""Parts resource, with revisions as a sub-resource."""

from tofupilot.models.common import DeleteResponse, PaginatedResponse
from tofupilot.models.parts import (
    CreatePartRequest,
    CreatePartRevisionRequest,
    Part,
    PartRevision,
    UpdatePartRequest,
    UpdatePartRevisionRequest,
)
from tofupilot.resources.base import ResourceBase


class PartRevisionsResource(ResourceBase):
    base_path = "/v2/parts"

    async def list(self, part_id: str) -> PaginatedResponse[PartRevision]:
        return await self._http.get(self._path(part_id, "revisions"), response_type=PaginatedResponse[PartRevision])

    async def create(self, part_id: str, request: CreatePartRevisionRequest) -> PartRevision:
        return await self._http.post(self._path(part_id, "revisions"), request, response_type=PartRevision)

    async def get(self, part_id: str, revision_id: str) -> PartRevision:
        return await self._http.get(self._path(part_id, "revisions", revision_id), response_type=PartRevision)

    async def update(self, part_id: str, revision_id: str, request: UpdatePartRevisionRequest) -> PartRevision:
        return await self._http.patch(
            self._path(part_id, "revisions", revision_id), request, response_type=PartRevision
        )

    async def delete(self, part_id: str, revision_id: str) -> DeleteResponse:
        return await self._http.delete(self._path(part_id, "revisions", revision_id), response_type=DeleteResponse)


class PartsResource(ResourceBase):
    base_path = "/v2/parts"

    def __init__(self, http_client) -> None:
        super().__init__(http_client)
        self.revisions = PartRevisionsResource(http_client)

    async def list(
        self,
        *,
        search_query: str | None = None,
        ids: list[str] | None = None,
        limit: int | None = 50,
        cursor: float | None = None,
    ) -> PaginatedResponse[Part]:
        uri = self.build_uri(
            self.base_path,
            {"search_query": search_query, "ids": ids, "limit": limit, "cursor": cursor},
        )
        return await self._http.get(uri, response_type=PaginatedResponse[Part])

    async def create(self, request: CreatePartRequest) -> Part:
        return await self._http.post(self.base_path, request, response_type=Part)

    async def get(self, part_id: str) -> Part:
        return await self._http.get(self._path(part_id), response_type=Part)

    async def update(self, part_id: str, request: UpdatePartRequest) -> Part:
        return await self._http.patch(self._path(part_id), request, response_type=Part)
