"""Batches resource."""

from tofupilot.models.batches import Batch, CreateBatchRequest, UpdateBatchRequest
from tofupilot.models.common import DeleteResponse, PaginatedResponse
from tofupilot.resources.base import ResourceBase


class BatchesResource(ResourceBase):
    base_path = "/v2/batches"

    async def list(
        self,
        *,
        search_query: str | None = None,
        ids: list[str] | None = None,
        limit: int | None = 50,
        cursor: float | None = None,
    ) -> PaginatedResponse[Batch]:
        uri = self.build_uri(
            self.base_path,
            {"search_query": search_query, "ids": ids, "limit": limit, "cursor": cursor},
        )
        return await self._http.get(uri, response_type=PaginatedResponse[Batch])

    async def create(self, request: CreateBatchRequest) -> Batch:
        return await self._http.post(self.base_path, request, response_type=Batch)

    async def get(self, batch_id: str) -> Batch:
        return await self._http.get(self._path(batch_id), response_type=Batch)

    async def update(self, batch_id: str, request: UpdateBatchRequest) -> Batch:
        return await self._http.patch(self._path(batch_id), request, response_type=Batch)

    async def delete(self, batch_id: str) -> DeleteResponse:
        return await self._http.delete(self._path(batch_id), response_type=DeleteResponse)
