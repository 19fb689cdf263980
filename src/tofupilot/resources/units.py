"""Units resource."""

from tofupilot.models.common import DeleteResponse, PaginatedResponse
from tofupilot.models.units import CreateUnitRequest, Unit, UpdateUnitRequest
from tofupilot.resources.base import ResourceBase


class UnitsResource(ResourceBase):
    base_path = "/v2/units"

    async def list(
        self,
        *,
        search_query: str | None = None,
        ids: list[str] | None = None,
        serial_numbers: list[str] | None = None,
        part_numbers: list[str] | None = None,
        limit: int | None = 50,
        cursor: float | None = None,
    ) -> PaginatedResponse[Unit]:
        uri = self.build_uri(
            self.base_path,
            {
                "search_query": search_query,
                "ids": ids,
                "serial_numbers": serial_numbers,
                "part_numbers": part_numbers,
                "limit": limit,
                "cursor": cursor,
            },
        )
        return await self._http.get(uri, response_type=PaginatedResponse[Unit])

    async def create(self, request: CreateUnitRequest) -> Unit:
        return await self._http.post(self.base_path, request, response_type=Unit)

    async def get(self, unit_id: str) -> Unit:
        return await self._http.get(self._path(unit_id), response_type=Unit)

    async def update(self, unit_id: str, request: UpdateUnitRequest) -> Unit:
        return await self._http.patch(self._path(unit_id), request, response_type=Unit)

    async def delete(self, unit_id: str) -> DeleteResponse:
        return await self._http.delete(self._path(unit_id), response_type=DeleteResponse)

    async def add_child(self, parent_id: str, child_id: str) -> Unit:
        return await self._http.post(self._path(parent_id, "children", child_id), {}, response_type=Unit)

    async def remove_child(self, parent_id: str, child_id: str) -> Unit:
        return await self._http.delete(self._path(parent_id, "children", child_id), response_type=Unit)
