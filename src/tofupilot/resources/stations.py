"""Stations resource."""

from tofupilot.models.common import DeleteResponse, PaginatedResponse
from tofupilot.models.stations import CreateStationRequest, LinkProcedureRequest, Station, UpdateStationRequest
from tofupilot.resources.base import ResourceBase


class StationsResource(ResourceBase):
    base_path = "/v2/stations"

    async def list(
        self,
        *,
        search_query: str | None = None,
        ids: list[str] | None = None,
        limit: int | None = 50,
        cursor: float | None = None,
    ) -> PaginatedResponse[Station]:
        uri = self.build_uri(
            self.base_path,
            {"search_query": search_query, "ids": ids, "limit": limit, "cursor": cursor},
        )
        return await self._http.get(uri, response_type=PaginatedResponse[Station])

    async def create(self, request: CreateStationRequest) -> Station:
        return await self._http.post(self.base_path, request, response_type=Station)

    async def get(self, station_id: str) -> Station:
        return await self._http.get(self._path(station_id), response_type=Station)

    async def update(self, station_id: str, request: UpdateStationRequest) -> Station:
        return await self._http.patch(self._path(station_id), request, response_type=Station)

    async def remove(self, station_id: str) -> DeleteResponse:
        return await self._http.delete(self._path(station_id), response_type=DeleteResponse)

    async def link_procedure(self, station_id: str, procedure_id: str) -> Station:
        request = LinkProcedureRequest(procedure_id=procedure_id)
        return await self._http.post(self._path(station_id, "procedures"), request, response_type=Station)

    async def unlink_procedure(self, station_id: str, procedure_id: str) -> Station:
        return await self._http.delete(self._path(station_id, "procedures", procedure_id), response_type=Station)
