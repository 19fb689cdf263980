"""Procedures resource, with versions as a sub-resource."""

from tofupilot.models.common import DeleteResponse, PaginatedResponse
from tofupilot.models.procedures import (
    CreateProcedureRequest,
    CreateProcedureVersionRequest,
    Procedure,
    ProcedureVersion,
    UpdateProcedureRequest,
)
from tofupilot.resources.base import ResourceBase


class ProcedureVersionsResource(ResourceBase):
    base_path = "/v2/procedures"

    async def list(self, procedure_id: str) -> PaginatedResponse[ProcedureVersion]:
        return await self._http.get(
            self._path(procedure_id, "versions"), response_type=PaginatedResponse[ProcedureVersion]
        )

    async def create(self, procedure_id: str, request: CreateProcedureVersionRequest) -> ProcedureVersion:
        return await self._http.post(self._path(procedure_id, "versions"), request, response_type=ProcedureVersion)

    async def get(self, procedure_id: str, version_id: str) -> ProcedureVersion:
        return await self._http.get(self._path(procedure_id, "versions", version_id), response_type=ProcedureVersion)

    async def delete(self, procedure_id: str, version_id: str) -> DeleteResponse:
        return await self._http.delete(
            self._path(procedure_id, "versions", version_id), response_type=DeleteResponse
        )


class ProceduresResource(ResourceBase):
    base_path = "/v2/procedures"

    def __init__(self, http_client) -> None:
        super().__init__(http_client)
        self.versions = ProcedureVersionsResource(http_client)

    async def list(
        self,
        *,
        search_query: str | None = None,
        ids: list[str] | None = None,
        limit: int | None = 50,
        cursor: float | None = None,
    ) -> PaginatedResponse[Procedure]:
        uri = self.build_uri(
            self.base_path,
            {"search_query": search_query, "ids": ids, "limit": limit, "cursor": cursor},
        )
        return await self._http.get(uri, response_type=PaginatedResponse[Procedure])

    async def create(self, request: CreateProcedureRequest) -> Procedure:
        return await self._http.post(self.base_path, request, response_type=Procedure)

    async def get(self, procedure_id: str) -> Procedure:
        return await self._http.get(self._path(procedure_id), response_type=Procedure)

    async def update(self, procedure_id: str, request: UpdateProcedureRequest) -> Procedure:
        return await self._http.patch(self._path(procedure_id), request, response_type=Procedure)

    async def delete(self, procedure_id: str) -> DeleteResponse:
        return await self._http.delete(self._path(procedure_id), response_type=DeleteResponse)
