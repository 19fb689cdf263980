"""Station models."""

from tofupilot.serialization import ApiModel, Timestamp


class Station(ApiModel):
    id: str
    name: str | None = None
    description: str | None = None
    created_at: Timestamp | None = None
    url: str | None = None
    linked_procedure_ids: list[str] | None = None


class CreateStationRequest(ApiModel):
    name: str
    description: str | None = None


class UpdateStationRequest(ApiModel):
    name: str | None = None
    description: str | None = None


class LinkProcedureRequest(ApiModel):
    procedure_id: str
