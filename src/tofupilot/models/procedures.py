"""Procedure and procedure version models."""

from tofupilot.serialization import ApiModel, Timestamp


class ProcedureVersion(ApiModel):
    id: str
    version: str | None = None
    procedure_id: str | None = None
    created_at: Timestamp | None = None


class Procedure(ApiModel):
    id: str
    name: str | None = None
    identifier: str | None = None
    description: str | None = None
    created_at: Timestamp | None = None
    url: str | None = None
    versions: list[ProcedureVersion] | None = None


class CreateProcedureRequest(ApiModel):
    name: str
    description: str | None = None


class UpdateProcedureRequest(ApiModel):
    name: str | None = None
    description: str | None = None


class CreateProcedureVersionRequest(ApiModel):
    version: str
