"""Part and part revision models."""

from tofupilot.serialization import ApiModel, Timestamp


class PartRevision(ApiModel):
    id: str
    revision_number: str | None = None
    part_id: str | None = None
    created_at: Timestamp | None = None


class Part(ApiModel):
    id: str
    part_number: str | None = None
    name: str | None = None
    description: str | None = None
    created_at: Timestamp | None = None
    url: str | None = None
    revisions: list[PartRevision] | None = None


class CreatePartRequest(ApiModel):
    part_number: str
    name: str | None = None
    description: str | None = None


class UpdatePartRequest(ApiModel):
    part_number: str | None = None
    name: str | None = None
    description: str | None = None


class CreatePartRevisionRequest(ApiModel):
    revision_number: str


class UpdatePartRevisionRequest(ApiModel):
    revision_number: str | None = None
