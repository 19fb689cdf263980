"""Unit models."""

from tofupilot.serialization import ApiModel, Timestamp


class Unit(ApiModel):
    id: str
    serial_number: str | None = None
    part_id: str | None = None
    part_number: str | None = None
    revision_id: str | None = None
    revision_number: str | None = None
    batch_id: str | None = None
    batch_number: str | None = None
    created_at: Timestamp | None = None
    url: str | None = None
    children: list["Unit"] | None = None
    parents: list["Unit"] | None = None


class CreateUnitRequest(ApiModel):
    serial_number: str
    part_number: str
    revision_number: str | None = None
    batch_number: str | None = None


class UpdateUnitRequest(ApiModel):
    serial_number: str | None = None
    part_number: str | None = None
    revision_number: str | None = None
    batch_number: str | None = None
