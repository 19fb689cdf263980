"""Batch models."""

from tofupilot.serialization import ApiModel, Timestamp


class Batch(ApiModel):
    id: str
    batch_number: str | None = None
    part_id: str | None = None
    created_at: Timestamp | None = None
    url: str | None = None


class CreateBatchRequest(ApiModel):
    batch_number: str
    part_number: str | None = None


class UpdateBatchRequest(ApiModel):
    batch_number: str | None = None
