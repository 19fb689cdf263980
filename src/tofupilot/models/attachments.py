"""Attachment upload models."""

from pydantic import Field

from tofupilot.serialization import ApiModel


class InitializeUploadRequest(ApiModel):
    name: str
    content_type: str | None = None
    file_size: int | None = None


class UploadSession(ApiModel):
    """Presigned upload slot returned by the initialize endpoint.

    Only valid for the PUT that immediately follows; never stored.
    """

    upload_id: str = Field(alias="id")
    upload_url: str


class DeleteAttachmentResponse(ApiModel):
    success: bool = False
