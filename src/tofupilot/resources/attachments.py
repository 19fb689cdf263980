"""Attachments resource."""

import os

from tofupilot.models.attachments import DeleteAttachmentResponse, InitializeUploadRequest, UploadSession
from tofupilot.resources.base import ResourceBase
from tofupilot.uploads import AttachmentUploader


class AttachmentsResource(ResourceBase):
    base_path = "/v2/attachments"

    def __init__(self, http_client, uploader: AttachmentUploader | None = None) -> None:
        super().__init__(http_client)
        self._uploader = uploader or AttachmentUploader(http_client)

    async def initialize(self, request: InitializeUploadRequest) -> UploadSession:
        return await self._http.post(self._path("initialize"), request, response_type=UploadSession)

    async def delete(self, attachment_id: str) -> DeleteAttachmentResponse:
        return await self._http.delete(self._path(attachment_id), response_type=DeleteAttachmentResponse)

    async def upload(self, path: str | os.PathLike, *, content_type: str | None = None) -> UploadSession:
        """Initialize and transfer a local file; link it with the owner's update call."""
        return await self._uploader.upload(path, content_type=content_type)
