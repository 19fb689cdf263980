"""Attachment upload orchestration.

Uploading one attachment takes three calls:

1. POST the file metadata to ``/v2/attachments/initialize`` and receive an
   ``UploadSession`` with a presigned storage URL.
2. PUT the raw bytes to that URL (straight to storage, no API auth, no retry).
3. Link the upload id to its owner, e.g. ``PATCH /v2/runs/{id}``.

Any failing step aborts the whole operation. Partially initialized
uploads are left for the server to expire.
"""

import logging
import mimetypes
import os
from collections.abc import Awaitable, Callable, Iterable
from pathlib import Path
from typing import Any

from tofupilot.config import MAX_ATTACHMENTS, MAX_FILE_SIZE
from tofupilot.errors.exceptions import (
    AttachmentNotFoundError,
    AttachmentTooLargeError,
    TooManyAttachmentsError,
)
from tofupilot.http_client import TofuPilotHttpClient
from tofupilot.models.attachments import InitializeUploadRequest, UploadSession

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

LinkCallback = Callable[[str], Awaitable[Any]]


def guess_content_type(path: str | os.PathLike) -> str:
    content_type, _ = mimetypes.guess_type(os.fspath(path))
    return content_type or DEFAULT_CONTENT_TYPE


def validate_attachments(
    paths: Iterable[str | os.PathLike],
    *,
    max_attachments: int = MAX_ATTACHMENTS,
    max_file_size: int = MAX_FILE_SIZE,
) -> list[Path]:
    """Check every file before anything is sent.

    Args:
        paths: Files to upload
        max_attachments: Maximum number of files
        max_file_size: Maximum size of a single file in bytes

    Returns:
        The paths as ``Path`` objects, in input order

    Raises:
        TooManyAttachmentsError: More than ``max_attachments`` files
        AttachmentNotFoundError: A file does not exist
        AttachmentTooLargeError: A file is larger than ``max_file_size``
    """
    files = [Path(p) for p in paths]

    if len(files) > max_attachments:
        raise TooManyAttachmentsError(
            f"Cannot upload more than {max_attachments} attachments (got {len(files)})",
            count=len(files),
            limit=max_attachments,
        )

    for path in files:
        if not path.is_file():
            raise AttachmentNotFoundError(f"File not found: {path}", path=str(path))

        size = path.stat().st_size
        if size > max_file_size:
            max_size_mb = max_file_size / (1024 * 1024)
            raise AttachmentTooLargeError(
                f"File {path} exceeds maximum size of {max_size_mb:g} MB",
                path=str(path),
                size=size,
                limit=max_file_size,
            )

    return files


class AttachmentUploader:
    """Runs the initialize → transfer → link protocol for local files.

    Args:
        http_client: Client used for the API calls and the storage PUT
        max_attachments: Maximum files per ``upload_and_link`` call
        max_file_size: Maximum size of a single file in bytes
    """

    INITIALIZE_PATH = "/v2/attachments/initialize"

    def __init__(
        self,
        http_client: TofuPilotHttpClient,
        *,
        max_attachments: int = MAX_ATTACHMENTS,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        self._http = http_client
        self.max_attachments = max_attachments
        self.max_file_size = max_file_size

    async def initialize(self, name: str, content_type: str | None = None, file_size: int | None = None) -> UploadSession:
        request = InitializeUploadRequest(name=name, content_type=content_type, file_size=file_size)
        return await self._http.post(self.INITIALIZE_PATH, request, response_type=UploadSession)

    async def upload(self, path: str | os.PathLike, *, content_type: str | None = None) -> UploadSession:
        """Initialize and transfer a single file without linking it.

        Returns:
            The session whose ``upload_id`` identifies the stored object
        """
        (file_path,) = validate_attachments([path], max_attachments=1, max_file_size=self.max_file_size)
        return await self._upload(file_path, content_type)

    async def upload_and_link(self, paths: Iterable[str | os.PathLike], link: LinkCallback) -> list[str]:
        """Upload several files, linking each one as soon as it is stored.

        All files are validated before the first request. Files are
        processed in order and the first failure aborts the rest.

        Args:
            paths: Files to upload
            link: Coroutine function called with each upload id

        Returns:
            Upload ids in input order
        """
        files = validate_attachments(paths, max_attachments=self.max_attachments, max_file_size=self.max_file_size)

        upload_ids = []
        for file_path in files:
            session = await self._upload(file_path, None)
            await link(session.upload_id)
            upload_ids.append(session.upload_id)

        return upload_ids

    async def _upload(self, file_path: Path, content_type: str | None) -> UploadSession:
        content_type = content_type or guess_content_type(file_path)

        session = await self.initialize(file_path.name, content_type, file_path.stat().st_size)

        with file_path.open("rb") as fh:
            content = fh.read()

        await self._http.put_presigned(session.upload_url, content, content_type)
        logger.debug(f"Uploaded {file_path.name} as {session.upload_id}")
        return session
