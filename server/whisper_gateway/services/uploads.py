"""Staging of multipart audio uploads on the local filesystem."""
from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

import aiofiles
import aiofiles.os
from fastapi import UploadFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass(slots=True)
class UploadedFile:
    """Handle to an upload staged on disk plus the client-declared metadata."""

    temporary_path: Path
    original_filename: str
    declared_mime_type: str


class UploadReceiver:
    """Streams an incoming upload into the uploads directory under a random name."""

    def __init__(self, uploads_dir: Path) -> None:
        self._uploads_dir = Path(uploads_dir)

    async def receive(self, upload: UploadFile) -> UploadedFile:
        await aiofiles.os.makedirs(self._uploads_dir, exist_ok=True)
        target = self._uploads_dir / uuid.uuid4().hex

        try:
            async with aiofiles.open(target, mode="wb") as f:
                while chunk := await upload.read(CHUNK_SIZE):
                    await f.write(chunk)
        except BaseException:
            # Callers never see a partially written upload.
            await asyncio.to_thread(target.unlink, missing_ok=True)
            raise

        uploaded = UploadedFile(
            temporary_path=target,
            original_filename=upload.filename or target.name,
            # Not checked against the actual content.
            declared_mime_type=upload.content_type or "application/octet-stream",
        )
        logger.info(
            "Uploaded file: %s, MIME type: %s",
            uploaded.original_filename,
            uploaded.declared_mime_type,
        )
        return uploaded

    async def discard(self, uploaded: UploadedFile) -> None:
        """Remove a staged upload once the request no longer needs it."""

        await asyncio.to_thread(uploaded.temporary_path.unlink, missing_ok=True)
        logger.debug("Discarded staged upload %s", uploaded.temporary_path)
