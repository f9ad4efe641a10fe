"""Flat-file storage for finished transcripts."""
from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os

from ..exceptions import InvalidTranscriptNameError, TranscriptNotFoundError

logger = logging.getLogger(__name__)

NAME_WORD_COUNT = 3
TIMESTAMP_FORMAT = "%Y-%m-%d--%M-%S"
TRANSCRIPT_SUFFIX = ".txt"
_UNSAFE_NAME_CHARS = re.compile(r"[^\w\-]")


@dataclass(slots=True)
class TranscriptFile:
    """A transcript written to the uploads directory."""

    filename: str
    content: str
    path: Path


def build_transcript_filename(text: str, now: Optional[datetime] = None) -> str:
    """Name a transcript after its leading words and the current time.

    ``"The quick brown fox"`` saved at 2024-05-01 10:07:09 becomes
    ``The_quick_brown_2024-05-01--07-09.txt``. Characters that could form a
    path are stripped from each word.
    """

    words = [_UNSAFE_NAME_CHARS.sub("", word) for word in text.split()[:NAME_WORD_COUNT]]
    stem = "_".join(word for word in words if word) or "transcript"
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"{stem}_{stamp}{TRANSCRIPT_SUFFIX}"


class TranscriptStore:
    """Writes transcripts to, and resolves downloads from, one directory."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    async def save(self, text: str, *, now: Optional[datetime] = None) -> TranscriptFile:
        """Persist ``text`` verbatim; same name within one second overwrites."""

        filename = build_transcript_filename(text, now)
        await aiofiles.os.makedirs(self._root, exist_ok=True)
        path = self._root / filename

        async with aiofiles.open(path, mode="w", encoding="utf-8") as f:
            await f.write(text)

        logger.info("Saved transcription file: %s (%d chars)", filename, len(text))
        return TranscriptFile(filename=filename, content=text, path=path)

    async def resolve(self, file_name: str) -> Path:
        """Map a client-supplied name onto an existing transcript file."""

        return await asyncio.to_thread(self._locate, file_name)

    def _locate(self, file_name: str) -> Path:
        if (
            not file_name
            or file_name.startswith(".")
            or any(sep in file_name for sep in ("/", "\\", "\x00"))
            or not file_name.endswith(TRANSCRIPT_SUFFIX)
        ):
            raise InvalidTranscriptNameError(file_name)

        root = self._root.resolve()
        candidate = (root / file_name).resolve()
        if candidate.parent != root:
            raise InvalidTranscriptNameError(file_name)
        if not candidate.is_file():
            raise TranscriptNotFoundError(file_name)
        return candidate
