"""Client for the remote speech-transcription API."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import aiofiles
import httpx

from ..config import Settings
from .uploads import UploadedFile

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TranscriptionResult:
    """Parsed API answer; ``text`` is None when the service declined."""

    text: Optional[str]
    raw_response: Any

    @property
    def ok(self) -> bool:
        return self.text is not None


class TranscriptionClient:
    """Sends staged audio to a Whisper-compatible transcription endpoint."""

    def __init__(
        self,
        settings: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def transcribe(self, uploaded: UploadedFile) -> TranscriptionResult:
        """Convert the staged audio into a transcript with a single API call.

        The HTTP status is not inspected: error payloads from the service come
        back as a result without text so the caller can show them. Network and
        JSON decoding failures propagate.
        """

        api_key = self._settings.require_api_key()

        async with aiofiles.open(uploaded.temporary_path, mode="rb") as f:
            audio_bytes = await f.read()

        files = {
            "file": (
                uploaded.original_filename,
                audio_bytes,
                uploaded.declared_mime_type,
            ),
        }
        data = {"model": self._settings.transcription_model}
        headers = {"Authorization": f"Bearer {api_key}"}

        async with httpx.AsyncClient(
            timeout=self._settings.transcription_timeout,
            transport=self._transport,
        ) as client:
            resp = await client.post(
                self._settings.transcription_api_url,
                headers=headers,
                files=files,
                data=data,
            )
            payload = resp.json()

        logger.info("API response: %s", payload)
        return self._coerce_result(payload)

    @staticmethod
    def _coerce_result(payload: Any) -> TranscriptionResult:
        text = payload.get("text") if isinstance(payload, dict) else None
        if not isinstance(text, str) or not text:
            return TranscriptionResult(text=None, raw_response=payload)
        return TranscriptionResult(text=text, raw_response=payload)
