"""Upload form, transcription and transcript download endpoints."""
from __future__ import annotations

import html
import json
import logging
from typing import Any, Optional
from urllib.parse import quote

from fastapi import APIRouter, UploadFile
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from ..dependencies import ClientDep, ReceiverDep, SettingsDep, StoreDep
from ..exceptions import InvalidTranscriptNameError, TranscriptNotFoundError
from ..models.schemas import ErrorResponse
from ..services.uploads import UploadedFile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transcription"])

TRANSCRIPTION_ERROR = "An error occurred during transcription"

UPLOAD_FORM_HTML = """
<h1>Whisper Transcription</h1>
<form action="/transcribe" method="POST" enctype="multipart/form-data">
    <input type="file" name="audio" accept="audio/*" required />
    <button type="submit">Upload and Transcribe</button>
</form>
"""


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _render_result(text: str, download_name: Optional[str]) -> str:
    page = f"<h1>Transcription Result:</h1><p>{html.escape(text, quote=False)}</p>"
    if download_name:
        href = f"/download-transcription/{quote(download_name)}"
        page += f'<a href="{href}" download>Download transcription</a>'
    return page


def _render_failure(payload: Any) -> str:
    # Compact separators mirror what browsers produce with JSON.stringify.
    body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return f"<h1>Transcription Failed</h1><p>{html.escape(body, quote=False)}</p>"


@router.get("/", response_class=HTMLResponse)
async def upload_form() -> str:
    """Serve the static audio upload form."""

    return UPLOAD_FORM_HTML


@router.post(
    "/transcribe",
    response_class=HTMLResponse,
    responses={500: {"model": ErrorResponse}},
)
async def transcribe(
    audio: UploadFile,
    settings: SettingsDep,
    receiver: ReceiverDep,
    client: ClientDep,
    store: StoreDep,
):
    """Transcribe an uploaded audio file and render the text.

    A service answer without text is still a 200 page showing the raw payload;
    only exceptions turn into the 500 JSON error.
    """

    uploaded: Optional[UploadedFile] = None
    try:
        uploaded = await receiver.receive(audio)
        result = await client.transcribe(uploaded)

        if not result.ok:
            return HTMLResponse(_render_failure(result.raw_response))

        download_name = None
        if settings.persist_transcripts:
            transcript = await store.save(result.text)
            download_name = transcript.filename
        return HTMLResponse(_render_result(result.text, download_name))
    except Exception:
        logger.exception("Transcription request failed")
        return _error_response(500, TRANSCRIPTION_ERROR)
    finally:
        if uploaded is not None and not settings.keep_uploads:
            await receiver.discard(uploaded)


@router.get(
    "/download-transcription/{file_name}",
    response_class=FileResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def download_transcription(file_name: str, store: StoreDep):
    """Send a saved transcript back as an attachment."""

    try:
        path = await store.resolve(file_name)
    except InvalidTranscriptNameError as e:
        logger.warning("Download rejected: %s", e)
        return _error_response(400, "Invalid transcript name")
    except TranscriptNotFoundError as e:
        logger.warning("Download failed: %s", e)
        return _error_response(404, "Transcript not found")

    return FileResponse(path, filename=path.name, media_type="text/plain")
