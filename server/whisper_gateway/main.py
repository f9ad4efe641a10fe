"""FastAPI application entrypoint for the Whisper transcription gateway."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .config import Settings, get_settings
from .models.schemas import HealthResponse
from .routers import transcription
from .services.persistence import TranscriptStore
from .services.transcription import TranscriptionClient
from .services.uploads import UploadReceiver

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; transcription requests will fail")
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Whisper Transcription Gateway",
        description="Uploads audio, forwards it to a transcription API and serves the transcript.",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.upload_receiver = UploadReceiver(settings.uploads_dir)
    application.state.transcription_client = TranscriptionClient(settings)
    application.state.transcript_store = TranscriptStore(settings.uploads_dir)

    application.include_router(transcription.router)

    @application.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Lightweight health endpoint for service discovery."""
        return HealthResponse()

    return application


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
