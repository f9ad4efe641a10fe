"""FastAPI dependency injection configuration.

Components are built once by the app factory and parked on ``app.state``;
these accessors hand them to route handlers, so tests can swap a component
by reassigning the matching ``app.state`` attribute.
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from .config import Settings
from .services.persistence import TranscriptStore
from .services.transcription import TranscriptionClient
from .services.uploads import UploadReceiver


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_upload_receiver(request: Request) -> UploadReceiver:
    return request.app.state.upload_receiver


def get_transcription_client(request: Request) -> TranscriptionClient:
    return request.app.state.transcription_client


def get_transcript_store(request: Request) -> TranscriptStore:
    return request.app.state.transcript_store


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ReceiverDep = Annotated[UploadReceiver, Depends(get_upload_receiver)]
ClientDep = Annotated[TranscriptionClient, Depends(get_transcription_client)]
StoreDep = Annotated[TranscriptStore, Depends(get_transcript_store)]
