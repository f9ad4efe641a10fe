"""Configuration helpers for the transcription gateway."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .exceptions import MissingCredentialError


DEFAULT_TRANSCRIPTION_API_URL = "https://api.openai.com/v1/audio/transcriptions"


def _getenv_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _getenv_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return float(value)


def _getenv_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


@dataclass
class Settings:
    """Centralized environment-driven configuration.

    Defaults are read from the environment when this module is imported; pass
    explicit values to the constructor to override them (tests do this).
    """

    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
    transcription_api_url: str = os.getenv("TRANSCRIPTION_API_URL", DEFAULT_TRANSCRIPTION_API_URL)
    transcription_model: str = os.getenv("TRANSCRIPTION_MODEL", "whisper-1")
    transcription_timeout: float = _getenv_float("TRANSCRIPTION_TIMEOUT", 300.0)
    uploads_dir: Path = Path(os.getenv("UPLOADS_DIR", "uploads"))
    # Save transcripts and offer a download link after each transcription.
    persist_transcripts: bool = _getenv_bool("PERSIST_TRANSCRIPTS", True)
    # Leave staged audio uploads on disk after the request finishes.
    keep_uploads: bool = _getenv_bool("KEEP_UPLOADS", False)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = _getenv_int("PORT", 3000)

    def require_api_key(self) -> str:
        """Return the bearer credential, failing when it was never configured."""

        if not self.openai_api_key:
            raise MissingCredentialError("OPENAI_API_KEY")
        return self.openai_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance to avoid repeated environment reads."""

    return Settings()
