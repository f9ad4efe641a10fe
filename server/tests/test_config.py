from __future__ import annotations

import importlib
import os
from pathlib import Path

import pytest

import whisper_gateway.config as config
from whisper_gateway.exceptions import MissingCredentialError


def _restore(name: str, original: str | None) -> None:
    if original is None:
        os.environ.pop(name, None)
    else:
        os.environ[name] = original


def test_settings_reads_transcription_env(monkeypatch):
    names = ("TRANSCRIPTION_MODEL", "UPLOADS_DIR", "PORT", "PERSIST_TRANSCRIPTS")
    originals = {name: os.environ.get(name) for name in names}
    monkeypatch.setenv("TRANSCRIPTION_MODEL", "whisper-large-v3")
    monkeypatch.setenv("UPLOADS_DIR", "/srv/transcripts")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PERSIST_TRANSCRIPTS", "no")

    reloaded = importlib.reload(config)

    try:
        settings = reloaded.Settings()
        assert settings.transcription_model == "whisper-large-v3"
        assert settings.uploads_dir == Path("/srv/transcripts")
        assert settings.port == 8080
        assert settings.persist_transcripts is False
    finally:
        for name, original in originals.items():
            _restore(name, original)
        importlib.reload(config)


def test_settings_defaults_match_openai_whisper(monkeypatch):
    names = ("TRANSCRIPTION_API_URL", "TRANSCRIPTION_MODEL", "PORT", "KEEP_UPLOADS")
    originals = {name: os.environ.get(name) for name in names}
    for name in names:
        monkeypatch.delenv(name, raising=False)

    reloaded = importlib.reload(config)

    try:
        settings = reloaded.Settings()
        assert settings.transcription_api_url == "https://api.openai.com/v1/audio/transcriptions"
        assert settings.transcription_model == "whisper-1"
        assert settings.port == 3000
        assert settings.keep_uploads is False
    finally:
        for name, original in originals.items():
            _restore(name, original)
        importlib.reload(config)


def test_require_api_key_needs_presence() -> None:
    assert config.Settings(openai_api_key="sk-test").require_api_key() == "sk-test"

    with pytest.raises(MissingCredentialError) as excinfo:
        config.Settings(openai_api_key=None).require_api_key()
    assert excinfo.value.variable == "OPENAI_API_KEY"
    with pytest.raises(MissingCredentialError):
        config.Settings(openai_api_key="").require_api_key()


def test_get_settings_is_cached() -> None:
    assert config.get_settings() is config.get_settings()
