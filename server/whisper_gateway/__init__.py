"""Whisper gateway package bootstrap hooks.

Importing the package pulls ``OPENAI_API_KEY`` and the other gateway knobs
(``UPLOADS_DIR``, ``PERSIST_TRANSCRIPTS``...) from ``server/.env`` into the
process environment before ``whisper_gateway.config`` reads them.
"""
from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


_SERVER_DIR = Path(__file__).resolve().parent.parent

# .env.local wins over .env so a developer can keep a personal API key out of the shared file.
load_dotenv(_SERVER_DIR / ".env")
load_dotenv(_SERVER_DIR / ".env.local", override=True)
