"""Pydantic models describing JSON response payloads."""
from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every JSON error answer."""

    error: str = Field(..., description="Human readable error message")


class HealthResponse(BaseModel):
    """Lightweight status payload for service discovery."""

    service: str = "whisper-gateway"
    status: str = "ok"
