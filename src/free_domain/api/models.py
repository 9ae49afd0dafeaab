"""Pydantic models for API request/response schemas."""

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Body of POST /register. Presence is checked by the registrar."""

    domain: Optional[str] = None
    target: Optional[str] = None
    type: Optional[str] = None


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    provider_configured: bool
    metadata_store: str
