"""Response schemas for the shortlink service."""

from pydantic import BaseModel


class LinkCreateResponse(BaseModel):
    """Response model for a created short link."""

    short_code: str
    short_url: str
    original_url: str


class StatusResponse(BaseModel):
    """Response model for the service banner."""

    status: str


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
