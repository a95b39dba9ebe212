"""Pydantic request models for the shortlink service."""

from typing import Optional
from pydantic import BaseModel, Field


class LinkCreate(BaseModel):
    """Model for creating a short link.

    The URL is validated by the shorten workflow so that a missing or
    malformed value is reported the same way as any other bad input.
    """

    url: Optional[str] = Field(None, description="The long URL to shorten")
    title: Optional[str] = Field(None, description="Optional descriptive title")


class ErrorResponse(BaseModel):
    """Model for error responses."""

    detail: str
    error_code: Optional[str] = None
