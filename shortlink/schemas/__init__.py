"""Schemas package for the shortlink service."""

from .url import (
    LinkCreateResponse,
    StatusResponse,
    HealthResponse,
)

__all__ = [
    "LinkCreateResponse",
    "StatusResponse",
    "HealthResponse",
]
