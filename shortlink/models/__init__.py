"""Models package for the shortlink service."""

from .url import LinkCreate, ErrorResponse

__all__ = ["LinkCreate", "ErrorResponse"]
