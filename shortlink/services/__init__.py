"""Services package - shorten and redirect workflows."""

from .links import (
    ErrorKind,
    Failure,
    LinkService,
    ResolvedLink,
    ShortenedLink,
    get_link_service,
)

__all__ = [
    "ErrorKind",
    "Failure",
    "LinkService",
    "ResolvedLink",
    "ShortenedLink",
    "get_link_service",
]
