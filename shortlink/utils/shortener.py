"""URL shortening utilities module.

This module handles validation of incoming long URLs and code path
segments, and building public short URLs.
"""

import re
from typing import Iterable, Tuple
from urllib.parse import urlparse


# Trailing ".ext" on a path segment, e.g. favicon.ico or robots.txt
_EXTENSION_SUFFIX = re.compile(r"\.[A-Za-z0-9]+$")


def validate_long_url(
    url: object, max_length: int, allowed_schemes: Iterable[str]
) -> Tuple[bool, str]:
    """Validate a long URL before it is stored.

    Args:
        url: The URL to validate.
        max_length: Maximum accepted length.
        allowed_schemes: Accepted URL schemes.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > max_length:
        return False, f"URL is too long (max {max_length} characters)"

    if url != url.strip() or any(ch.isspace() for ch in url):
        return False, "Invalid URL format"

    try:
        result = urlparse(url)
        # Accessing port validates it
        result.port
    except ValueError:
        return False, "Invalid URL format"

    if not result.scheme or not result.netloc or not result.hostname:
        return False, "Invalid URL format"

    if result.scheme.lower() not in {scheme.lower() for scheme in allowed_schemes}:
        return False, "URL scheme is not allowed"

    return True, ""


def is_code_segment(segment: str) -> bool:
    """Check whether a path segment can be a short code at all.

    Segments with path separators or a file-extension suffix can never
    be produced by the codec alphabet.

    Args:
        segment: Path segment taken from the request.

    Returns:
        True if the segment is worth decoding, False otherwise.
    """
    if not segment:
        return False
    if "/" in segment or "\\" in segment:
        return False
    if _EXTENSION_SUFFIX.search(segment):
        return False
    return True


def create_short_url(base_url: str, short_code: str) -> str:
    """Create full short URL from base URL and short code.

    Args:
        base_url: Base URL of the service.
        short_code: Short code.

    Returns:
        Full short URL string.
    """
    return f"{base_url.rstrip('/')}/{short_code}"
