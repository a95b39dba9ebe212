"""Utils package for the shortlink service."""

from .codec import LinkCodec, encode_id, decode_code
from .shortener import (
    validate_long_url,
    is_code_segment,
    create_short_url,
)

__all__ = [
    "LinkCodec",
    "encode_id",
    "decode_code",
    "validate_long_url",
    "is_code_segment",
    "create_short_url",
]
