"""Reversible short codes for link ids.

Link ids are encoded with Hashids under a server-held salt, so sequential
ids do not produce visibly sequential codes. This is obfuscation, not
encryption: anyone with oracle access can still map codes to ids.

Example:
    >>> encode_id(1, "secret")
    '2Kx2gzL'
    >>> decode_code("2Kx2gzL", "secret")
    1
"""

import string
from typing import Optional

from hashids import Hashids

from ..core.exceptions import ConfigurationError


# Base62, case-sensitive
DEFAULT_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
DEFAULT_MIN_LENGTH = 7
# Largest id a SQLite INTEGER column can hold
MAX_LINK_ID = 2**63 - 1


class LinkCodec:
    """Encode link ids to short codes and back under one salt."""

    def __init__(
        self,
        salt: Optional[str],
        min_length: int = DEFAULT_MIN_LENGTH,
        alphabet: str = DEFAULT_ALPHABET,
    ):
        """Build the codec.

        Args:
            salt: Secret salt. Required; there is no default.
            min_length: Minimum length of generated codes.
            alphabet: Symbols codes are drawn from.

        Raises:
            ConfigurationError: If the salt is missing or the alphabet is unusable.
        """
        if not salt:
            raise ConfigurationError("A hash secret is required to build short codes")
        if min_length < 0:
            raise ConfigurationError("Short code minimum length must not be negative")
        try:
            self._hashids = Hashids(salt=salt, min_length=min_length, alphabet=alphabet)
        except ValueError as e:
            raise ConfigurationError(f"Invalid short code alphabet: {e}") from e
        self.alphabet = alphabet
        self.min_length = min_length

    def encode(self, link_id: int) -> str:
        """Encode a positive link id.

        Raises:
            ValueError: If link_id is not a positive integer.
        """
        if isinstance(link_id, bool) or not isinstance(link_id, int) or link_id < 1:
            raise ValueError(f"Link id must be a positive integer, got {link_id!r}")
        return self._hashids.encode(link_id)

    def decode(self, code: str) -> Optional[int]:
        """Decode a short code back to its link id.

        Returns None for anything that is not the canonical encoding of a
        single positive id under this salt that fits the link store. Hashids
        re-encodes the decoded numbers and compares, so foreign symbols,
        tampered codes and codes built under another salt all end up here.
        """
        if not code or not isinstance(code, str):
            return None
        numbers = self._hashids.decode(code)
        if len(numbers) != 1 or not 1 <= numbers[0] <= MAX_LINK_ID:
            return None
        return numbers[0]


def encode_id(link_id: int, salt: str) -> str:
    """Encode a link id with the default alphabet and minimum length."""
    return LinkCodec(salt).encode(link_id)


def decode_code(code: str, salt: str) -> Optional[int]:
    """Decode a short code with the default alphabet and minimum length."""
    return LinkCodec(salt).decode(code)
