"""Shorten and redirect workflows.

Both workflows return either a value or a ``Failure`` instead of raising,
and the API layer turns failures into HTTP responses in one place.

Shortening is a two-phase write: the link is inserted with no short code,
the assigned id is encoded, and the code is written back. The two writes
are not one transaction. If the second one never lands the row keeps a
NULL ``short_url``; that is harmless because redirects decode the code to
an id and never read ``short_url``. ``backfill_missing_codes`` repairs
such rows.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from fastapi import Request

from ..core.config import Settings
from ..core.database import Database
from ..core.exceptions import ConfigurationError, StorageError
from ..utils.codec import LinkCodec
from ..utils.shortener import is_code_segment, validate_long_url

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Short URL not found"


class ErrorKind(str, Enum):
    """Failure categories reported to clients."""

    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    STORAGE = "storage_error"
    CONFIGURATION = "configuration_error"


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ShortenedLink:
    link_id: int
    short_code: str
    long_url: str
    title: Optional[str] = None


@dataclass(frozen=True)
class ResolvedLink:
    link_id: int
    long_url: str


class LinkService:
    """Compose the codec and the link store into the public operations."""

    def __init__(self, db: Database, codec: LinkCodec, settings: Settings):
        self.db = db
        self.codec = codec
        self.max_url_length = settings.max_url_length
        self.allowed_url_schemes = tuple(settings.allowed_url_schemes)
        self.write_attempts = max(1, settings.short_code_write_attempts)

    @classmethod
    def from_settings(cls, settings: Settings, db: Optional[Database] = None) -> "LinkService":
        """Build the service from settings.

        Raises:
            ConfigurationError: If the hash secret or database location is missing.
        """
        if not settings.hash_secret:
            raise ConfigurationError("HASH_SECRET is not set")
        if db is None:
            if not settings.database_url:
                raise ConfigurationError("DATABASE_URL is not set")
            db = Database(settings.database_url)
        codec = LinkCodec(
            settings.hash_secret,
            min_length=settings.hash_min_length,
            alphabet=settings.hash_alphabet,
        )
        return cls(db, codec, settings)

    def shorten(
        self, long_url: object, title: Optional[str] = None
    ) -> Union[ShortenedLink, Failure]:
        """Store a long URL and derive its short code.

        Args:
            long_url: The long URL to shorten.
            title: Optional descriptive title.

        Returns:
            The created link, or a Failure.
        """
        is_valid, error = validate_long_url(
            long_url, self.max_url_length, self.allowed_url_schemes
        )
        if not is_valid:
            return Failure(ErrorKind.VALIDATION, error)
        title = title or None

        # Phase 1. Never retried: a retry could store the link twice.
        try:
            link_id = self.db.insert_link(long_url, title)
        except StorageError:
            return Failure(ErrorKind.STORAGE, "Could not save the link")

        short_code = self.codec.encode(link_id)

        # Phase 2. Until this lands the row has a NULL short_url but still
        # resolves, since redirects look up by decoded id.
        for attempt in range(1, self.write_attempts + 1):
            try:
                updated = self.db.set_short_code(link_id, short_code)
            except StorageError:
                logger.warning(
                    f"Short code write for link {link_id} failed "
                    f"(attempt {attempt}/{self.write_attempts})"
                )
                continue
            if not updated:
                logger.error(f"Link {link_id} vanished before its short code was written")
                return Failure(ErrorKind.STORAGE, "Could not save the link")
            break
        else:
            logger.warning(f"Link {link_id} left without a short code")
            return Failure(ErrorKind.STORAGE, "Could not save the link")

        logger.info(f"Created short code {short_code} for link {link_id}")
        return ShortenedLink(
            link_id=link_id, short_code=short_code, long_url=long_url, title=title
        )

    def resolve(self, code: str) -> Union[ResolvedLink, Failure]:
        """Resolve a short code to its long URL.

        The stored short_url is not compared with the code: the codec only
        accepts the canonical encoding of an id, and rows whose code was
        never written must still resolve.

        Args:
            code: Short code taken from the request path.

        Returns:
            The resolved link, or a Failure.
        """
        if not is_code_segment(code):
            return Failure(ErrorKind.VALIDATION, "Invalid short code")

        link_id = self.codec.decode(code)
        if link_id is None:
            logger.debug(f"Rejected short code {code!r}")
            return Failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        try:
            long_url = self.db.get_long_url_by_id(link_id)
        except StorageError:
            return Failure(ErrorKind.STORAGE, "Could not look up the link")

        if long_url is None:
            return Failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        return ResolvedLink(link_id=link_id, long_url=long_url)

    def backfill_missing_codes(self, limit: int = 100) -> int:
        """Write short codes for links left half-created.

        Store failures are logged and skipped; the rows stay resolvable
        and are picked up again on the next run.

        Args:
            limit: Maximum number of links to repair in one call.

        Returns:
            Number of links repaired.
        """
        try:
            pending = self.db.get_links_missing_code(limit)
        except StorageError:
            logger.warning("Could not list links without a short code")
            return 0

        repaired = 0
        for link in pending:
            try:
                updated = self.db.set_short_code(link["id"], self.codec.encode(link["id"]))
            except StorageError:
                logger.warning(f"Could not backfill short code for link {link['id']}")
                continue
            if updated:
                repaired += 1
        if repaired:
            logger.info(f"Backfilled short codes for {repaired} links")
        return repaired


def get_link_service(request: Request) -> LinkService:
    """Get the link service for dependency injection.

    Raises:
        ConfigurationError: If the application started without one.
    """
    service = getattr(request.app.state, "link_service", None)
    if service is None:
        raise ConfigurationError("Link service is not configured")
    return service
