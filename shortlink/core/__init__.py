"""Core package - configuration, errors and database utilities."""

from .config import Settings, get_settings
from .database import Database, get_test_db
from .exceptions import ConfigurationError, ShortlinkError, StorageError

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "get_test_db",
    "ConfigurationError",
    "ShortlinkError",
    "StorageError",
]
