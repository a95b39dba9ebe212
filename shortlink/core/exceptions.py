"""Exceptions raised by the shortlink core."""


class ShortlinkError(Exception):
    """Base class for shortlink errors."""


class ConfigurationError(ShortlinkError):
    """Required configuration (store handle, hash secret) is missing or unusable."""


class StorageError(ShortlinkError):
    """The link store could not complete a read or write."""
