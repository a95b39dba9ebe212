"""Shortlink - URL shortening edge service."""

__version__ = "0.1.0"
