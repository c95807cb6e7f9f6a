"""Custom exceptions for schematics-trigger."""

from __future__ import annotations


class SchematicsTriggerError(Exception):
    """Base exception for all schematics-trigger errors."""

    pass


class TransportError(SchematicsTriggerError):
    """Raised when a request cannot be built, sent, or read."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} failed: {reason}")


class ConfigurationError(SchematicsTriggerError):
    """Raised when environment settings are invalid."""

    pass
