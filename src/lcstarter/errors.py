"""Error types shared across lcstarter components."""

from __future__ import annotations


class StarterError(RuntimeError):
    """Base class for lcstarter failures."""


class ConfigurationError(StarterError):
    """Raised when the resolved configuration is missing or invalid."""


class NotInitializedError(StarterError):
    """Raised when a component is used before its initialization completed."""


class ConnectionFailedError(StarterError):
    """Raised when the model connection test does not succeed."""


__all__ = [
    "ConfigurationError",
    "ConnectionFailedError",
    "NotInitializedError",
    "StarterError",
]
