from __future__ import annotations


class CanonCacheError(Exception):
    """Base error for the canonicalization cache server."""


class ValidationError(CanonCacheError):
    """Raised when user input or configuration is invalid."""


class AccessDeniedError(CanonCacheError):
    """Raised when a path resolves outside the project root."""


class NotFoundError(CanonCacheError):
    """Raised when a path to delete or rename does not exist."""
