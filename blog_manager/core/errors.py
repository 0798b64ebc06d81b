"""Error hierarchy for storage, invariants and input validation.

Read-side storage errors (unavailable, corrupt) are caught by the store and
turned into empty results. Write-side errors and invariant violations always
reach the caller.
"""
from __future__ import annotations


class BlogManagerError(Exception):
    """Base exception for the Blog Manager backend."""


class StorageError(BlogManagerError):
    """Base exception for key-value backend failures."""


class StorageUnavailableError(StorageError):
    """Raised when the backing store cannot be reached or opened."""


class StorageCorruptError(StorageError):
    """Raised when a stored value cannot be parsed."""


class StorageWriteError(StorageError):
    """Raised when a write to the backing store fails.

    The message is the user-facing label ("Failed to save blog", ...).
    """


class StorageQuotaExceeded(StorageWriteError):
    """Raised by size-limited backends when a write would exceed the quota."""


class InvariantViolation(BlogManagerError):
    """Raised when an operation would break a store invariant."""


class ActiveThemeError(InvariantViolation):
    """Raised when trying to delete the theme currently marked active."""

    def __init__(self, message: str = "Cannot delete the active theme"):
        super().__init__(message)


class ValidationError(BlogManagerError):
    """Raised when editor input does not satisfy the required fields."""


class NotFoundError(BlogManagerError):
    """Raised when a post, category or theme id does not exist."""
