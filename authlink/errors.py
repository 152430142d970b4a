"""
Adapter errors.

The message of every error is part of the caller-facing contract and is
matched verbatim by existing callers.
"""


class AuthlinkError(Exception):
    """Base class for adapter failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(AuthlinkError):
    """An entity the caller expected to exist is absent."""


class PersistenceError(AuthlinkError):
    """A mutation returned no row or violated a storage constraint."""


__all__ = ["AuthlinkError", "NotFoundError", "PersistenceError"]
