"""Core exceptions for hashedfs."""

import errno


class HashedFSError(Exception):
    """Base exception for hashedfs errors."""


class NotFoundError(HashedFSError, FileNotFoundError):
    """Requested hashed path cannot be served.

    Raised for a missing extension, a missing backing file and a digest
    mismatch alike. Only the requested path is kept.
    """

    def __init__(self, path: str):
        super().__init__(errno.ENOENT, "file does not exist", path)
        self.path = path


class ConfigError(HashedFSError, ValueError):
    """Invalid hashedfs configuration."""
