"""Backing storage port interface."""

from typing import BinaryIO, Protocol


class StoragePort(Protocol):
    """Port for the read-only backing file tree.

    Paths are slash-separated and relative to the store. Missing paths raise
    ``FileNotFoundError``; other read failures raise ``OSError``.
    """

    def open(self, path: str) -> BinaryIO:
        """Open path for binary reading."""
        ...

    def read(self, path: str) -> bytes:
        """Read the full content of path."""
        ...
