"""Hash port interface."""

from typing import Protocol


class HashPort(Protocol):
    """Port for content digests."""

    @property
    def algorithm(self) -> str:
        """Name of the digest algorithm."""
        ...

    def hexdigest(self, data: bytes) -> str:
        """Return the lowercase hex digest of data."""
        ...
