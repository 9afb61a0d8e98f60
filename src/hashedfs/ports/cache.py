"""Name cache port interface."""

from typing import Protocol


class NameCachePort(Protocol):
    """Port for the digest/hashed-name table.

    One logical table indexed two ways: by plain path (yielding the digest)
    and by hashed path (yielding the plain path).
    """

    def get_digest(self, plain: str) -> str | None:
        """Get cached digest for a plain path."""
        ...

    def get_plain(self, hashed: str) -> str | None:
        """Get plain path a trusted hashed path maps to."""
        ...

    def record(self, plain: str, digest: str, hashed: str) -> None:
        """Record both index entries in one critical section."""
        ...

    def counts(self) -> tuple[int, int]:
        """Return (digest entries, hashed-name entries)."""
        ...
