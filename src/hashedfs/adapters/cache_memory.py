"""In-memory name cache adapter."""

from ..core.locks import RWLock


class MemoryNameCacheAdapter:
    """Digest and hashed-name indexes guarded by one reader/writer lock.

    Entries are only ever added; the table lives as long as the adapter.
    """

    def __init__(self) -> None:
        self._lock = RWLock()
        self._digests: dict[str, str] = {}  # "base.ext" -> token
        self._plains: dict[str, str] = {}  # "base.<token>.ext" -> "base.ext"

    def get_digest(self, plain: str) -> str | None:
        with self._lock.read():
            return self._digests.get(plain)

    def get_plain(self, hashed: str) -> str | None:
        with self._lock.read():
            return self._plains.get(hashed)

    def record(self, plain: str, digest: str, hashed: str) -> None:
        with self._lock.write():
            self._digests[plain] = digest
            self._plains[hashed] = plain

    def counts(self) -> tuple[int, int]:
        with self._lock.read():
            return len(self._digests), len(self._plains)
