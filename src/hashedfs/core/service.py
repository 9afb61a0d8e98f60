"""Core HashedFS service."""

import time
from typing import BinaryIO

from ..ports import HashPort, LoggerPort, MetricsPort, NameCachePort, StoragePort
from .errors import NotFoundError
from .models import CacheStats
from .naming import build_hashed_name, split_hashed_name


class HashedFS:
    """Read-only view of a backing store under content-hashed names.

    ``hashed_name("app.js")`` gives ``"app.<sha256>.js"`` and ``open`` of that
    name serves ``app.js`` only while its bytes still hash to the embedded
    token. Safe for concurrent use from multiple threads.
    """

    def __init__(
        self,
        storage: StoragePort,
        hasher: HashPort,
        cache: NameCachePort,
        logger: LoggerPort,
        metrics: MetricsPort,
    ):
        self.storage = storage
        self.hasher = hasher
        self.cache = cache
        self.logger = logger
        self.metrics = metrics

    def digest(self, path: str) -> str:
        """Return the digest token of path, or "" if it cannot be read."""
        token = self.cache.get_digest(path)
        if token is not None:
            self.metrics.increment("hashedfs.digest.hit")
            return token
        self.metrics.increment("hashedfs.digest.miss")
        token = self._compute(path)
        if not token:
            return ""
        self.cache.record(path, token, build_hashed_name(path, token))
        return token

    def hashed_name(self, path: str) -> str:
        """Return path with its digest token embedded, or "" on failure."""
        token = self.digest(path)
        if not token:
            return ""
        return build_hashed_name(path, token)

    def open(self, name: str) -> BinaryIO:
        """Open a hashed path, verifying its token against the plain file.

        Raises:
            NotFoundError: name carries no token, the plain file is missing,
                or its current digest differs from the token.
        """
        plain = self.cache.get_plain(name)
        if plain is not None:
            self.metrics.increment("hashedfs.open.trusted")
            return self._open_plain(name, plain)

        parts = split_hashed_name(name)
        if parts is None:
            # Needs at least one extension to carry a token.
            raise self._rejected(name, "no extension")
        plain, candidate = parts

        # Always verified against live bytes, even if the digest is cached.
        token = self._compute(plain)
        if not token or token != candidate:
            raise self._rejected(name, "digest mismatch" if token else "plain file unreadable")

        self.cache.record(plain, token, name)
        self.metrics.increment("hashedfs.open.verified")
        self.logger.debug("Verified hashed name", name=name, plain=plain)
        return self._open_plain(name, plain)

    def read_bytes(self, name: str) -> bytes:
        """Open a hashed path and return its full content."""
        with self.open(name) as f:
            return f.read()

    def stats(self) -> CacheStats:
        """Return current name cache sizes."""
        digests, hashed_names = self.cache.counts()
        return CacheStats(digests=digests, hashed_names=hashed_names)

    def _open_plain(self, name: str, plain: str) -> BinaryIO:
        try:
            return self.storage.open(plain)
        except OSError as e:
            # Vanished or unreadable since it was trusted or verified.
            raise self._rejected(name, "plain file unreadable") from e

    def _compute(self, path: str) -> str:
        start = time.perf_counter()
        try:
            data = self.storage.read(path)
        except OSError as e:
            self.metrics.increment("hashedfs.digest.error")
            self.logger.debug("Cannot read file for digest", path=path, error=str(e))
            return ""
        token = self.hasher.hexdigest(data)
        self.metrics.timing(
            "hashedfs.digest.duration",
            time.perf_counter() - start,
            tags={"algorithm": self.hasher.algorithm},
        )
        return token

    def _rejected(self, name: str, reason: str) -> NotFoundError:
        self.metrics.increment("hashedfs.open.rejected")
        self.logger.debug("Rejected hashed name", name=name, reason=reason)
        return NotFoundError(name)
