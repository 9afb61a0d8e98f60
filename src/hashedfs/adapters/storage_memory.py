"""In-memory storage adapter."""

import io
from collections.abc import Mapping
from typing import BinaryIO


class MemoryStorageAdapter:
    """Backing store over a mapping of path -> bytes.

    ``reads`` counts calls to ``read`` so callers can observe cache hits.
    """

    def __init__(self, files: Mapping[str, bytes] | None = None):
        self.files: dict[str, bytes] = dict(files or {})
        self.reads = 0

    def open(self, path: str) -> BinaryIO:
        return io.BytesIO(self._get(path))

    def read(self, path: str) -> bytes:
        self.reads += 1
        return self._get(path)

    def _get(self, path: str) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None
