"""Local filesystem storage adapter."""

from pathlib import Path
from typing import BinaryIO


class LocalStorageAdapter:
    """Read-only view of a directory tree.

    Paths resolving outside the root are reported as missing.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()

    def open(self, path: str) -> BinaryIO:
        return self._resolve(path).open("rb")

    def read(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()

    def _resolve(self, path: str) -> Path:
        if not path or path.startswith("/"):
            raise FileNotFoundError(path)
        full = (self.root / path).resolve()
        if not full.is_relative_to(self.root):
            raise FileNotFoundError(path)
        return full
