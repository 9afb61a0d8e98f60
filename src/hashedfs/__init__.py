"""hashedfs - Content-hashed filenames over a read-only file tree."""

try:
    from ._version import version as __version__
except ImportError:
    # Package is not installed, so version is not available
    __version__ = "0.0.0+unknown"

from .core import HashedFS, HashedFSConfig, HashedFSError, NotFoundError
from .factory import create_hashed_fs

__all__ = [
    "HashedFS",
    "HashedFSConfig",
    "HashedFSError",
    "NotFoundError",
    "__version__",
    "create_hashed_fs",
]
