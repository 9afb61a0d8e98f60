"""Core domain logic for hashedfs."""

from .config import HashedFSConfig, parse_s3_url
from .errors import ConfigError, HashedFSError, NotFoundError
from .locks import RWLock
from .models import CacheStats
from .naming import build_hashed_name, ext, split_hashed_name
from .service import HashedFS

__all__ = [
    "CacheStats",
    "ConfigError",
    "HashedFS",
    "HashedFSConfig",
    "HashedFSError",
    "NotFoundError",
    "RWLock",
    "build_hashed_name",
    "ext",
    "parse_s3_url",
    "split_hashed_name",
]
