"""Adapter implementations for hashedfs."""

from .cache_memory import MemoryNameCacheAdapter
from .hash_hashlib import HashlibAdapter, Sha256Adapter
from .logger_std import StdLoggerAdapter
from .metrics_logging import LoggingMetricsAdapter
from .metrics_noop import NoopMetricsAdapter
from .storage_local import LocalStorageAdapter
from .storage_memory import MemoryStorageAdapter
from .storage_s3 import S3StorageAdapter

__all__ = [
    "HashlibAdapter",
    "LocalStorageAdapter",
    "LoggingMetricsAdapter",
    "MemoryNameCacheAdapter",
    "MemoryStorageAdapter",
    "NoopMetricsAdapter",
    "S3StorageAdapter",
    "Sha256Adapter",
    "StdLoggerAdapter",
]
