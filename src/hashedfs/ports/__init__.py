"""Port interfaces for hashedfs."""

from .cache import NameCachePort
from .hash import HashPort
from .logger import LoggerPort
from .metrics import MetricsPort
from .storage import StoragePort

__all__ = [
    "HashPort",
    "LoggerPort",
    "MetricsPort",
    "NameCachePort",
    "StoragePort",
]
