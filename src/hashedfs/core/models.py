"""Core data models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Snapshot of name cache sizes."""

    digests: int
    hashed_names: int
