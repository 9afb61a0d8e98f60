"""Centralized configuration for hashedfs."""

import os
from dataclasses import dataclass, field

from .errors import ConfigError

STORAGE_BACKENDS = ("local", "s3", "memory")
METRICS_BACKENDS = ("noop", "logging")


@dataclass(slots=True)
class HashedFSConfig:
    """All hashedfs configuration in one place.

    Environment variables (all optional):
        HFS_STORAGE:    Backing store: "local" (default), "s3" or "memory".
        HFS_ROOT:       Root directory of the local backing store. Default ".".
        HFS_S3_URL:     s3://bucket/prefix for the S3 backing store.
        HFS_ALGORITHM:  hashlib algorithm for digest tokens. Default "sha256".
        HFS_LOG_LEVEL:  Logging level. Default "INFO".
        HFS_METRICS:    Metrics backend: "noop" (default) or "logging".
    """

    storage: str = "local"
    root: str = "."
    s3_url: str | None = None
    algorithm: str = "sha256"
    log_level: str = "INFO"
    metrics_type: str = "noop"

    # Connection params (typically passed by CLI, not env vars)
    endpoint_url: str | None = field(default=None, repr=False)
    region: str | None = None
    profile: str | None = None

    def __post_init__(self) -> None:
        if self.storage not in STORAGE_BACKENDS:
            raise ConfigError(f"Unknown storage backend: {self.storage!r}")
        if self.metrics_type not in METRICS_BACKENDS:
            raise ConfigError(f"Unknown metrics backend: {self.metrics_type!r}")
        if self.storage == "s3" and not self.s3_url:
            raise ConfigError("S3 storage requires an s3:// URL")

    @classmethod
    def from_env(
        cls,
        *,
        log_level: str = "INFO",
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
    ) -> "HashedFSConfig":
        """Build config from environment variables + explicit overrides."""
        return cls(
            storage=os.environ.get("HFS_STORAGE", "local"),
            root=os.environ.get("HFS_ROOT", "."),
            s3_url=os.environ.get("HFS_S3_URL") or None,
            algorithm=os.environ.get("HFS_ALGORITHM", "sha256"),
            log_level=os.environ.get("HFS_LOG_LEVEL", log_level),
            metrics_type=os.environ.get("HFS_METRICS", "noop"),
            endpoint_url=endpoint_url,
            region=region,
            profile=profile,
        )


def parse_s3_url(url: str) -> tuple[str, str]:
    """Split s3://bucket/prefix into (bucket, prefix)."""
    if not url.startswith("s3://"):
        raise ConfigError(f"Invalid S3 URL: {url}")
    s3_path = url[5:].strip("/")
    parts = s3_path.split("/", 1)
    if not parts[0]:
        raise ConfigError(f"Invalid S3 URL: {url}")
    bucket = parts[0]
    prefix = parts[1] if len(parts) > 1 else ""
    return bucket, prefix
