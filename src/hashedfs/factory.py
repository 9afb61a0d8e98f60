"""Adapter wiring for HashedFS."""

from .adapters import (
    HashlibAdapter,
    LocalStorageAdapter,
    LoggingMetricsAdapter,
    MemoryNameCacheAdapter,
    MemoryStorageAdapter,
    NoopMetricsAdapter,
    S3StorageAdapter,
    Sha256Adapter,
    StdLoggerAdapter,
)
from .core import HashedFS, HashedFSConfig, parse_s3_url
from .ports import HashPort, MetricsPort, StoragePort


def create_storage(config: HashedFSConfig) -> StoragePort:
    """Create the backing store adapter named by config."""
    if config.storage == "s3":
        bucket, prefix = parse_s3_url(config.s3_url or "")
        return S3StorageAdapter(
            bucket,
            prefix,
            endpoint_url=config.endpoint_url,
            region=config.region,
            profile=config.profile,
        )
    if config.storage == "memory":
        return MemoryStorageAdapter()
    return LocalStorageAdapter(config.root)


def create_hashed_fs(
    config: HashedFSConfig | None = None,
    storage: StoragePort | None = None,
) -> HashedFS:
    """Create a HashedFS with wired adapters.

    Args:
        config: Settings; read from the environment when omitted.
        storage: Backing store to wrap instead of the one config names.
    """
    if config is None:
        config = HashedFSConfig.from_env()

    logger = StdLoggerAdapter(level=config.log_level)
    hasher: HashPort = (
        Sha256Adapter() if config.algorithm == "sha256" else HashlibAdapter(config.algorithm)
    )
    metrics: MetricsPort = (
        LoggingMetricsAdapter(logger) if config.metrics_type == "logging" else NoopMetricsAdapter()
    )
    if storage is None:
        storage = create_storage(config)

    return HashedFS(
        storage=storage,
        hasher=hasher,
        cache=MemoryNameCacheAdapter(),
        logger=logger,
        metrics=metrics,
    )
