"""Shared fixtures."""

from pathlib import Path

import pytest

from hashedfs.adapters import (
    LocalStorageAdapter,
    MemoryNameCacheAdapter,
    MemoryStorageAdapter,
    NoopMetricsAdapter,
    Sha256Adapter,
    StdLoggerAdapter,
)
from hashedfs.core import HashedFS

TESTS_DIR = Path(__file__).parent

BASE_HASH = "d476fb7be1b02ea9f66c797a0c11b11ff5db1bd702ff6c4720e455a301a501f1"
NOEXT_HASH = "d9d4e730296e72377ae86529027f7defd5feecf4602a1f15f561cd4fae3644c5"
WRONG_HASH = "8" * 64


def make_hashed_fs(storage) -> HashedFS:
    return HashedFS(
        storage=storage,
        hasher=Sha256Adapter(),
        cache=MemoryNameCacheAdapter(),
        logger=StdLoggerAdapter(),
        metrics=NoopMetricsAdapter(),
    )


@pytest.fixture
def local_fs():
    """HashedFS over the tests directory (testdata/ lives below it)."""
    return make_hashed_fs(LocalStorageAdapter(TESTS_DIR))


@pytest.fixture
def memory_storage():
    return MemoryStorageAdapter(
        {
            "testdata/base.ext": b"base.ext\n",
            "testdata/noext": b"noext\n",
            "css/site.min.css": b"body{}",
        }
    )


@pytest.fixture
def memory_fs(memory_storage):
    return make_hashed_fs(memory_storage)
