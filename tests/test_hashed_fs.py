"""Tests for the HashedFS service."""

import threading

import pytest

from conftest import BASE_HASH, NOEXT_HASH, WRONG_HASH, make_hashed_fs
from hashedfs.adapters import MemoryStorageAdapter
from hashedfs.core import NotFoundError


class TestDigest:
    def test_known_digests(self, local_fs):
        assert local_fs.digest("testdata/base.ext") == BASE_HASH
        assert local_fs.digest("testdata/noext") == NOEXT_HASH

    def test_missing_file_is_empty(self, local_fs):
        assert local_fs.digest("not-found") == ""
        assert local_fs.hashed_name("not-found") == ""

    def test_failure_is_not_cached(self, memory_fs, memory_storage):
        assert memory_fs.digest("late.txt") == ""
        memory_storage.files["late.txt"] = b"late"
        assert memory_fs.digest("late.txt") != ""

    def test_second_call_hits_cache(self, memory_fs, memory_storage):
        first = memory_fs.digest("testdata/base.ext")
        reads = memory_storage.reads
        assert memory_fs.digest("testdata/base.ext") == first
        assert memory_storage.reads == reads

    def test_digest_not_recomputed_after_change(self, memory_fs, memory_storage):
        memory_fs.digest("testdata/base.ext")
        memory_storage.files["testdata/base.ext"] = b"changed"
        assert memory_fs.digest("testdata/base.ext") == BASE_HASH

    def test_populates_both_indexes(self, memory_fs):
        memory_fs.digest("testdata/base.ext")
        stats = memory_fs.stats()
        assert (stats.digests, stats.hashed_names) == (1, 1)
        assert memory_fs.cache.get_plain(f"testdata/base.{BASE_HASH}.ext") == "testdata/base.ext"


class TestHashedName:
    def test_with_extension(self, local_fs):
        assert local_fs.hashed_name("testdata/base.ext") == f"testdata/base.{BASE_HASH}.ext"

    def test_without_extension(self, local_fs):
        assert local_fs.hashed_name("testdata/noext") == f"testdata/noext.{NOEXT_HASH}"

    def test_multiple_extensions(self, memory_fs):
        token = memory_fs.digest("css/site.min.css")
        assert memory_fs.hashed_name("css/site.min.css") == f"css/site.min.{token}.css"


class TestOpen:
    @pytest.mark.parametrize(
        "name,content",
        [
            (f"testdata/base.{BASE_HASH}.ext", b"base.ext\n"),
            (f"testdata/noext.{NOEXT_HASH}", b"noext\n"),
        ],
    )
    def test_open_cold(self, local_fs, name, content):
        with local_fs.open(name) as f:
            assert f.read() == content

    @pytest.mark.parametrize(
        "name",
        [
            "testdata/base.ext",
            f"testdata/base.{WRONG_HASH}.ext",
            "testdata/noext",
            f"testdata/noext.{WRONG_HASH}",
            f"testdata/missing.{BASE_HASH}.ext",
        ],
    )
    def test_open_rejected(self, local_fs, name):
        with pytest.raises(NotFoundError) as exc_info:
            local_fs.open(name)
        assert exc_info.value.path == name
        assert isinstance(exc_info.value, FileNotFoundError)

    def test_open_hashed_name_roundtrip(self, memory_fs, memory_storage):
        for path, content in memory_storage.files.items():
            assert memory_fs.read_bytes(memory_fs.hashed_name(path)) == content

    def test_open_detects_stale_token(self, memory_fs, memory_storage):
        # Digest cached, file changed: a cold open verifies against live bytes.
        memory_fs.digest("testdata/base.ext")
        memory_storage.files["testdata/base.ext"] = b"changed"
        memory_fs.cache._plains.clear()
        with pytest.raises(NotFoundError):
            memory_fs.open(f"testdata/base.{BASE_HASH}.ext")

    def test_trusted_name_skips_verification(self, memory_fs, memory_storage):
        name = f"testdata/base.{BASE_HASH}.ext"
        memory_fs.read_bytes(name)
        memory_storage.files["testdata/base.ext"] = b"changed"
        reads = memory_storage.reads
        assert memory_fs.read_bytes(name) == b"changed"
        assert memory_storage.reads == reads

    def test_open_records_name(self, memory_fs):
        name = f"testdata/noext.{NOEXT_HASH}"
        memory_fs.read_bytes(name)
        assert memory_fs.cache.get_plain(name) == "testdata/noext"
        assert memory_fs.cache.get_digest("testdata/noext") == NOEXT_HASH

    def test_uppercase_token_rejected(self, memory_fs):
        with pytest.raises(NotFoundError):
            memory_fs.open(f"testdata/base.{BASE_HASH.upper()}.ext")


def test_instances_do_not_share_cache(memory_storage):
    first = make_hashed_fs(memory_storage)
    second = make_hashed_fs(memory_storage)
    first.digest("testdata/base.ext")
    assert second.stats().digests == 0


def test_concurrent_access():
    files = {f"assets/file{i}.js": f"console.log({i})".encode() for i in range(50)}
    hfs = make_hashed_fs(MemoryStorageAdapter(files))
    errors: list[BaseException] = []

    def worker() -> None:
        try:
            for path, content in files.items():
                assert hfs.read_bytes(hfs.hashed_name(path)) == content
        except BaseException as e:  # noqa: BLE001
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    stats = hfs.stats()
    assert (stats.digests, stats.hashed_names) == (50, 50)


class TestOpenAfterFileVanishes:
    def test_trusted_name(self, memory_fs, memory_storage):
        name = f"testdata/base.{BASE_HASH}.ext"
        memory_fs.read_bytes(name)
        del memory_storage.files["testdata/base.ext"]
        with pytest.raises(NotFoundError) as exc_info:
            memory_fs.open(name)
        assert exc_info.value.path == name
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_verified_name(self):
        class UnopenableStorage(MemoryStorageAdapter):
            def open(self, path):
                raise PermissionError(path)

        hfs = make_hashed_fs(UnopenableStorage({"testdata/noext": b"noext\n"}))
        name = f"testdata/noext.{NOEXT_HASH}"
        with pytest.raises(NotFoundError) as exc_info:
            hfs.open(name)
        assert exc_info.value.path == name


class RecordingMetrics:
    def __init__(self) -> None:
        self.counters: list[str] = []
        self.timings: list[tuple[str, dict[str, str] | None]] = []

    def increment(self, name, value=1, tags=None):
        self.counters.append(name)

    def timing(self, name, value, tags=None):
        self.timings.append((name, tags))


def test_metrics(memory_fs):
    metrics = RecordingMetrics()
    memory_fs.metrics = metrics
    memory_fs.digest("testdata/base.ext")
    memory_fs.digest("testdata/base.ext")
    memory_fs.digest("missing.css")
    with pytest.raises(NotFoundError):
        memory_fs.open("missing")
    assert metrics.counters == [
        "hashedfs.digest.miss",
        "hashedfs.digest.hit",
        "hashedfs.digest.miss",
        "hashedfs.digest.error",
        "hashedfs.open.rejected",
    ]
    assert metrics.timings == [("hashedfs.digest.duration", {"algorithm": "sha256"})]
