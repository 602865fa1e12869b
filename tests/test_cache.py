"""Tests for ipguard.cache (memory and file backends) and the commons.io local store beneath it."""

import json

import pytest

from commons.io.local import LocalFileReader, LocalFileWriter
from ipguard.cache import (
    FileObservationCache,
    InMemoryObservationCache,
    content_hash,
    get_cache,
)

KEY = content_hash(b"image-one")


def test_content_hash_is_sha256_hex():
    assert content_hash(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert content_hash(b"a") != content_hash(b"b")


class TestInMemoryCache:
    def test_set_get_contains(self):
        cache = InMemoryObservationCache()
        assert cache.get(KEY) is None
        cache.set(KEY, {"is_animation": True})
        assert KEY in cache
        assert cache.get(KEY) == {"is_animation": True}

    def test_returned_values_are_copies(self):
        cache = InMemoryObservationCache()
        cache.set(KEY, {"title": "a"})
        cache.get(KEY)["title"] = "mutated"
        assert cache.get(KEY) == {"title": "a"}

    def test_evicts_oldest(self):
        cache = InMemoryObservationCache(max_entries=2)
        cache.set("a", {})
        cache.set("b", {})
        cache.set("c", {})
        assert "a" not in cache
        assert len(cache) == 2

    def test_clear(self):
        cache = InMemoryObservationCache()
        cache.set(KEY, {})
        cache.clear()
        assert len(cache) == 0

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            InMemoryObservationCache(max_entries=0)


class TestFileCache:
    def test_round_trip_and_clear(self, tmp_path):
        cache = FileObservationCache(str(tmp_path / "cache"))
        assert cache.get(KEY) is None
        cache.set(KEY, {"has_human_face": "yes"})
        assert KEY in cache
        assert json.loads((tmp_path / "cache" / f"{KEY}.json").read_text()) == {"has_human_face": "yes"}
        assert FileObservationCache(str(tmp_path / "cache")).get(KEY) == {"has_human_face": "yes"}
        cache.clear()
        assert KEY not in cache

    def test_rejects_path_like_keys(self, tmp_path):
        cache = FileObservationCache(str(tmp_path))
        with pytest.raises(ValueError):
            cache.set("../escape", {})

    def test_corrupt_entry_ignored(self, tmp_path):
        (tmp_path / f"{KEY}.json").write_text("[1, 2]", encoding="utf-8")
        assert FileObservationCache(str(tmp_path)).get(KEY) is None

    def test_clear_missing_directory_is_noop(self, tmp_path):
        FileObservationCache(str(tmp_path / "never-created")).clear()


class TestGetCache:
    def test_default_is_memory(self):
        assert isinstance(get_cache({}), InMemoryObservationCache)

    def test_memory_capacity_from_config(self):
        cache = get_cache({"cache": {"backend": "memory", "max_entries": 3}})
        assert cache.max_entries == 3

    def test_file_backend(self, tmp_path):
        cache = get_cache({"cache": {"backend": "file", "dir": str(tmp_path)}})
        assert isinstance(cache, FileObservationCache)
        assert cache.directory == str(tmp_path)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown cache backend"):
            get_cache({"cache": {"backend": "redis"}})


class TestLocalIo:
    def test_read_text_missing_is_none(self):
        assert LocalFileReader().read_text("/nonexistent/path/file.txt") is None

    def test_read_json_missing_raises(self):
        with pytest.raises(FileNotFoundError, match="JSON file not found"):
            LocalFileReader().read_json("/nonexistent/data.json")

    def test_write_json_creates_dirs_and_accepts_strings(self, tmp_path):
        out = tmp_path / "nested" / "dir" / "file.json"
        LocalFileWriter().write_json('{"k": "v"}', str(out))
        assert json.loads(out.read_text()) == {"k": "v"}
        assert not (tmp_path / "nested" / "dir" / "file.json.tmp").exists()

    def test_read_bytes_and_remove(self, tmp_path):
        f = tmp_path / "img.bin"
        f.write_bytes(b"\x00\x01")
        assert LocalFileReader().read_bytes(str(f)) == b"\x00\x01"
        LocalFileWriter().remove(str(f))
        LocalFileWriter().remove(str(f))
        assert not f.exists()
