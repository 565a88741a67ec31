"""Tests for nearbee.storage."""

import os

import orjson
import pytest

from nearbee.errors import PersistenceFailure
from nearbee.storage import JsonFileStore, MemoryStore


class TestMemoryStore:
    def test_get_unset_is_none(self):
        assert MemoryStore().get("topqrsu") is None

    def test_set_overwrites(self):
        store = MemoryStore()
        store.set("k", "a")
        store.set("k", "a\nb")
        assert store.get("k") == "a\nb"


class TestJsonFileStore:
    def test_missing_file_reads_as_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "none.json").get("k") is None

    def test_set_then_get(self, tmp_path):
        path = tmp_path / "nested" / "progress.json"
        store = JsonFileStore(path)
        store.set("topqrsu", "quotes")
        store.set("gamecok", "lockage")
        assert store.get("topqrsu") == "quotes"
        assert orjson.loads(path.read_bytes()) == {"gamecok": "lockage", "topqrsu": "quotes"}

    def test_no_temp_files_left(self, tmp_path):
        JsonFileStore(tmp_path / "progress.json").set("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["progress.json"]

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text("{not json")
        with pytest.raises(PersistenceFailure):
            JsonFileStore(path).get("k")

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text("[1, 2]")
        with pytest.raises(PersistenceFailure):
            JsonFileStore(path).get("k")

    def test_blank_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text("\n")
        assert JsonFileStore(path).get("k") is None

    def test_write_retried_then_raises(self, tmp_path, monkeypatch):
        calls = []

        def failing_replace(src, dst):
            calls.append(dst)
            raise OSError("read-only file system")

        monkeypatch.setattr(os, "replace", failing_replace)
        store = JsonFileStore(tmp_path / "progress.json", attempts=3)
        with pytest.raises(PersistenceFailure):
            store.set("k", "v")
        assert len(calls) == 3
        assert list(tmp_path.iterdir()) == []

    def test_encode_error_leaves_no_temp_file(self, tmp_path):
        store = JsonFileStore(tmp_path / "progress.json")
        with pytest.raises(TypeError):
            store.set("k", object())
        assert list(tmp_path.iterdir()) == []

    def test_write_recovers_after_transient_error(self, tmp_path, monkeypatch):
        real_replace = os.replace
        calls = []

        def flaky_replace(src, dst):
            calls.append(dst)
            if len(calls) == 1:
                raise OSError("busy")
            real_replace(src, dst)

        monkeypatch.setattr(os, "replace", flaky_replace)
        store = JsonFileStore(tmp_path / "progress.json")
        store.set("k", "v")
        assert store.get("k") == "v"
        assert len(calls) == 2
