"""
Tests for key-value storage backends.
"""

import json

import pytest

from browser_sim.kv_store import JsonFileStore, MemoryStore


class TestMemoryStore:
    """Tests for the in-memory store."""

    def test_get_set_remove(self):
        store = MemoryStore()
        store.set("k", "v")

        assert store.get("k") == "v"
        store.remove("k")
        assert store.get("k") is None

    def test_remove_missing_is_noop(self):
        MemoryStore().remove("missing")

    def test_initial_data_copied(self):
        initial = {"k": "v"}
        store = MemoryStore(initial)
        store.set("k", "changed")

        assert initial["k"] == "v"


class TestJsonFileStore:
    """Tests for the file-backed store."""

    @pytest.fixture
    def path(self, tmp_path):
        return tmp_path / "data" / "storage.json"

    def test_missing_file_is_empty(self, path):
        store = JsonFileStore(path)

        assert store.get("anything") is None
        assert not path.exists()

    def test_set_writes_file(self, path):
        store = JsonFileStore(path)
        store.set("k", "v")

        assert json.loads(path.read_text()) == {"k": "v"}

    def test_values_survive_reopen(self, path):
        JsonFileStore(path).set("k", "v")

        assert JsonFileStore(path).get("k") == "v"

    def test_remove_writes_file(self, path):
        store = JsonFileStore(path)
        store.set("a", "1")
        store.set("b", "2")
        store.remove("a")

        assert json.loads(path.read_text()) == {"b": "2"}

    def test_corrupt_file_is_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("{not json")

        store = JsonFileStore(path)

        assert store.keys() == []

    def test_non_object_file_is_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2, 3]")

        assert JsonFileStore(path).keys() == []

    def test_non_string_values_dropped(self, path):
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"good": "v", "bad": 3}))

        assert JsonFileStore(path).keys() == ["good"]

    def test_corrupt_file_replaced_on_write(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("garbage")

        store = JsonFileStore(path)
        store.set("k", "v")

        assert json.loads(path.read_text()) == {"k": "v"}
