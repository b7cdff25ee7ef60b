"""Unit tests for key-value resume persistence."""

import json

import pytest

from cvembed.contexts.sharing.storage import (
    ACTIVE_EMBED_KEY,
    DRAFT_KEY,
    JsonFileStore,
    MemoryStore,
    load_active_embed_id,
    load_draft,
    load_embed_resume,
    save_draft,
    save_embed_resume,
)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    return JsonFileStore(tmp_path / "store" / "kv.json")


@pytest.mark.unit
class TestDraft:
    """Test draft persistence."""

    def test_missing_draft(self, store):
        assert load_draft(store) is None

    def test_save_and_load_draft(self, store, minimal_valid_resume):
        save_draft(store, minimal_valid_resume)
        assert load_draft(store) == minimal_valid_resume

    def test_draft_is_compact_json(self, store, empty_resume):
        save_draft(store, empty_resume)
        raw = store.get(DRAFT_KEY)
        assert ", " not in raw
        assert json.loads(raw) == empty_resume

    def test_corrupt_draft_is_ignored(self, store):
        store.set(DRAFT_KEY, "{not json")
        assert load_draft(store) is None

    def test_stale_draft_is_normalized(self, store):
        store.set(DRAFT_KEY, json.dumps({"basics": {"name": "Ada"}}))
        draft = load_draft(store)
        assert draft["basics"]["name"] == "Ada"
        assert draft["meta"]["version"] == "1.0"


@pytest.mark.unit
class TestEmbedResumes:
    """Test resumes published for embedding."""

    def test_publish_sets_active_id(self, store, complete_resume):
        assert load_active_embed_id(store) is None

        save_embed_resume(store, "abc123", complete_resume)

        assert load_active_embed_id(store) == "abc123"
        assert store.get(ACTIVE_EMBED_KEY) == "abc123"
        assert load_embed_resume(store, "abc123") == complete_resume
        assert load_embed_resume(store, "other") is None


@pytest.mark.unit
class TestJsonFileStore:
    """Test the file-backed store."""

    def test_values_survive_a_new_instance(self, tmp_path):
        path = tmp_path / "kv.json"
        JsonFileStore(path).set("a", "1")
        JsonFileStore(path).set("b", "2")

        reopened = JsonFileStore(path)
        assert reopened.get("a") == "1"
        assert reopened.get("b") == "2"
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "2"}

    def test_no_temp_files_left(self, tmp_path):
        store = JsonFileStore(tmp_path / "kv.json")
        store.set("a", "1")
        assert [p.name for p in tmp_path.iterdir()] == ["kv.json"]

    def test_memory_store_initial_values(self):
        store = MemoryStore({"a": "1"})
        assert store.get("a") == "1"
        assert store.get("b") is None


@pytest.mark.unit
class TestDamagedStoreFile:
    """A damaged store file never makes loads raise."""

    @pytest.mark.parametrize("content", ["{oops", "[1, 2, 3]", '"just text"', ""])
    def test_unreadable_file_reads_as_empty(self, tmp_path, content):
        path = tmp_path / "kv.json"
        path.write_text(content, encoding="utf-8")
        store = JsonFileStore(path)

        assert load_draft(store) is None
        assert load_active_embed_id(store) is None

    def test_non_text_value_is_ignored(self, tmp_path):
        path = tmp_path / "kv.json"
        path.write_text(json.dumps({DRAFT_KEY: {"basics": {}}}), encoding="utf-8")

        assert load_draft(JsonFileStore(path)) is None

    def test_damaged_file_is_replaced_on_write(self, tmp_path, minimal_valid_resume):
        path = tmp_path / "kv.json"
        path.write_text("{oops", encoding="utf-8")
        store = JsonFileStore(path)

        save_draft(store, minimal_valid_resume)

        assert load_draft(store) == minimal_valid_resume

    def test_failed_write_leaves_no_temp_file(self, tmp_path):
        path = tmp_path / "kv.json"
        store = JsonFileStore(path)
        store.set("a", "1")

        with pytest.raises(TypeError):
            store.set("b", object())

        assert [p.name for p in tmp_path.iterdir()] == ["kv.json"]
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}

    def test_deeply_nested_value_is_ignored(self):
        store = MemoryStore({DRAFT_KEY: "[" * 100000 + "]" * 100000})
        assert load_draft(store) is None
