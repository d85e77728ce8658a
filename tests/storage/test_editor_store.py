"""Tests for editor-state persistence."""

import json
import threading
from pathlib import Path

import portalocker
import pytest

from postfit.positioning import DEFAULT_LAYOUT_SETTINGS, LayoutPosition, TextPosition
from postfit.storage import (
    STATE_VERSION,
    JsonFileEditorStore,
    MemoryEditorStore,
    load_layout_settings,
    save_layout_settings,
)
from postfit.storage.locking import state_lock


class TestJsonFileEditorStore:
    """Tests for the JSON-backed store."""

    def test_load_when_file_missing_then_none(self, tmp_path: Path) -> None:
        assert JsonFileEditorStore(tmp_path / "state.json").load() is None

    def test_save_when_loaded_back_then_same_state(self, tmp_path: Path) -> None:
        store = JsonFileEditorStore(tmp_path / "nested" / "state.json")
        store.save({"aspectRatio": "5:6", "hasUnsavedChanges": True})
        assert store.load() == {"aspectRatio": "5:6", "hasUnsavedChanges": True}

    def test_save_when_written_then_versioned_envelope(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        JsonFileEditorStore(path).save({"a": 1})
        assert json.loads(path.read_text(encoding="utf-8")) == {"version": STATE_VERSION, "state": {"a": 1}}

    def test_load_when_loading_flag_saved_then_dropped(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"version": STATE_VERSION, "state": {"isLoadingTemplate": True, "a": 1}}))
        assert JsonFileEditorStore(path).load() == {"a": 1}

    def test_load_when_corrupted_then_none(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json")
        assert JsonFileEditorStore(path).load() is None

    def test_load_when_version_mismatch_then_none(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"version": 99, "state": {"a": 1}}))
        assert JsonFileEditorStore(path).load() is None

    def test_load_when_unexpected_shape_then_none(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text(json.dumps([1, 2, 3]))
        assert JsonFileEditorStore(path).load() is None

    def test_load_when_invalid_utf8_then_none(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_bytes(b'{"version": 1, "state": {"a": "\xff\xfe"}}')
        assert JsonFileEditorStore(path).load() is None

    def test_load_layout_when_invalid_utf8_then_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_bytes(b"\xff\xfe\x00")
        assert load_layout_settings(JsonFileEditorStore(path)) == DEFAULT_LAYOUT_SETTINGS

    def test_save_when_reader_holds_lock_then_previous_file_intact(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        store = JsonFileEditorStore(path)
        store.save({"a": 1})
        before = path.read_text(encoding="utf-8")

        with state_lock(path, portalocker.LOCK_SH):
            writer = threading.Thread(target=store.save, args=({"a": 2},))
            writer.start()
            writer.join(timeout=0.3)
            assert writer.is_alive()
            assert path.read_text(encoding="utf-8") == before

        writer.join(timeout=5)
        assert not writer.is_alive()
        assert store.load() == {"a": 2}

    def test_save_when_write_fails_then_previous_file_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        store = JsonFileEditorStore(path)
        store.save({"a": 1})

        with pytest.raises(TypeError):
            store.save({"a": object()})

        assert store.load() == {"a": 1}
        assert not (tmp_path / "state.json.tmp").exists()

    def test_update_when_concurrent_then_no_lost_writes(self, tmp_path: Path) -> None:
        store = JsonFileEditorStore(tmp_path / "state.json")
        store.save({"base": True})

        def add_key(i: int) -> None:
            JsonFileEditorStore(tmp_path / "state.json").update(lambda s: {**s, f"k{i}": i})

        threads = [threading.Thread(target=add_key, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert store.load() == {"base": True, **{f"k{i}": i for i in range(8)}}

    def test_update_when_file_corrupted_then_starts_fresh(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json")
        assert JsonFileEditorStore(path).update(lambda s: {**s, "a": 1}) == {"a": 1}
        assert JsonFileEditorStore(path).load() == {"a": 1}


class TestMemoryEditorStore:

    def test_save_when_caller_mutates_then_store_unaffected(self) -> None:
        store = MemoryEditorStore()
        state = {"nested": {"a": 1}}
        store.save(state)
        state["nested"]["a"] = 2
        assert store.load() == {"nested": {"a": 1}}


class TestLayoutSettingsPersistence:

    def test_load_when_store_empty_then_defaults(self) -> None:
        assert load_layout_settings(MemoryEditorStore()) == DEFAULT_LAYOUT_SETTINGS

    def test_save_when_loaded_then_round_trips_and_keeps_other_keys(self, tmp_path: Path) -> None:
        store = JsonFileEditorStore(tmp_path / "state.json")
        store.save({"aspectRatio": "9:16"})
        settings = DEFAULT_LAYOUT_SETTINGS.with_block(
            "headline", LayoutPosition().anchored_to(TextPosition.TOP_CENTER)
        ).with_block("body", LayoutPosition().moved_to(40, 70))

        save_layout_settings(store, settings)

        assert load_layout_settings(store) == settings
        assert store.load()["aspectRatio"] == "9:16"

    def test_load_when_layout_malformed_then_defaults(self) -> None:
        store = MemoryEditorStore({"advancedLayout": {"headline": "oops", "padding": 24}})
        assert load_layout_settings(store) == DEFAULT_LAYOUT_SETTINGS

    def test_save_when_other_writer_updated_meanwhile_then_both_kept(self, tmp_path: Path) -> None:
        store = JsonFileEditorStore(tmp_path / "state.json")
        store.save({"aspectRatio": "1:1"})
        JsonFileEditorStore(tmp_path / "state.json").update(lambda s: {**s, "aspectRatio": "5:6"})

        save_layout_settings(store, DEFAULT_LAYOUT_SETTINGS)

        state = store.load()
        assert state["aspectRatio"] == "5:6"
        assert state["advancedLayout"] == DEFAULT_LAYOUT_SETTINGS.to_dict()

    def test_save_when_memory_store_then_merged(self) -> None:
        store = MemoryEditorStore({"aspectRatio": "9:16", "isLoadingTemplate": True})
        save_layout_settings(store, DEFAULT_LAYOUT_SETTINGS)
        assert store.load() == {"aspectRatio": "9:16", "advancedLayout": DEFAULT_LAYOUT_SETTINGS.to_dict()}
