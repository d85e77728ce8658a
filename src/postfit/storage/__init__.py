"""Editor-state persistence."""

from .editor_store import (
    STATE_VERSION,
    EditorStatePort,
    JsonFileEditorStore,
    MemoryEditorStore,
    load_layout_settings,
    save_layout_settings,
)

__all__ = [
    "STATE_VERSION",
    "EditorStatePort",
    "JsonFileEditorStore",
    "MemoryEditorStore",
    "load_layout_settings",
    "save_layout_settings",
]
