"""
Module: storage.editor_store

Purpose:
    Persistence port for editor state. The fitting engine never reads or
    writes state itself; the editor loads a snapshot on start-up and
    saves it after edits through one of these stores.

    Any malformed data results in a ``None`` load and a fallback to
    defaults, never an exception.

Key Classes:
    - EditorStatePort: load()/save(state)/update(modifier) protocol
    - JsonFileEditorStore: JSON file with portalocker locking
    - MemoryEditorStore: In-process store

Key Functions:
    - load_layout_settings(): Port -> AdvancedLayoutSettings
    - save_layout_settings(): AdvancedLayoutSettings -> port
"""

from __future__ import annotations

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol

from postfit.positioning import DEFAULT_LAYOUT_SETTINGS, AdvancedLayoutSettings

from .locking import locked_read_modify_write_json, locked_read_text, locked_write_json

logger = logging.getLogger(__name__)

STATE_VERSION = 1
LAYOUT_KEY = "advancedLayout"
# Never restored: a template load in progress when the editor closed is stale
TRANSIENT_KEYS = ("isLoadingTemplate",)

StateModifier = Callable[[Dict[str, Any]], Dict[str, Any]]


class EditorStatePort(Protocol):
    def load(self) -> Optional[Dict[str, Any]]:
        ...

    def save(self, state: Dict[str, Any]) -> None:
        ...

    def update(self, modifier: StateModifier) -> Dict[str, Any]:
        """Apply ``modifier`` to the stored state (or ``{}``) and save the result atomically."""
        ...


def _strip_transient(state: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in state.items() if k not in TRANSIENT_KEYS}


class JsonFileEditorStore:
    """
    JSON-backed editor-state store.

    File layout: ``{"version": 1, "state": {...}}``. Saves replace the file
    atomically, so a reader sees either the previous or the new state.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Optional[Dict[str, Any]]:
        try:
            text = locked_read_text(self.path)
            if text is None:
                return None
            payload = json.loads(text)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            logger.warning(f"Editor state {self.path} is corrupted: {e}")
            return None
        except OSError as e:
            logger.warning(f"Failed to read editor state {self.path}: {e}")
            return None

        if not isinstance(payload, dict) or not isinstance(payload.get("state"), dict):
            logger.warning(f"Editor state {self.path} has an unexpected shape, ignoring")
            return None
        if payload.get("version") != STATE_VERSION:
            logger.warning(
                f"Editor state version {payload.get('version')!r} != {STATE_VERSION}, ignoring"
            )
            return None
        return _strip_transient(payload["state"])

    def save(self, state: Dict[str, Any]) -> None:
        locked_write_json(self.path, {"version": STATE_VERSION, "state": _strip_transient(state)})

    def update(self, modifier: StateModifier) -> Dict[str, Any]:
        def apply(envelope: Dict[str, Any]) -> Dict[str, Any]:
            state = envelope.get("state")
            if envelope.get("version") != STATE_VERSION or not isinstance(state, dict):
                state = {}
            return {"version": STATE_VERSION, "state": _strip_transient(modifier(_strip_transient(state)))}

        return locked_read_modify_write_json(self.path, apply)["state"]


class MemoryEditorStore:
    """Keeps a deep copy of the last saved state in memory."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._state = copy.deepcopy(initial) if initial is not None else None
        self._lock = threading.Lock()

    def load(self) -> Optional[Dict[str, Any]]:
        if self._state is None:
            return None
        return _strip_transient(copy.deepcopy(self._state))

    def save(self, state: Dict[str, Any]) -> None:
        self._state = copy.deepcopy(state)

    def update(self, modifier: StateModifier) -> Dict[str, Any]:
        with self._lock:
            state = modifier(self.load() or {})
            self.save(state)
        return copy.deepcopy(state)


def load_layout_settings(store: EditorStatePort) -> AdvancedLayoutSettings:
    """Layout settings from the store, or the defaults if absent or unreadable."""
    state = store.load()
    raw = state.get(LAYOUT_KEY) if state else None
    if not isinstance(raw, dict):
        return DEFAULT_LAYOUT_SETTINGS
    try:
        return AdvancedLayoutSettings.from_dict(raw)
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Discarding malformed layout settings: {e}")
        return DEFAULT_LAYOUT_SETTINGS


def save_layout_settings(store: EditorStatePort, settings: AdvancedLayoutSettings) -> None:
    """Merge ``settings`` into the stored state in one locked read-modify-write."""
    layout = settings.to_dict()

    def merge(state: Dict[str, Any]) -> Dict[str, Any]:
        state[LAYOUT_KEY] = layout
        return state

    store.update(merge)
