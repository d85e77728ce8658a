"""
Module: storage.locking

Purpose:
    Cross-platform locked JSON access for the editor-state store.
    Uses portalocker for Mac, Windows, and Linux compatibility.

    Locks are taken on a sidecar ``<name>.lock`` file rather than on the
    data file itself, because writes replace the data file atomically and
    a lock held on the replaced inode would no longer exclude anyone.

Key Functions:
    - state_lock: Context manager holding the sidecar lock
    - locked_read_text: Read the data file under a shared lock
    - locked_write_json: Atomic replace under an exclusive lock
    - locked_read_modify_write_json: Merge under one exclusive lock

Dependencies:
    - portalocker: Cross-platform file locking
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Generator, Optional

import portalocker

logger = logging.getLogger(__name__)


def lock_path_for(path: Path) -> Path:
    return path.with_name(path.name + ".lock")


@contextmanager
def state_lock(path: Path, lock_type: int = portalocker.LOCK_EX) -> Generator[None, None, None]:
    """
    Hold the sidecar lock guarding ``path``.

    Args:
        path: Data file the lock protects.
        lock_type: LOCK_EX for writers, LOCK_SH for readers.
    """
    lock_path = lock_path_for(path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    # "a" creates the lock file without truncating it
    with open(lock_path, "a", encoding="utf-8") as handle:
        portalocker.lock(handle, lock_type)
        try:
            yield
        finally:
            portalocker.unlock(handle)


def _atomic_write_json(path: Path, data: Any) -> None:
    """Write to a temp file then rename over ``path``; caller holds the lock."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        temp_path.replace(path)
    except (OSError, TypeError, ValueError):
        if temp_path.exists():
            temp_path.unlink()
        raise


def locked_read_text(path: Path) -> Optional[str]:
    """Contents of ``path`` read under a shared lock, or None if it does not exist."""
    with state_lock(path, portalocker.LOCK_SH):
        if not path.exists():
            return None
        return path.read_bytes().decode("utf-8")


def locked_write_json(path: Path, data: Any) -> None:
    """Replace ``path`` with ``data`` as JSON; readers see the old or new file, never a partial one."""
    with state_lock(path):
        _atomic_write_json(path, data)
    logger.debug(f"Wrote {path}")


def locked_read_modify_write_json(
    path: Path,
    modifier: Callable[[Dict[str, Any]], Dict[str, Any]],
    default: Callable[[], Dict[str, Any]] = dict,
) -> Dict[str, Any]:
    """
    Read JSON, apply modifier, write back - all under one exclusive lock.

    An absent, empty or undecodable file is treated as ``default()``.

    Returns:
        The modified data that was written.
    """
    with state_lock(path):
        existing: Dict[str, Any]
        try:
            content = path.read_bytes().decode("utf-8") if path.exists() else ""
            existing = json.loads(content) if content.strip() else default()
        except ValueError as e:
            logger.warning(f"Replacing unreadable JSON in {path}: {e}")
            existing = default()
        if not isinstance(existing, dict):
            existing = default()

        modified = modifier(existing)
        _atomic_write_json(path, modified)
    logger.debug(f"Updated {path}")
    return modified
