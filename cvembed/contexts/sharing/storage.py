"""
Resume persistence over a key-value store.

The builder keeps its working draft and any resumes published for embedding
in a plain string key-value store (browser storage in the web app). The
core never talks to a store directly; these helpers take the store as an
argument and only move JSON text in and out of it.

Keys:
    cvembed:draft              current builder draft
    cvembed:resume:<id>        resume published for /embed/<id>
    cvembed:activeEmbedId      id of the most recently published resume

Usage:
    from cvembed.contexts.sharing.storage import JsonFileStore, save_draft, load_draft

    store = JsonFileStore()
    save_draft(store, resume)
    resume = load_draft(store)
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from dotenv import load_dotenv

from cvembed.contexts.document.codec import serialize_resume
from cvembed.contexts.document.normalizer import normalize_resume
from cvembed.contexts.sharing.logger import _log_debug

load_dotenv()
STORE_PATH = Path(os.getenv("CVEMBED_STORE_PATH", "outs/store/cvembed_store.json"))

DRAFT_KEY = "cvembed:draft"
ACTIVE_EMBED_KEY = "cvembed:activeEmbedId"
EMBED_RESUME_KEY = "cvembed:resume:{resume_id}"


class KeyValueStore(Protocol):
    """Minimal string store: get returns None for unknown keys."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store, used for tests and one-shot scripts."""

    def __init__(self, initial: Dict[str, str] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store backed by a single JSON object on disk.

    Writes go to a temporary file in the same directory and are moved into
    place, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: Path = None):
        self.path = Path(path) if path is not None else STORE_PATH

    def _read(self) -> Dict[str, str]:
        """Current contents; an unreadable or non-object file reads as empty."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            _log_debug(
                f"Store file {self.path} is not valid JSON ({type(e).__name__}); treating it as empty"
            )
            return {}

        if not isinstance(data, dict):
            _log_debug(f"Store file {self.path} does not hold a JSON object; treating it as empty")
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write to temp file first (atomic write pattern)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except Exception:
            # Clean up temp file if write failed
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


def _load_resume(store: KeyValueStore, key: str) -> Optional[Dict[str, Any]]:
    raw = store.get(key)
    if not raw:
        return None

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError):
        _log_debug(f"Stored value under '{key}' is not valid JSON; ignoring it")
        return None

    return normalize_resume(data)


def save_draft(store: KeyValueStore, resume: Dict[str, Any]) -> None:
    """Persist the builder's working draft."""
    store.set(DRAFT_KEY, serialize_resume(resume))


def load_draft(store: KeyValueStore) -> Optional[Dict[str, Any]]:
    """Load and normalize the working draft, None if absent or corrupt."""
    return _load_resume(store, DRAFT_KEY)


def save_embed_resume(store: KeyValueStore, resume_id: str, resume: Dict[str, Any]) -> None:
    """Publish a resume under an id and mark it as the active embed."""
    store.set(EMBED_RESUME_KEY.format(resume_id=resume_id), serialize_resume(resume))
    store.set(ACTIVE_EMBED_KEY, resume_id)


def load_embed_resume(store: KeyValueStore, resume_id: str) -> Optional[Dict[str, Any]]:
    """Load and normalize a published resume, None if absent or corrupt."""
    return _load_resume(store, EMBED_RESUME_KEY.format(resume_id=resume_id))


def load_active_embed_id(store: KeyValueStore) -> Optional[str]:
    """Id of the most recently published resume, if any."""
    return store.get(ACTIVE_EMBED_KEY)
