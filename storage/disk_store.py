from __future__ import annotations

from pathlib import Path
from typing import Any

from json_store import atomic_write_json, read_json

from .interfaces import KeyValueDocumentStore
from .models import StorageDocument


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON object on disk at a fixed path.

    - load() raises on missing, unreadable or malformed files and on a
      non-object top level; callers decide how to recover.
    - save() rewrites the whole document and lets write/serialization
      errors propagate.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        raw = read_json(self._path)
        return StorageDocument.from_disk_doc(raw).to_disk_doc()

    def save(self, doc: dict[str, Any]) -> None:
        atomic_write_json(self._path, doc, indent=4)
