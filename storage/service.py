from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .disk_store import DiskJsonDocumentStore
from .interfaces import Disposer, StorageService, StoreListener
from .listeners import ListenerRegistry
from .paths import storage_path

if TYPE_CHECKING:
    from settings import Settings

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, int, float, bool)


def _same_primitive(stored: Any, value: Any) -> bool:
    """
    Strict equality for scalar values: bool never matches a number and a str
    never matches anything but a str. int and float compare as one number type.
    """
    if isinstance(value, bool) or isinstance(stored, bool):
        return type(value) is type(stored) and value == stored
    if isinstance(value, str) or isinstance(stored, str):
        return isinstance(value, str) and isinstance(stored, str) and value == stored
    if isinstance(value, (int, float)) and isinstance(stored, (int, float)):
        return value == stored
    return False


def _is_truthy(value: Any) -> bool:
    """JSON truthiness: null, false, 0, NaN and "" are falsy; every list and object is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return not (value == 0 or math.isnan(value))
    if isinstance(value, (int, str)):
        return bool(value)
    return True


class FileStorageService(StorageService):
    """
    Process-local key/value store backed by <app_home>/storage.json.

    The file is read once, on the first get/set/remove; every effective
    mutation rewrites the whole file and then notifies on_store listeners
    with (key, old_value, new_value).
    """

    def __init__(self, app_home: str | Path, *, verbose_logging: bool = False):
        self._store = DiskJsonDocumentStore(storage_path(app_home))
        self._verbose_logging = verbose_logging
        self._listeners = ListenerRegistry()
        self._database: dict[str, Any] = {}
        self._loaded = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "FileStorageService":
        return cls(settings.app_home, verbose_logging=settings.verbose_logging)

    @property
    def path(self) -> Path:
        return self._store.path

    def on_store(self, listener: StoreListener) -> Disposer:
        return self._listeners.add(listener)

    def get_item(self, key: str, default: Any = None) -> Any:
        database = self._ensure_loaded()
        if key not in database:
            return default
        return database[key]

    def set_item(self, key: str, value: Any) -> None:
        database = self._ensure_loaded()

        # Unchanged scalar: skip the write and the event.
        if isinstance(value, _PRIMITIVES) and key in database and _same_primitive(database[key], value):
            return

        old_value = database.get(key)
        database[key] = value
        self._save()

        self._listeners.notify(key, old_value, value)

    def remove_item(self, key: str) -> None:
        database = self._ensure_loaded()

        # Falsy values (0, "", false, null) are left in place.
        if not _is_truthy(database.get(key)):
            return

        old_value = database.pop(key)
        self._save()

        self._listeners.notify(key, old_value, None)

    def _ensure_loaded(self) -> dict[str, Any]:
        if not self._loaded:
            self._database = self._load()
            self._loaded = True
        return self._database

    def _load(self) -> dict[str, Any]:
        try:
            doc = self._store.load()
        except (OSError, ValueError):
            if self._verbose_logging:
                logger.exception("STORAGE LOAD: failed to load %s", self.path)
            return {}
        logger.debug("STORAGE LOAD: %d keys from %s", len(doc), self.path)
        return doc

    def _save(self) -> None:
        self._store.save(self._database)
        logger.debug("STORAGE SAVE: wrote %d keys to %s", len(self._database), self.path)
