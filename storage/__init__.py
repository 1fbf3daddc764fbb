from __future__ import annotations

from .disk_store import DiskJsonDocumentStore
from .interfaces import Disposer, KeyValueDocumentStore, StorageService, StoreListener
from .listeners import ListenerRegistry
from .models import StorageDocument, StorageItem, StorageValueBody
from .paths import STORAGE_FILE_NAME, storage_path
from .service import FileStorageService

__all__ = [
    "StorageService",
    "FileStorageService",
    "StoreListener",
    "Disposer",
    "ListenerRegistry",
    "KeyValueDocumentStore",
    "DiskJsonDocumentStore",
    "StorageDocument",
    "StorageItem",
    "StorageValueBody",
    "STORAGE_FILE_NAME",
    "storage_path",
]
