from __future__ import annotations

from typing import Any, Callable, Protocol

# (key, old_value, new_value); old_value is None when the key was absent,
# new_value is None on removal.
StoreListener = Callable[[str, Any, Any], None]
Disposer = Callable[[], None]


class KeyValueDocumentStore(Protocol):
    """
    A single JSON object persisted as a whole document.
    """

    def load(self) -> dict[str, Any]:
        """Load and return the full document. Raises on missing or invalid data."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document, replacing whatever was there."""
        ...


class StorageService(Protocol):
    def on_store(self, listener: StoreListener) -> Disposer:
        ...

    def get_item(self, key: str, default: Any = None) -> Any:
        ...

    def set_item(self, key: str, value: Any) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...
