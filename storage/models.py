from __future__ import annotations

from typing import Any

from pydantic import BaseModel, JsonValue, RootModel


class StorageDocument(RootModel[dict[str, Any]]):
    """
    Mirrors the on-disk storage.json schema: a single JSON object
      { "<key>": <any JSON value>, ... }

    Only the top level is checked; values are whatever json.loads produced.
    """

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "StorageDocument":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> dict[str, Any]:
        return dict(self.root)


class StorageValueBody(BaseModel):
    value: JsonValue


class StorageItem(BaseModel):
    key: str
    value: JsonValue
