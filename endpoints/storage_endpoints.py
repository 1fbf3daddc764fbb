from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Response

from settings import get_settings
from storage import FileStorageService, StorageItem, StorageValueBody

router = APIRouter(tags=["storage"])
logger = logging.getLogger(__name__)

# Centralized settings
SETTINGS = get_settings()

# One store per process. Handlers are async and call the store directly, so all access stays
# on the event loop thread and needs no lock; the cost is that each write blocks the loop for
# one small file rewrite. Moving calls to asyncio.to_thread would need a lock around the store.
STORAGE = FileStorageService.from_settings(SETTINGS)

_MISSING = object()


def _log_store_event(key: str, old_value: Any, new_value: Any) -> None:
    logger.debug("STORE EVENT: key=%s old=%r new=%r", key, old_value, new_value)


STORAGE.on_store(_log_store_event)


def _ensure_valid_json(value: Any) -> None:
    # NaN and Infinity parse from request bodies but cannot be written to storage.json.
    try:
        json.dumps(value, allow_nan=False)
    except ValueError as e:
        raise HTTPException(status_code=422, detail="value must be finite JSON") from e


@router.get("/storage/{key}")
async def get_item(key: str) -> StorageItem:
    value = STORAGE.get_item(key, _MISSING)
    if value is _MISSING:
        raise HTTPException(status_code=404, detail=f"no such key: {key}")
    return StorageItem(key=key, value=value)


@router.put("/storage/{key}")
async def set_item(key: str, body: StorageValueBody) -> StorageItem:
    _ensure_valid_json(body.value)
    try:
        STORAGE.set_item(key, body.value)
    except OSError as e:
        logger.warning("STORAGE WRITE: failed to persist %s: %r", key, e)
        raise HTTPException(status_code=500, detail="failed to persist storage") from e
    return StorageItem(key=key, value=STORAGE.get_item(key))


@router.delete("/storage/{key}", status_code=204)
async def remove_item(key: str) -> Response:
    try:
        STORAGE.remove_item(key)
    except OSError as e:
        logger.warning("STORAGE WRITE: failed to persist removal of %s: %r", key, e)
        raise HTTPException(status_code=500, detail="failed to persist storage") from e
    return Response(status_code=204)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok", "storage_path": str(STORAGE.path)}
