from __future__ import annotations

from pathlib import Path

STORAGE_FILE_NAME = "storage.json"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def storage_path(app_home: str | Path) -> Path:
    return Path(app_home) / STORAGE_FILE_NAME
