from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """
    Read and parse a UTF-8 JSON file.

    Raises OSError for missing/unreadable files and ValueError for
    undecodable or malformed content.
    """
    raw = path.read_text(encoding="utf-8")
    return json.loads(raw)


def atomic_write_json(path: Path, payload: Any, *, indent: int = 4, sort_keys: bool = False) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    The parent directory must already exist. NaN and +/-Infinity are not
    valid JSON and raise ValueError before anything touches the disk.
    """
    text = json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False, allow_nan=False)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
