from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storage.paths import ensure_dir

APP_NAME = "storage-service"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _default_app_home() -> Path:
    config_home = os.getenv("XDG_CONFIG_HOME", "").strip()
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_NAME


@dataclass(frozen=True)
class Settings:
    # Directory holding storage.json
    app_home: str

    # Debug
    verbose_logging: bool
    log_level: str


def get_settings() -> Settings:
    raw_home = os.getenv("APP_HOME", "").strip()
    app_home = ensure_dir(Path(raw_home).expanduser() if raw_home else _default_app_home())

    verbose_logging = _env_bool("VERBOSE_LOGGING", False)
    log_level = os.getenv("LOG_LEVEL", "DEBUG" if verbose_logging else "INFO").strip().upper()

    return Settings(
        app_home=str(app_home),
        verbose_logging=verbose_logging,
        log_level=log_level,
    )
