from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import storage...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def app_home(tmp_path: Path) -> Path:
    """
    A fresh application-home directory; storage.json lives directly inside it.
    """
    home = tmp_path / "app-home"
    home.mkdir()
    return home


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, app_home: Path) -> Path:
    """
    Point APP_HOME at a temp directory so tests never touch the real config dir.
    """
    monkeypatch.setenv("APP_HOME", str(app_home))
    monkeypatch.delenv("VERBOSE_LOGGING", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return app_home


@pytest.fixture
def reload_endpoints(sandbox_env: Path) -> None:
    """
    Endpoints create the store singleton at import time; reload after sandboxing the env.
    """
    import endpoints.storage_endpoints as storage_endpoints

    importlib.reload(storage_endpoints)
