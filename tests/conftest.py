"""
Shared pytest fixtures for filebridge test suite.

Provides fixtures for:
- Isolated FILEBRIDGE_HOME storage
- A temporary root directory and services bound to it
- FastAPI test client with the core dependency overridden
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# filebridged.main loads settings at import time; keep that out of the working tree
os.environ.setdefault("FILEBRIDGE_HOME", tempfile.mkdtemp(prefix="filebridge-test-home-"))


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point FILEBRIDGE_HOME at a temp directory.

    Also clears FILEBRIDGE_* overrides that would leak in from the shell.

    Returns:
        Path to temporary storage directory
    """
    storage = tmp_path / "filebridge_home"
    storage.mkdir()
    for key in list(os.environ):
        if key.startswith("FILEBRIDGE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FILEBRIDGE_HOME", str(storage))
    return storage


@pytest.fixture
def test_root(tmp_path: Path) -> Path:
    """Create test root directory."""
    root = tmp_path / "test_root"
    root.mkdir()
    return root


@pytest.fixture
def core(test_root: Path):
    """Create real filesystem core with test root."""
    from filebridge_library.fs import FileSystemCore

    return FileSystemCore(test_root)


@pytest.fixture
def client(core) -> Generator:
    """FastAPI test client with the core dependency overridden."""
    from fastapi.testclient import TestClient

    from filebridged.dependencies import get_core
    from filebridged.main import app

    app.dependency_overrides[get_core] = lambda: core
    yield TestClient(app)
    app.dependency_overrides.clear()
