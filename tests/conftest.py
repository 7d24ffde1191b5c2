from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

# ``src.rateboard.main`` builds an app at import time; keep it off the working tree.
_IMPORT_DB_DIR = Path(tempfile.mkdtemp(prefix="rateboard-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_IMPORT_DB_DIR / 'import.db'}")

TINY_PNG = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def tiny_png() -> bytes:
    return TINY_PNG


def _build_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, *, seed: bool) -> TestClient:
    from src.rateboard.config import load_config
    from src.rateboard.main import create_app

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'rateboard.db'}")
    monkeypatch.setenv("RATEBOARD_SEED_DEFAULTS", "true" if seed else "false")
    return TestClient(create_app(load_config()))


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """App backed by a fresh SQLite file with the default rate and settings rows."""
    with _build_client(tmp_path, monkeypatch, seed=True) as test_client:
        yield test_client


@pytest.fixture
def empty_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """App backed by a fresh SQLite file with no rows at all."""
    with _build_client(tmp_path, monkeypatch, seed=False) as test_client:
        yield test_client
