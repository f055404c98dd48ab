"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clean_resource_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of config-dependent tests."""
    monkeypatch.delenv("S3RESOURCE_VALIDATE_BUCKET_NAMES", raising=False)
    monkeypatch.delenv("S3RESOURCE_LOG_LEVEL", raising=False)
