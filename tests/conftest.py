"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def vocab_config(tmp_path, monkeypatch):
    """Runtime config rooted in a temporary directory with default policies."""
    from core.config import VocabConfig

    monkeypatch.delenv("VOCAB_IMPORT_POLICY", raising=False)
    monkeypatch.delenv("VOCAB_CSV_MODE", raising=False)
    return replace(VocabConfig.from_env(), data_root=tmp_path)


@pytest.fixture
def fixed_now() -> datetime:
    """Deterministic timestamp for defaulted creation dates."""
    return datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
