"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def import_fixture(file_name: str) -> Path:
    """Resolve a vocabulary import file under tests/fixtures/imports."""
    return fixture_path(f"imports/{file_name}")


def import_fixture_bytes(file_name: str) -> bytes:
    """Read a vocabulary import fixture as raw bytes."""
    return import_fixture(file_name).read_bytes()
