"""Vocabport exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Row-level validation problems are data, not exceptions; see core.types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.types import IngestResult


class VocabError(Exception):
    """Base exception for all vocabport failures."""


class VocabConfigError(VocabError):
    """Raised for invalid runtime configuration."""


class VocabFormatError(VocabError):
    """Raised when an import file cannot be parsed as a whole."""


class VocabIngestError(VocabError):
    """Raised when an import source cannot be located or read."""


class VocabImportError(VocabError):
    """Raised when an import cannot be committed."""


class VocabImportBlockedError(VocabImportError):
    """Raised when validation errors block an import under the strict policy."""

    def __init__(self, message: str, result: IngestResult) -> None:
        super().__init__(message)
        self.result = result


class VocabStoreError(VocabError):
    """Raised for word store persistence failures."""


class VocabExportError(VocabError):
    """Raised for export and template rendering failures."""


class VocabDependencyError(VocabError):
    """Raised when an optional runtime dependency is missing."""
