"""Public SDK surface for vocabport.

This module provides a stable import path for library users.
It re-exports the primary client, the pipeline, and typed models.
"""

from __future__ import annotations

from core.config import VocabConfig
from core.errors import (
    VocabError,
    VocabFormatError,
    VocabImportBlockedError,
    VocabImportError,
)
from core.types import (
    ImportOptions,
    ImportSummary,
    IngestResult,
    StoredWord,
    ValidationError,
    VocabularyEntry,
)
from export.entry_writer import render_entries, render_template
from ingest.pipeline import ingest
from store.vocab_client import VocabClient

__all__ = [
    "ImportOptions",
    "ImportSummary",
    "IngestResult",
    "StoredWord",
    "ValidationError",
    "VocabClient",
    "VocabConfig",
    "VocabError",
    "VocabFormatError",
    "VocabImportBlockedError",
    "VocabImportError",
    "VocabularyEntry",
    "ingest",
    "render_entries",
    "render_template",
]
