"""Python SDK for vocabulary operations.

This module exposes high-level APIs for validating, importing,
listing, and exporting vocabulary backed by the word store.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from pathlib import Path

from core.config import VocabConfig
from core.types import (
    CsvMode,
    ImportOptions,
    ImportSummary,
    IngestResult,
    StoredWord,
    VocabFormat,
)
from export.entry_writer import render_template
from export.word_export import export_words, write_output
from ingest.import_service import import_vocabulary
from ingest.pipeline import ingest
from ingest.source_reader import read_source
from store.word_store import WordStore


class VocabClient:
    """Primary SDK entry point for vocabulary workflows."""

    def __init__(self, config: VocabConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or VocabConfig.from_env()
        self._store = WordStore(self._config)

    @property
    def config(self) -> VocabConfig:
        return self._config

    def ingest_file(
        self,
        source_uri: str,
        declared_format: VocabFormat | None = None,
        csv_mode: CsvMode | None = None,
        now: datetime | None = None,
    ) -> IngestResult:
        """Validate an import file without storing anything.

        Args:
            source_uri: Local path or ``s3://`` URI.
            declared_format: Explicit format; inferred from extension when omitted.
            csv_mode: CSV tokenizer override.
            now: Timestamp for absent creation dates.

        Returns:
            Accepted entries and validation errors.

        Raises:
            VocabFormatError: If the file fails a file-level precondition.
            VocabIngestError: If the source cannot be read.
        """
        payload = read_source(source_uri, self._config, declared_format)
        return ingest(
            payload.data,
            payload.declared_format,
            csv_mode or self._config.csv_mode,
            now=now,
        )

    def import_file(self, options: ImportOptions) -> ImportSummary:
        """Validate an import file and commit accepted words.

        Args:
            options: Import options.

        Returns:
            Import summary.
        """
        return import_vocabulary(options, self._config, self._store)

    def list_words(self, owner_id: str) -> list[StoredWord]:
        """List an owner's words, newest first."""
        return self._store.list_words(owner_id)

    def delete_word(self, owner_id: str, word_id: str) -> bool:
        """Delete one of an owner's words by id."""
        return self._store.delete_word(owner_id, word_id)

    def export_words(self, owner_id: str, output_format: str) -> str:
        """Render an owner's words as CSV or JSON.

        Raises:
            VocabExportError: If the owner has no words.
        """
        return export_words(self._store, owner_id, output_format)

    def template(self, output_format: str) -> str:
        """Render the sample import template."""
        return render_template(output_format)

    def write_output(self, content: str, output_uri: str) -> str:
        """Write rendered content to a local path or ``s3://`` URI."""
        return write_output(content, output_uri, self._config)

    def with_data_root(self, data_root: str) -> "VocabClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        updated_config = replace(self._config, data_root=resolved_root)
        return VocabClient(updated_config)
