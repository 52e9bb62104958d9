"""CSV and JSON rendering for vocabulary entries.

This module serializes entries in the column layout the importer reads.
Text cells are wrapped in double quotes and example sentences are joined
with semicolons, so exported files import cleanly in naive CSV mode as
long as no value contains a comma.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Iterable

from core.constants import (
    CSV_DELIMITER,
    CSV_QUOTE,
    EXPORT_COLUMNS,
    EXPORT_FILE_STEM,
    SENTENCE_SEPARATOR,
    SUPPORTED_FORMATS,
    TEMPLATE_FILE_STEM,
)
from core.errors import VocabExportError
from core.types import VocabularyEntry
from store.word_payload import entry_to_payload

TEMPLATE_ENTRIES = (
    VocabularyEntry(
        english_word="hello",
        meaning="سلام",
        example_sentences=("Hello world", "Hello there"),
        total_attempts=5,
        correct_answers=4,
        created_at="2024-01-15T10:30:00Z",
    ),
    VocabularyEntry(
        english_word="goodbye",
        meaning="خداحافظ",
        example_sentences=("Goodbye friend", "See you later"),
        total_attempts=3,
        correct_answers=2,
        created_at="2024-01-16T14:20:00Z",
    ),
    VocabularyEntry(
        english_word="thank you",
        meaning="متشکرم",
        example_sentences=("Thank you very much", "Thanks for your help"),
        total_attempts=8,
        correct_answers=7,
        created_at="2024-01-17T09:15:00Z",
    ),
)


def render_entries(entries: Iterable[VocabularyEntry], output_format: str) -> str:
    """Render entries as CSV or JSON text.

    Args:
        entries: Entries in output order.
        output_format: ``csv`` or ``json``.

    Returns:
        Serialized file contents.

    Raises:
        VocabExportError: If the format is not supported.
    """
    if output_format == "csv":
        return _render_csv(entries)
    if output_format == "json":
        payload = [entry_to_payload(entry) for entry in entries]
        return json.dumps(payload, indent=2, ensure_ascii=False)
    raise VocabExportError(
        f"Unsupported export format '{output_format}'. "
        f"Use one of: {', '.join(SUPPORTED_FORMATS)}."
    )


def render_template(output_format: str) -> str:
    """Render the sample vocabulary template."""
    return render_entries(TEMPLATE_ENTRIES, output_format)


def template_file_name(output_format: str) -> str:
    return f"{TEMPLATE_FILE_STEM}.{output_format}"


def export_file_name(output_format: str, export_date: date) -> str:
    """Build the dated export file name, e.g. ``vocabulary_export_2024-01-15.csv``."""
    return f"{EXPORT_FILE_STEM}_{export_date.isoformat()}.{output_format}"


def _render_csv(entries: Iterable[VocabularyEntry]) -> str:
    lines = [CSV_DELIMITER.join(EXPORT_COLUMNS)]
    for entry in entries:
        cells = [
            _quote(entry.english_word),
            _quote(entry.meaning),
            _quote(SENTENCE_SEPARATOR.join(entry.example_sentences)),
            str(entry.total_attempts),
            str(entry.correct_answers),
            entry.created_at,
        ]
        lines.append(CSV_DELIMITER.join(cells))
    return "\n".join(lines)


def _quote(value: str) -> str:
    return f"{CSV_QUOTE}{value}{CSV_QUOTE}"
