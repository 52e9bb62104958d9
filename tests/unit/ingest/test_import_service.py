"""Unit tests for import policy and commit orchestration."""

from __future__ import annotations

import pytest

from core.config import VocabConfig
from core.errors import VocabFormatError, VocabImportBlockedError, VocabImportError
from core.types import ImportOptions
from ingest.import_service import import_vocabulary
from store.word_store import WordStore
from tests.fixture_paths import import_fixture


def _options(file_name: str, **overrides: object) -> ImportOptions:
    return ImportOptions(source_uri=str(import_fixture(file_name)), owner_id="sara", **overrides)


def test_import_vocabulary_stores_clean_file(vocab_config: VocabConfig) -> None:
    """A file without errors is committed under the default policy."""
    summary = import_vocabulary(_options("valid_words.csv"), vocab_config)

    assert summary.imported_count == 3
    assert len(WordStore(vocab_config).list_words("sara")) == 3


def test_import_vocabulary_blocks_on_errors_by_default(vocab_config: VocabConfig) -> None:
    """The strict policy refuses files with any validation error."""
    with pytest.raises(VocabImportBlockedError) as error_info:
        import_vocabulary(_options("mixed_rows.csv"), vocab_config)

    assert len(error_info.value.result.errors) == 6
    assert WordStore(vocab_config).list_words("sara") == []


def test_import_vocabulary_accept_valid_commits_accepted_rows(vocab_config: VocabConfig) -> None:
    """The lenient policy commits accepted rows despite errors."""
    summary = import_vocabulary(
        _options("mixed_rows.csv", policy="accept-valid"),
        vocab_config,
    )

    assert (summary.imported_count, summary.error_count) == (3, 6)


def test_import_vocabulary_dry_run_writes_nothing(vocab_config: VocabConfig) -> None:
    """Dry runs validate without touching the store."""
    summary = import_vocabulary(_options("valid_words.json", dry_run=True), vocab_config)

    assert (summary.accepted_count, summary.imported_count) == (2, 0)
    assert WordStore(vocab_config).list_words("sara") == []


def test_import_vocabulary_requires_an_importable_row(vocab_config: VocabConfig) -> None:
    """A file with no accepted rows cannot be imported under either policy."""
    with pytest.raises(VocabImportError):
        import_vocabulary(_options("missing_meaning.json", policy="accept-valid"), vocab_config)


def test_import_vocabulary_propagates_format_errors(vocab_config: VocabConfig) -> None:
    """File-level failures stop the import before the store is touched."""
    with pytest.raises(VocabFormatError):
        import_vocabulary(_options("object_root.json"), vocab_config)


def test_import_vocabulary_uses_configured_csv_mode(vocab_config: VocabConfig) -> None:
    """The CSV mode option selects the quote-aware tokenizer."""
    summary = import_vocabulary(
        _options("quoted_commas.csv", csv_mode="quoted", dry_run=True),
        vocab_config,
    )

    assert summary.errors == () and summary.accepted_count == 1
