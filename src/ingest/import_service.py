"""Import orchestration for vocabulary files.

This module reads an import source, runs the ingest pipeline, applies
the commit policy, and bulk-inserts accepted entries into the word store.
"""

from __future__ import annotations

from core.config import VocabConfig
from core.errors import VocabImportBlockedError, VocabImportError
from core.logging_config import get_logger
from core.types import ImportOptions, ImportPolicy, ImportSummary, IngestResult, StoredWord
from ingest.pipeline import ingest
from ingest.source_reader import read_source
from store.word_store import WordStore

_LOGGER = get_logger(__name__)


def import_vocabulary(
    options: ImportOptions,
    config: VocabConfig,
    store: WordStore | None = None,
) -> ImportSummary:
    """Validate an import file and commit accepted words.

    Args:
        options: Import request options.
        config: Runtime configuration.
        store: Word store override; built from config when omitted.

    Returns:
        Summary of the validated and imported rows.

    Raises:
        VocabFormatError: If the file fails a file-level precondition.
        VocabIngestError: If the source cannot be read.
        VocabImportBlockedError: If errors exist under ``block-on-errors``.
        VocabImportError: If no row is importable.
        VocabStoreError: If the batch insert fails.
    """
    policy = options.policy or config.import_policy
    payload = read_source(options.source_uri, config, options.declared_format)
    result = ingest(payload.data, payload.declared_format, options.csv_mode or config.csv_mode)
    enforce_policy(result, policy, options.source_uri)
    stored_words: list[StoredWord] = []
    if not options.dry_run:
        word_store = store or WordStore(config)
        stored_words = word_store.insert_entries(options.owner_id, result.accepted)
    summary = ImportSummary(
        source_uri=options.source_uri,
        declared_format=payload.declared_format,
        policy=policy,
        row_count=result.row_count,
        accepted_count=len(result.accepted),
        imported_count=len(stored_words),
        errors=result.errors,
        stored_words=tuple(stored_words),
    )
    _LOGGER.info(
        "import_completed",
        source_uri=options.source_uri,
        owner_id=options.owner_id,
        policy=policy,
        dry_run=options.dry_run,
        row_count=summary.row_count,
        accepted_count=summary.accepted_count,
        imported_count=summary.imported_count,
        error_count=summary.error_count,
    )
    return summary


def enforce_policy(result: IngestResult, policy: ImportPolicy, source_uri: str) -> None:
    """Decide whether a validated result may be committed.

    Args:
        result: Pipeline output.
        policy: Commit policy.
        source_uri: Source being imported, for messages.

    Raises:
        VocabImportBlockedError: If errors exist under ``block-on-errors``.
        VocabImportError: If nothing is importable.
    """
    if policy == "block-on-errors" and result.has_errors:
        _LOGGER.warning(
            "import_blocked",
            source_uri=source_uri,
            error_count=len(result.errors),
            accepted_count=len(result.accepted),
        )
        raise VocabImportBlockedError(
            f"Import of {source_uri} blocked by {len(result.errors)} validation errors. "
            "Fix the errors or import with the accept-valid policy.",
            result,
        )
    if not result.accepted:
        raise VocabImportError(
            f"No valid vocabulary rows found in {source_uri}. "
            "Each row needs an English word and a Persian meaning."
        )
