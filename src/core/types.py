"""Shared typed models.

This module defines immutable data models used by the ingest pipeline,
the word store, the export writer and the SDK to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping

VocabFormat = Literal["csv", "json"]
CsvMode = Literal["naive", "quoted"]
ImportPolicy = Literal["block-on-errors", "accept-valid"]
RawValueKind = Literal[
    "missing",
    "null",
    "text",
    "integer",
    "number",
    "boolean",
    "sequence",
    "mapping",
]

RawRow = Mapping[str, object]


@dataclass(frozen=True)
class RawValue:
    """Source value tagged with its shape before validation.

    Attributes:
        kind: Shape of the source value.
        value: Original value exactly as parsed.
    """

    kind: RawValueKind
    value: object = None

    def is_blank(self) -> bool:
        """Return whether the value counts as absent for defaulting."""
        if self.kind in ("missing", "null"):
            return True
        return self.kind == "text" and not str(self.value).strip()


MISSING_VALUE = RawValue(kind="missing")


@dataclass(frozen=True)
class NormalizedRow:
    """Raw row after column aliasing, keyed by canonical field.

    Attributes:
        english_word: Value resolved from the english-word aliases.
        meaning: Value resolved from the meaning aliases.
        example_sentences: Raw example sentences value.
        total_attempts: Raw total attempts value.
        correct_answers: Raw correct answers value.
        created_at: Raw creation timestamp value.
    """

    english_word: RawValue = MISSING_VALUE
    meaning: RawValue = MISSING_VALUE
    example_sentences: RawValue = MISSING_VALUE
    total_attempts: RawValue = MISSING_VALUE
    correct_answers: RawValue = MISSING_VALUE
    created_at: RawValue = MISSING_VALUE


@dataclass(frozen=True)
class VocabularyEntry:
    """Validated vocabulary record ready for storage.

    Attributes:
        english_word: Trimmed English word or phrase.
        meaning: Trimmed Persian meaning.
        example_sentences: Trimmed non-empty example sentences.
        total_attempts: Number of practice attempts so far.
        correct_answers: Number of correct practice answers so far.
        created_at: Canonical ISO-8601 UTC timestamp.
    """

    english_word: str
    meaning: str
    created_at: str
    example_sentences: tuple[str, ...] = ()
    total_attempts: int = 0
    correct_answers: int = 0


@dataclass(frozen=True)
class ValidationError:
    """Field-level validation problem for one input row.

    Attributes:
        row_number: One-based row number after the CSV header.
        field: Canonical column name of the offending field.
        value: Original offending value.
        message: Human-readable reason.
    """

    row_number: int
    field: str
    value: object
    message: str


@dataclass(frozen=True)
class RowOutcome:
    """Validation outcome for a single row."""

    entry: VocabularyEntry | None
    errors: tuple[ValidationError, ...] = ()


@dataclass(frozen=True)
class IngestResult:
    """Aggregated pipeline output.

    Attributes:
        accepted: Entries whose required fields passed, in input order.
        errors: Every validation error, ordered by row then rule.
        row_count: Number of input rows examined.
    """

    accepted: tuple[VocabularyEntry, ...]
    errors: tuple[ValidationError, ...]
    row_count: int

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_for_row(self, row_number: int) -> tuple[ValidationError, ...]:
        """Return the validation errors reported for one row."""
        return tuple(error for error in self.errors if error.row_number == row_number)


@dataclass(frozen=True)
class SourcePayload:
    """Import file contents with its resolved format.

    Attributes:
        source_uri: Local path or ``s3://`` URI the data came from.
        declared_format: Format the payload is parsed as.
        data: Raw file bytes.
    """

    source_uri: str
    declared_format: VocabFormat
    data: bytes


@dataclass(frozen=True)
class StoredWord:
    """Vocabulary entry persisted for one owner.

    Attributes:
        word_id: Store-assigned identifier.
        owner_id: Owner of the word list.
        entry: Stored vocabulary fields.
        updated_at: Store-assigned modification timestamp.
    """

    word_id: str
    owner_id: str
    entry: VocabularyEntry
    updated_at: str


@dataclass(frozen=True)
class ImportOptions:
    """Import command options.

    Attributes:
        source_uri: Input file path or ``s3://`` URI.
        owner_id: Owner receiving the imported words.
        declared_format: Explicit format; inferred from extension when omitted.
        policy: Commit policy override; config default when omitted.
        csv_mode: CSV tokenizer override; config default when omitted.
        dry_run: Validate only, never write to the store.
    """

    source_uri: str
    owner_id: str
    declared_format: VocabFormat | None = None
    policy: ImportPolicy | None = None
    csv_mode: CsvMode | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of an import run.

    Attributes:
        source_uri: Imported source.
        declared_format: Format the source was parsed as.
        policy: Commit policy that was applied.
        row_count: Rows examined.
        accepted_count: Rows whose required fields passed.
        imported_count: Words written to the store.
        errors: Validation errors reported for the source.
        stored_words: Persisted words in insertion order.
    """

    source_uri: str
    declared_format: VocabFormat
    policy: ImportPolicy
    row_count: int
    accepted_count: int
    imported_count: int
    errors: tuple[ValidationError, ...] = ()
    stored_words: tuple[StoredWord, ...] = field(default_factory=tuple)

    @property
    def error_count(self) -> int:
        return len(self.errors)
