"""Ingest orchestration for vocabulary imports.

This module runs parse, alias, and validate stages over every row and
aggregates accepted entries and validation errors. It never touches the
word store; committing accepted entries is the import service's job.
"""

from __future__ import annotations

from datetime import datetime

from core.errors import VocabFormatError
from core.logging_config import get_logger
from core.timestamps import utc_now
from core.types import CsvMode, IngestResult, RawRow, ValidationError, VocabularyEntry
from ingest.field_aliasing import normalize_row
from ingest.format_parser import parse_rows
from ingest.row_validator import validate_row

_LOGGER = get_logger(__name__)


def ingest(
    data: bytes | str,
    declared_format: str,
    csv_mode: CsvMode = "naive",
    now: datetime | None = None,
) -> IngestResult:
    """Parse and validate a vocabulary import file.

    Args:
        data: Raw file bytes or already-decoded text.
        declared_format: ``csv`` or ``json``.
        csv_mode: CSV tokenizer, ``naive`` or ``quoted``.
        now: Timestamp for absent creation dates; current UTC time when omitted.

    Returns:
        Accepted entries in input order plus every validation error.

    Raises:
        VocabFormatError: If the file fails a file-level precondition.
    """
    text = decode_payload(data)
    rows = parse_rows(text, declared_format, csv_mode)
    result = validate_rows(rows, now or utc_now())
    _LOGGER.info(
        "ingest_completed",
        declared_format=declared_format,
        csv_mode=csv_mode if declared_format == "csv" else None,
        row_count=result.row_count,
        accepted_count=len(result.accepted),
        error_count=len(result.errors),
    )
    return result


def validate_rows(rows: list[RawRow], now: datetime) -> IngestResult:
    """Validate already-parsed raw rows.

    Args:
        rows: Raw rows in input order.
        now: Timestamp for absent creation dates.

    Returns:
        Aggregated pipeline result.
    """
    accepted: list[VocabularyEntry] = []
    errors: list[ValidationError] = []
    for row_number, row in enumerate(rows, 1):
        outcome = validate_row(row_number, normalize_row(row), now)
        errors.extend(outcome.errors)
        if outcome.entry is not None:
            accepted.append(outcome.entry)
    return IngestResult(accepted=tuple(accepted), errors=tuple(errors), row_count=len(rows))


def decode_payload(data: bytes | str) -> str:
    """Decode UTF-8 file bytes, tolerating a byte-order mark.

    Raises:
        VocabFormatError: If the bytes are not valid UTF-8.
    """
    if isinstance(data, str):
        return data.removeprefix("\ufeff")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as error:
        raise VocabFormatError(
            f"Failed to decode import file at byte {error.start}: not valid UTF-8. "
            "Save the file with UTF-8 encoding and retry the import."
        ) from error
