"""Row validation for vocabulary imports.

This module checks one normalized row against the vocabulary schema.
Every rule runs independently so a row reports all of its problems.
Only the English word and meaning gate acceptance; other fields fall
back to defaults when invalid and the row is still accepted.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Sequence, cast

from core.constants import (
    CORRECT_ANSWERS_FIELD,
    CORRECT_ANSWERS_MESSAGE,
    CORRECT_EXCEEDS_TOTAL_MESSAGE,
    CREATED_AT_FIELD,
    CREATED_AT_MESSAGE,
    ENGLISH_WORD_FIELD,
    ENGLISH_WORD_REQUIRED_MESSAGE,
    EXAMPLE_SENTENCES_FIELD,
    EXAMPLE_SENTENCES_MESSAGE,
    MEANING_FIELD,
    MEANING_REQUIRED_MESSAGE,
    SENTENCE_SEPARATOR,
    TOTAL_ATTEMPTS_FIELD,
    TOTAL_ATTEMPTS_MESSAGE,
)
from core.timestamps import format_timestamp
from core.types import NormalizedRow, RawValue, RowOutcome, ValidationError, VocabularyEntry

_NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
# Largest integer a double holds exactly; counters above it are rejected.
_MAX_COUNTER = 2**53 - 1


def validate_row(row_number: int, row: NormalizedRow, now: datetime) -> RowOutcome:
    """Validate one normalized row.

    Args:
        row_number: One-based row number after the header.
        row: Row with aliased columns resolved.
        now: Timestamp used when the creation date is absent or invalid.

    Returns:
        Accepted entry (when the required fields passed) and all errors.
    """
    english_word, english_error = _check_required_text(
        row_number, ENGLISH_WORD_FIELD, row.english_word, ENGLISH_WORD_REQUIRED_MESSAGE
    )
    meaning, meaning_error = _check_required_text(
        row_number, MEANING_FIELD, row.meaning, MEANING_REQUIRED_MESSAGE
    )
    sentences, sentences_error = _check_example_sentences(row_number, row.example_sentences)
    total_attempts, total_error = _check_counter(
        row_number, TOTAL_ATTEMPTS_FIELD, row.total_attempts, TOTAL_ATTEMPTS_MESSAGE
    )
    correct_answers, correct_error = _check_counter(
        row_number, CORRECT_ANSWERS_FIELD, row.correct_answers, CORRECT_ANSWERS_MESSAGE
    )
    range_error = None
    if total_error is None and correct_error is None:
        range_error = _check_counter_range(row_number, total_attempts, correct_answers)
    created_at, created_error = _check_created_at(row_number, row.created_at, now)
    candidate_errors = (
        english_error,
        meaning_error,
        sentences_error,
        total_error,
        correct_error,
        range_error,
        created_error,
    )
    errors = tuple(error for error in candidate_errors if error is not None)
    if english_word is None or meaning is None:
        return RowOutcome(entry=None, errors=errors)
    entry = VocabularyEntry(
        english_word=english_word,
        meaning=meaning,
        created_at=created_at,
        example_sentences=sentences,
        total_attempts=total_attempts,
        correct_answers=correct_answers,
    )
    return RowOutcome(entry=entry, errors=errors)


def parse_timestamp(raw: RawValue) -> str | None:
    """Parse a creation timestamp into canonical form.

    Text must be an ISO-8601 date or datetime. Numbers are epoch
    milliseconds.

    Args:
        raw: Tagged source value.

    Returns:
        Canonical timestamp, or ``None`` if the value is not a date.
    """
    if raw.kind == "text":
        try:
            return format_timestamp(datetime.fromisoformat(str(raw.value).strip()))
        except (ValueError, OverflowError):
            return None
    if raw.kind in ("integer", "number"):
        milliseconds = _as_float(raw)
        if milliseconds is None:
            return None
        try:
            moment = datetime.fromtimestamp(milliseconds / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return format_timestamp(moment)
    return None


def _check_required_text(
    row_number: int,
    field_name: str,
    raw: RawValue,
    message: str,
) -> tuple[str | None, ValidationError | None]:
    text = _as_text(raw)
    if text is None or not text.strip():
        offending = "" if raw.kind in ("missing", "null") else raw.value
        return None, ValidationError(row_number, field_name, offending, message)
    return text.strip(), None


def _check_example_sentences(
    row_number: int,
    raw: RawValue,
) -> tuple[tuple[str, ...], ValidationError | None]:
    if raw.kind == "text":
        parts = str(raw.value).split(SENTENCE_SEPARATOR)
        return tuple(part.strip() for part in parts if part.strip()), None
    if raw.kind == "sequence":
        items = cast(Sequence[object], raw.value)
        return tuple(item.strip() for item in items if isinstance(item, str) and item.strip()), None
    # Zero and false count as absent, like an empty cell.
    if raw.kind in ("missing", "null") or not raw.value:
        return (), None
    return (), ValidationError(
        row_number, EXAMPLE_SENTENCES_FIELD, raw.value, EXAMPLE_SENTENCES_MESSAGE
    )


def _check_counter(
    row_number: int,
    field_name: str,
    raw: RawValue,
    message: str,
) -> tuple[int, ValidationError | None]:
    """Validate a non-negative integer counter; blank means zero."""
    if raw.is_blank():
        return 0, None
    parsed = _parse_non_negative_integer(raw)
    if parsed is None:
        return 0, ValidationError(row_number, field_name, raw.value, message)
    return parsed, None


def _check_counter_range(
    row_number: int,
    total_attempts: int,
    correct_answers: int,
) -> ValidationError | None:
    if correct_answers <= total_attempts:
        return None
    return ValidationError(
        row_number,
        CORRECT_ANSWERS_FIELD,
        correct_answers,
        CORRECT_EXCEEDS_TOTAL_MESSAGE,
    )


def _check_created_at(
    row_number: int,
    raw: RawValue,
    now: datetime,
) -> tuple[str, ValidationError | None]:
    fallback = format_timestamp(now)
    if raw.is_blank() or (raw.kind in ("integer", "number", "boolean") and not raw.value):
        return fallback, None
    parsed = parse_timestamp(raw)
    if parsed is None:
        return fallback, ValidationError(
            row_number, CREATED_AT_FIELD, raw.value, CREATED_AT_MESSAGE
        )
    return parsed, None


def _as_text(raw: RawValue) -> str | None:
    """Return the textual form of a scalar value, or None for other shapes."""
    if raw.kind in ("text", "integer"):
        return str(raw.value)
    if raw.kind == "number":
        number = float(cast(float, raw.value))
        if not math.isfinite(number):
            return None
        return str(int(number)) if number.is_integer() else str(number)
    return None


def _parse_non_negative_integer(raw: RawValue) -> int | None:
    """Parse a counter the way a JSON number reads, bounded to exact doubles."""
    if raw.kind == "text":
        text = str(raw.value).strip()
        if not _NUMBER_PATTERN.fullmatch(text):
            return None
        value: float | None = float(text)
    elif raw.kind in ("integer", "number"):
        value = _as_float(raw)
    else:
        return None
    if value is None or not math.isfinite(value) or not value.is_integer():
        return None
    if value < 0 or value > _MAX_COUNTER:
        return None
    return int(value)


def _as_float(raw: RawValue) -> float | None:
    """Return a finite float for a numeric value, or None when out of range."""
    try:
        number = float(cast(float, raw.value))
    except OverflowError:
        return None
    return number if math.isfinite(number) else None
