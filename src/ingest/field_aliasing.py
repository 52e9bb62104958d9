"""Column aliasing for raw import rows.

This module resolves alternate column names to canonical fields and tags
every source value with its shape, independent of the input format.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.constants import (
    CORRECT_ANSWERS_FIELD,
    CREATED_AT_FIELD,
    ENGLISH_WORD_ALIASES,
    EXAMPLE_SENTENCES_FIELD,
    MEANING_ALIASES,
    TOTAL_ATTEMPTS_FIELD,
)
from core.types import MISSING_VALUE, NormalizedRow, RawRow, RawValue


def normalize_row(row: RawRow) -> NormalizedRow:
    """Resolve aliased columns of one raw row.

    Args:
        row: Raw row from the format parser.

    Returns:
        Row keyed by canonical field with tagged values.
    """
    return NormalizedRow(
        english_word=_first_present(row, ENGLISH_WORD_ALIASES),
        meaning=_first_present(row, MEANING_ALIASES),
        example_sentences=_lookup(row, EXAMPLE_SENTENCES_FIELD),
        total_attempts=_lookup(row, TOTAL_ATTEMPTS_FIELD),
        correct_answers=_lookup(row, CORRECT_ANSWERS_FIELD),
        created_at=_lookup(row, CREATED_AT_FIELD),
    )


def classify_value(value: object) -> RawValue:
    """Tag a parsed value with its shape.

    Args:
        value: Value from a CSV cell or JSON object.

    Returns:
        Tagged raw value.
    """
    if value is None:
        return RawValue(kind="null", value=None)
    if isinstance(value, bool):
        return RawValue(kind="boolean", value=value)
    if isinstance(value, str):
        return RawValue(kind="text", value=value)
    if isinstance(value, int):
        return RawValue(kind="integer", value=value)
    if isinstance(value, float):
        return RawValue(kind="number", value=value)
    if isinstance(value, Mapping):
        return RawValue(kind="mapping", value=value)
    if isinstance(value, (list, tuple)):
        return RawValue(kind="sequence", value=value)
    return RawValue(kind="text", value=str(value))


def _lookup(row: RawRow, column: str) -> RawValue:
    if column not in row:
        return MISSING_VALUE
    return classify_value(row[column])


def _first_present(row: RawRow, aliases: Iterable[str]) -> RawValue:
    """Return the first alias holding a non-blank value.

    Falls back to the first alias present at all so blank and malformed
    values still surface in validation errors.
    """
    fallback = MISSING_VALUE
    for alias in aliases:
        candidate = _lookup(row, alias)
        if candidate.kind == "missing":
            continue
        if not candidate.is_blank():
            return candidate
        if fallback.kind == "missing":
            fallback = candidate
    return fallback
