"""Unit tests for column aliasing."""

from __future__ import annotations

from core.types import RawValue
from ingest.field_aliasing import classify_value, normalize_row


def test_normalize_row_prefers_first_alias() -> None:
    """Canonical column names should win over shorter aliases."""
    row = normalize_row({"english_word": "cat", "word": "dog", "persian": "گربه"})

    assert (row.english_word.value, row.meaning.value) == ("cat", "گربه")


def test_normalize_row_skips_blank_aliases() -> None:
    """A blank canonical column should fall through to the next alias."""
    row = normalize_row({"english_word": "  ", "english": "cat", "meaning": "گربه"})

    assert row.english_word == RawValue(kind="text", value="cat")


def test_normalize_row_keeps_blank_value_when_no_alias_has_text() -> None:
    """Blank values still surface so validation can report them."""
    row = normalize_row({"english_word": "", "word": None})

    assert row.english_word == RawValue(kind="text", value="")


def test_normalize_row_marks_absent_columns_missing() -> None:
    """Columns that never appear are tagged missing."""
    row = normalize_row({"word": "dog"})

    assert row.meaning.kind == "missing" and row.created_at.kind == "missing"


def test_classify_value_tags_json_shapes() -> None:
    """Every JSON value shape should get its own tag."""
    kinds = [
        classify_value(value).kind
        for value in (None, True, "x", 3, 2.5, ["a"], {"a": 1})
    ]

    assert kinds == ["null", "boolean", "text", "integer", "number", "sequence", "mapping"]
