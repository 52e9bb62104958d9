"""Format parsers for vocabulary import files.

This module turns decoded CSV or JSON text into ordered raw rows.
File-level problems fail the whole parse before any row is validated.

Naive CSV mode splits every line on commas and cannot represent a comma
inside a quoted field. It matches the files produced by the export and
template writers. Quoted mode uses the standard ``csv`` tokenizer instead.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from core.constants import CSV_DELIMITER, CSV_QUOTE, SUPPORTED_FORMATS
from core.errors import VocabFormatError
from core.types import CsvMode, RawRow


def parse_rows(text: str, declared_format: str, csv_mode: CsvMode = "naive") -> list[RawRow]:
    """Parse decoded file text into raw rows.

    Args:
        text: Decoded file contents.
        declared_format: ``csv`` or ``json``.
        csv_mode: CSV tokenizer, ``naive`` or ``quoted``.

    Returns:
        Raw rows in file order.

    Raises:
        VocabFormatError: If the file cannot be parsed as a whole.
    """
    if declared_format not in SUPPORTED_FORMATS:
        raise VocabFormatError(
            f"Unsupported import format '{declared_format}'. "
            f"Use one of: {', '.join(SUPPORTED_FORMATS)}."
        )
    if not text.strip():
        raise VocabFormatError(
            f"Invalid {declared_format.upper()}: the file is empty. "
            "Add vocabulary rows and retry the import."
        )
    if declared_format == "json":
        return parse_json_rows(text)
    if csv_mode == "quoted":
        return parse_quoted_csv_rows(text)
    return parse_csv_rows(text)


def parse_csv_rows(text: str) -> list[RawRow]:
    """Parse CSV text by splitting lines on commas.

    Args:
        text: Decoded CSV text.

    Returns:
        Rows keyed by header cell.

    Raises:
        VocabFormatError: If there is no data row after the header.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    _require_data_rows(len(lines))
    headers = [_unquote(cell) for cell in lines[0].split(CSV_DELIMITER)]
    return [
        _zip_row(headers, [_unquote(cell) for cell in line.split(CSV_DELIMITER)])
        for line in lines[1:]
    ]


def parse_quoted_csv_rows(text: str) -> list[RawRow]:
    """Parse CSV text with quote-aware tokenizing.

    Args:
        text: Decoded CSV text.

    Returns:
        Rows keyed by header cell.

    Raises:
        VocabFormatError: If the CSV is malformed or has no data row.
    """
    reader = csv.reader(io.StringIO(text), delimiter=CSV_DELIMITER, quotechar=CSV_QUOTE)
    try:
        records = [
            [cell.strip() for cell in record]
            for record in reader
            if not _is_blank_line(record)
        ]
    except csv.Error as error:
        raise VocabFormatError(
            f"Invalid CSV at line {reader.line_num}: {error}. "
            "Fix the quoting and retry the import."
        ) from error
    _require_data_rows(len(records))
    headers = [_unquote(cell) for cell in records[0]]
    return [_zip_row(headers, record) for record in records[1:]]


def parse_json_rows(text: str) -> list[RawRow]:
    """Parse a JSON array of vocabulary objects.

    Args:
        text: Decoded JSON text.

    Returns:
        Array elements as raw rows.

    Raises:
        VocabFormatError: If the payload is not an array of objects.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise VocabFormatError(
            f"Invalid JSON at line {error.lineno} column {error.colno}: {error.msg}. "
            "Fix the JSON syntax and retry the import."
        ) from error
    except ValueError as error:
        raise VocabFormatError(
            f"Invalid JSON: {error}. Shorten the offending number and retry the import."
        ) from error
    if not isinstance(payload, list):
        raise VocabFormatError(
            "Invalid JSON: JSON file must contain an array of vocabulary objects, "
            f"got {_json_type_name(payload)}."
        )
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise VocabFormatError(
                "Invalid JSON: expected an array of vocabulary objects, "
                f"but element {index} is {_json_type_name(item)}."
            )
    return list(payload)


def _require_data_rows(line_count: int) -> None:
    if line_count < 2:
        raise VocabFormatError(
            "Invalid CSV: CSV file must have at least a header row and one data row."
        )


def _is_blank_line(record: list[str]) -> bool:
    """Match naive mode, which skips only lines that are empty or whitespace."""
    return not record or (len(record) == 1 and not record[0].strip())


def _unquote(cell: str) -> str:
    """Trim a cell and strip surrounding quote characters."""
    return cell.strip().strip(CSV_QUOTE)


def _zip_row(headers: list[str], values: list[str]) -> dict[str, object]:
    """Pair header names with positional values; missing values become blank."""
    row: dict[str, object] = {}
    for index, header in enumerate(headers):
        row[header] = values[index] if index < len(values) else ""
    return row


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, dict):
        return "an object"
    if isinstance(value, list):
        return "an array"
    if isinstance(value, str):
        return "a string"
    return "a number"
