"""Validate and import command wiring for the vocabport CLI."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, cast

from core.config import parse_csv_mode, parse_import_policy
from core.constants import SUPPORTED_CSV_MODES, SUPPORTED_FORMATS, SUPPORTED_IMPORT_POLICIES
from core.errors import VocabImportBlockedError
from core.types import ImportOptions, ValidationError, VocabFormat
from store.vocab_client import VocabClient


def add_validate_command(subparsers: Any) -> None:
    """Register validate subcommand."""
    parser = subparsers.add_parser(
        "validate",
        help="Check a CSV or JSON import file without storing anything",
    )
    _add_source_arguments(parser)


def add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser("import", help="Import a CSV or JSON vocabulary file")
    _add_source_arguments(parser)
    parser.add_argument("--owner", required=True, help="Owner receiving the words")
    parser.add_argument(
        "--policy",
        choices=SUPPORTED_IMPORT_POLICIES,
        help="Whether validation errors block the import (default from VOCAB_IMPORT_POLICY)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and apply the policy without writing words",
    )


def run_validate_command(client: VocabClient, args: argparse.Namespace) -> int:
    """Print accepted/error counts and every validation error.

    Returns:
        ``0`` when the file has no validation errors, else ``1``.
    """
    result = client.ingest_file(
        args.source,
        declared_format=_format_arg(args.format),
        csv_mode=parse_csv_mode(args.csv_mode) if args.csv_mode else None,
    )
    print(f"rows={result.row_count}")
    print(f"accepted={len(result.accepted)}")
    print(f"errors={len(result.errors)}")
    for line in render_error_lines(result.errors):
        print(line)
    return 1 if result.has_errors else 0


def run_import_command(client: VocabClient, args: argparse.Namespace) -> int:
    """Import a file and print the number of stored words."""
    options = ImportOptions(
        source_uri=args.source,
        owner_id=args.owner,
        declared_format=_format_arg(args.format),
        policy=parse_import_policy(args.policy) if args.policy else None,
        csv_mode=parse_csv_mode(args.csv_mode) if args.csv_mode else None,
        dry_run=args.dry_run,
    )
    try:
        summary = client.import_file(options)
    except VocabImportBlockedError as error:
        print(f"import_blocked={error}", file=sys.stderr)
        for line in render_error_lines(error.result.errors):
            print(line, file=sys.stderr)
        return 1
    print(f"imported={summary.imported_count}")
    print(f"accepted={summary.accepted_count}")
    print(f"errors={summary.error_count}")
    for line in render_error_lines(summary.errors):
        print(line)
    return 0


def render_error_lines(errors: Iterable[ValidationError]) -> list[str]:
    """Render validation errors as ``row N: field: message (value=...)`` lines."""
    return [
        f"row {error.row_number}: {error.field}: {error.message} (value={error.value!r})"
        for error in errors
    ]


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", help="CSV or JSON file path, or s3://bucket/key")
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        help="File format; inferred from the extension when omitted",
    )
    parser.add_argument(
        "--csv-mode",
        choices=SUPPORTED_CSV_MODES,
        help="CSV tokenizer (default from VOCAB_CSV_MODE)",
    )


def _format_arg(value: str | None) -> VocabFormat | None:
    return cast(VocabFormat, value) if value else None
