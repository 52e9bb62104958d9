"""Vocabport CLI entry points.

This module exposes commands for validating, importing, and exporting
vocabulary files. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.export_command import (
    add_export_command,
    add_template_command,
    run_export_command,
    run_template_command,
)
from cli.import_command import (
    add_import_command,
    add_validate_command,
    run_import_command,
    run_validate_command,
)
from core.config import VocabConfig
from core.errors import VocabError
from store.vocab_client import VocabClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="vocabport", description="Vocabulary import/export CLI")
    parser.add_argument("--data-root", help="Override VOCAB_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_validate_command(subparsers)
    add_import_command(subparsers)
    add_export_command(subparsers)
    add_template_command(subparsers)
    _add_words_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the vocabport CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.data_root)
        return _dispatch(parser, client, args)
    except VocabError as error:
        print(f"error={error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    client: VocabClient,
    args: argparse.Namespace,
) -> int:
    if args.command == "validate":
        return run_validate_command(client, args)
    if args.command == "import":
        return run_import_command(client, args)
    if args.command == "export":
        return run_export_command(client, args)
    if args.command == "template":
        return run_template_command(client, args)
    if args.command == "words":
        return _run_words_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None) -> VocabClient:
    """Build SDK client with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = VocabConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return VocabClient(config)


def _run_words_command(client: VocabClient, args: argparse.Namespace) -> int:
    """Handle words command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for word in client.list_words(args.owner):
        entry = word.entry
        print(
            f"{word.word_id}\t"
            f"{entry.english_word}\t"
            f"{entry.meaning}\t"
            f"{entry.correct_answers}/{entry.total_attempts}\t"
            f"{entry.created_at}"
        )
    return 0


def _add_words_command(subparsers: Any) -> None:
    """Register words subcommand."""
    parser = subparsers.add_parser("words", help="List an owner's words, newest first")
    parser.add_argument("--owner", required=True, help="Owner identifier")
