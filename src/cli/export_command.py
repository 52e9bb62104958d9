"""Export and template command wiring for the vocabport CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import SUPPORTED_FORMATS
from store.vocab_client import VocabClient


def add_export_command(subparsers: Any) -> None:
    """Register export subcommand."""
    parser = subparsers.add_parser("export", help="Export an owner's words as CSV or JSON")
    parser.add_argument("--owner", required=True, help="Owner whose words are exported")
    _add_output_arguments(parser)


def add_template_command(subparsers: Any) -> None:
    """Register template subcommand."""
    parser = subparsers.add_parser("template", help="Write a sample import template")
    _add_output_arguments(parser)


def run_export_command(client: VocabClient, args: argparse.Namespace) -> int:
    """Render an owner's words and write or print them."""
    content = client.export_words(args.owner, args.format)
    return _emit(client, content, args.output)


def run_template_command(client: VocabClient, args: argparse.Namespace) -> int:
    """Render the sample template and write or print it."""
    content = client.template(args.format)
    return _emit(client, content, args.output)


def _emit(client: VocabClient, content: str, output: str | None) -> int:
    if output:
        print(client.write_output(content, output))
    else:
        print(content)
    return 0


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=SUPPORTED_FORMATS, default="csv", help="Output format")
    parser.add_argument("--output", help="Output file path or s3://bucket/key; stdout when omitted")
