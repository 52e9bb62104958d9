"""Word list export.

This module renders an owner's stored words and writes rendered files
to a local path or an S3 object.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import VocabConfig
from core.errors import VocabExportError
from core.logging_config import get_logger
from core.s3_client import create_s3_client
from core.s3_uri import is_s3_uri, parse_s3_uri
from export.entry_writer import render_entries
from store.word_store import WordStore

_LOGGER = get_logger(__name__)


def export_words(store: WordStore, owner_id: str, output_format: str) -> str:
    """Render all words of an owner, newest first.

    Args:
        store: Word store to read from.
        owner_id: Owner identifier.
        output_format: ``csv`` or ``json``.

    Returns:
        Rendered file contents.

    Raises:
        VocabExportError: If the owner has no words or the format is unsupported.
    """
    words = store.list_words(owner_id)
    if not words:
        raise VocabExportError(
            f"No words to export for owner '{owner_id}'. "
            "Add some words to the vocabulary first."
        )
    content = render_entries((word.entry for word in words), output_format)
    _LOGGER.info(
        "words_exported",
        owner_id=owner_id,
        output_format=output_format,
        word_count=len(words),
    )
    return content


def write_output(content: str, output_uri: str, config: VocabConfig) -> str:
    """Write rendered content to a local file or S3 object.

    Args:
        content: Rendered file contents.
        output_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Written location.

    Raises:
        VocabExportError: If the write fails.
    """
    if is_s3_uri(output_uri):
        _upload_content(create_s3_client(config), content, output_uri)
        return output_uri
    output_path = Path(output_uri).expanduser().resolve()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as error:
        raise VocabExportError(
            f"Failed to write export file {output_path}: {error}. "
            "Choose a writable output path."
        ) from error
    return str(output_path)


def _upload_content(s3_client: Any, content: str, output_uri: str) -> None:
    location = parse_s3_uri(output_uri, VocabExportError)
    try:
        s3_client.put_object(
            Bucket=location.bucket,
            Key=location.key,
            Body=content.encode("utf-8"),
        )
    except Exception as error:
        raise VocabExportError(
            f"Failed to upload export to {output_uri}: {error}. "
            "Check AWS credentials and retry export."
        ) from error
