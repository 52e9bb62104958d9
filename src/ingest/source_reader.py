"""Import file readers.

This module loads import file bytes from local paths or S3 objects and
resolves the format the file is parsed as.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import VocabConfig
from core.constants import SUPPORTED_FORMATS
from core.errors import VocabFormatError, VocabIngestError
from core.s3_client import create_s3_client
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri
from core.types import SourcePayload, VocabFormat


def read_source(
    source_uri: str,
    config: VocabConfig,
    declared_format: VocabFormat | None = None,
) -> SourcePayload:
    """Load an import file from a local path or S3.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.
        declared_format: Explicit format; inferred from extension when omitted.

    Returns:
        File bytes with the resolved format.

    Raises:
        VocabFormatError: If the file type is not recognized.
        VocabIngestError: If the source cannot be read.
    """
    resolved_format = declared_format or infer_format(source_uri)
    if is_s3_uri(source_uri):
        data = _read_s3_object(source_uri, config)
    else:
        data = _read_local_file(Path(source_uri).expanduser())
    return SourcePayload(source_uri=source_uri, declared_format=resolved_format, data=data)


def infer_format(source_uri: str) -> VocabFormat:
    """Infer the import format from a file extension.

    Args:
        source_uri: Local path or S3 URI.

    Returns:
        ``csv`` or ``json``.

    Raises:
        VocabFormatError: If the extension is not supported.
    """
    suffix = Path(source_uri).suffix.lower()
    if suffix == ".csv":
        return "csv"
    if suffix == ".json":
        return "json"
    raise VocabFormatError(
        f"Unsupported file type for {source_uri}: expected a .csv or .json file. "
        f"Rename the file or pass an explicit format ({', '.join(SUPPORTED_FORMATS)})."
    )


def _read_local_file(source_path: Path) -> bytes:
    """Read bytes from a local file.

    Raises:
        VocabIngestError: If path is missing or not a file.
    """
    if not source_path.exists():
        raise VocabIngestError(
            f"Failed to read import file at {source_path}: path does not exist. "
            "Provide an existing CSV or JSON file."
        )
    if not source_path.is_file():
        raise VocabIngestError(
            f"Failed to read import file at {source_path}: not a regular file. "
            "Provide a single CSV or JSON file."
        )
    return source_path.read_bytes()


def _read_s3_object(source_uri: str, config: VocabConfig) -> bytes:
    """Download one S3 object.

    Args:
        source_uri: S3 object URI.
        config: Runtime configuration for region/profile.

    Returns:
        Object body bytes.

    Raises:
        VocabIngestError: If the download fails.
    """
    location = parse_s3_uri(source_uri, VocabIngestError)
    s3_client = create_s3_client(config)
    return _download_object(s3_client, location)


def _download_object(s3_client: Any, location: S3Location) -> bytes:
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
        return bytes(response["Body"].read())
    except Exception as error:
        raise VocabIngestError(
            f"Failed to download {location.uri}: {error}. "
            "Check the object key and AWS credentials, then retry the import."
        ) from error
