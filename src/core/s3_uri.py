"""S3 object URIs for import sources and export targets."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import VocabError

_S3_SCHEME = "s3://"


@dataclass(frozen=True)
class S3Location:
    """Bucket and object key of a single vocabulary file."""

    bucket: str
    key: str

    @property
    def uri(self) -> str:
        return f"{_S3_SCHEME}{self.bucket}/{self.key}"


def is_s3_uri(uri: str) -> bool:
    """Return whether a source or output location points at S3."""
    return uri.startswith(_S3_SCHEME)


def parse_s3_uri(uri: str, error_type: type[VocabError]) -> S3Location:
    """Split an ``s3://bucket/key`` URI naming one object.

    Args:
        uri: Object URI.
        error_type: Error raised for malformed URIs, so readers and
            writers report failures in their own domain.

    Returns:
        Parsed bucket and key.

    Raises:
        VocabError: As ``error_type`` when the bucket or key is missing,
            or the key is a prefix ending in ``/``.
    """
    bucket, _, key = uri.removeprefix(_S3_SCHEME).partition("/")
    if not bucket or not key or key.endswith("/"):
        raise error_type(
            f"Invalid S3 URI '{uri}': expected s3://bucket/key naming a single file. "
            "Provide both bucket and object key."
        )
    return S3Location(bucket=bucket, key=key)
