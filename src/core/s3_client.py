"""Boto3 client construction.

This module builds S3 clients from runtime configuration for the
import reader and the export writer.
"""

from __future__ import annotations

from typing import Any

from core.config import VocabConfig
from core.errors import VocabDependencyError


def create_s3_client(config: VocabConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        VocabDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise VocabDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install vocabport[s3] to import from or export to s3:// locations."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: VocabConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config.

    Args:
        config: Runtime config.

    Returns:
        Session keyword arguments.
    """
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
