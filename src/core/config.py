"""Runtime configuration model for vocabport.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_CSV_MODE,
    DEFAULT_DATA_ROOT,
    DEFAULT_IMPORT_POLICY,
    SUPPORTED_CSV_MODES,
    SUPPORTED_IMPORT_POLICIES,
)
from core.errors import VocabConfigError
from core.types import CsvMode, ImportPolicy


@dataclass(frozen=True)
class VocabConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for the word store.
        s3_region: Optional default AWS region for S3 reads and exports.
        s3_profile: Optional AWS profile for boto3 session initialization.
        import_policy: Whether validation errors block an import.
        csv_mode: CSV tokenizer used for imports.
    """

    data_root: Path
    s3_region: str | None
    s3_profile: str | None
    import_policy: ImportPolicy
    csv_mode: CsvMode

    @classmethod
    def from_env(cls) -> "VocabConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            VocabConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("VOCAB_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        s3_region = os.getenv("VOCAB_S3_REGION")
        s3_profile = os.getenv("VOCAB_S3_PROFILE")
        import_policy = parse_import_policy(
            os.getenv("VOCAB_IMPORT_POLICY", DEFAULT_IMPORT_POLICY)
        )
        csv_mode = parse_csv_mode(os.getenv("VOCAB_CSV_MODE", DEFAULT_CSV_MODE))
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            s3_region=s3_region,
            s3_profile=s3_profile,
            import_policy=import_policy,
            csv_mode=csv_mode,
        )


def parse_import_policy(raw_value: str) -> ImportPolicy:
    """Parse an import policy name.

    Args:
        raw_value: Raw policy string from environment or CLI.

    Returns:
        Normalized import policy.

    Raises:
        VocabConfigError: If the policy is unknown.
    """
    normalized = raw_value.strip().lower()
    if normalized == "block-on-errors":
        return "block-on-errors"
    if normalized == "accept-valid":
        return "accept-valid"
    raise VocabConfigError(
        f"Invalid VOCAB_IMPORT_POLICY value: got '{raw_value}'. "
        f"Use one of: {', '.join(SUPPORTED_IMPORT_POLICIES)}."
    )


def parse_csv_mode(raw_value: str) -> CsvMode:
    """Parse a CSV tokenizer mode name.

    Args:
        raw_value: Raw mode string from environment or CLI.

    Returns:
        Normalized CSV mode.

    Raises:
        VocabConfigError: If the mode is unknown.
    """
    normalized = raw_value.strip().lower()
    if normalized == "naive":
        return "naive"
    if normalized == "quoted":
        return "quoted"
    raise VocabConfigError(
        f"Invalid VOCAB_CSV_MODE value: got '{raw_value}'. "
        f"Use one of: {', '.join(SUPPORTED_CSV_MODES)}."
    )
