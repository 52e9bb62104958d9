"""Local word store.

This module persists vocabulary entries per owner as JSONL files.
It mirrors the hosted store contract: bulk insert with store-assigned
ids and timestamps, all-or-nothing per batch, and newest-first listing.
"""

from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Iterable

from core.config import VocabConfig
from core.constants import OWNERS_DIR_NAME, WORDS_FILE_NAME
from core.errors import VocabStoreError
from core.logging_config import get_logger
from core.timestamps import format_timestamp, utc_now
from core.types import StoredWord, VocabularyEntry
from store.word_payload import read_words_jsonl, write_words_jsonl

_LOGGER = get_logger(__name__)
_OWNER_ID_PATTERN = re.compile(r"[A-Za-z0-9_@-][A-Za-z0-9._@-]*")


class WordStore:
    """Owner-scoped vocabulary store.

    Each owner has one ``words.jsonl`` file under the data root. A batch
    insert rewrites the file through a temporary sibling, so a failed
    batch leaves the previous contents untouched.
    """

    def __init__(self, config: VocabConfig) -> None:
        """Initialize the store from config.

        Args:
            config: Runtime configuration.
        """
        self._owners_root = config.data_root / OWNERS_DIR_NAME

    def insert_entries(
        self,
        owner_id: str,
        entries: Iterable[VocabularyEntry],
    ) -> list[StoredWord]:
        """Insert a batch of entries for an owner.

        Args:
            owner_id: Owner receiving the words.
            entries: Validated entries to persist.

        Returns:
            Stored words in insertion order.

        Raises:
            VocabStoreError: If the owner id is invalid or the write fails.
        """
        words_path = self._words_path(owner_id)
        existing_words = self._read_words(words_path)
        updated_at = format_timestamp(utc_now())
        new_words = [
            StoredWord(
                word_id=uuid.uuid4().hex,
                owner_id=owner_id,
                entry=entry,
                updated_at=updated_at,
            )
            for entry in entries
        ]
        try:
            words_path.parent.mkdir(parents=True, exist_ok=True)
            write_words_jsonl(words_path, existing_words + new_words)
        except (OSError, ValueError) as error:
            raise VocabStoreError(
                f"Failed to insert {len(new_words)} words for owner '{owner_id}' "
                f"at {words_path}: {error}. No words from this batch were saved."
            ) from error
        _LOGGER.info(
            "words_inserted",
            owner_id=owner_id,
            inserted_count=len(new_words),
            total_count=len(existing_words) + len(new_words),
        )
        return new_words

    def list_words(self, owner_id: str) -> list[StoredWord]:
        """List an owner's words, newest first.

        Args:
            owner_id: Owner identifier.

        Returns:
            Words ordered by ``created_at`` descending; empty for unknown owners.

        Raises:
            VocabStoreError: If the owner id is invalid or the file is corrupt.
        """
        words = self._read_words(self._words_path(owner_id))
        return sorted(words, key=lambda word: word.entry.created_at, reverse=True)

    def delete_word(self, owner_id: str, word_id: str) -> bool:
        """Delete one word by id.

        Args:
            owner_id: Owner identifier.
            word_id: Store-assigned word id.

        Returns:
            ``True`` when a word was removed.

        Raises:
            VocabStoreError: If the owner id is invalid or the write fails.
        """
        words_path = self._words_path(owner_id)
        words = self._read_words(words_path)
        remaining = [word for word in words if word.word_id != word_id]
        if len(remaining) == len(words):
            return False
        try:
            write_words_jsonl(words_path, remaining)
        except OSError as error:
            raise VocabStoreError(
                f"Failed to delete word '{word_id}' for owner '{owner_id}': {error}."
            ) from error
        _LOGGER.info("word_deleted", owner_id=owner_id, word_id=word_id)
        return True

    def _words_path(self, owner_id: str) -> Path:
        """Return the words file for an owner.

        Raises:
            VocabStoreError: If the owner id is not a safe path segment.
        """
        if not _OWNER_ID_PATTERN.fullmatch(owner_id):
            raise VocabStoreError(
                f"Invalid owner id '{owner_id}'. Use letters, digits, '.', '_', '-' or '@', "
                "not starting with '.'."
            )
        return self._owners_root / owner_id / WORDS_FILE_NAME

    def _read_words(self, words_path: Path) -> list[StoredWord]:
        if not words_path.exists():
            return []
        try:
            return read_words_jsonl(words_path)
        except ValueError as error:
            raise VocabStoreError(
                f"Failed to read word store at {words_path}: {error}. "
                "Repair or remove the corrupt file."
            ) from error
