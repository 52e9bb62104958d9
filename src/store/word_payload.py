"""Shared JSON serialization for stored words.

This module centralizes StoredWord payload conversion.
It is reused by the word store and the export writer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.constants import (
    CORRECT_ANSWERS_FIELD,
    CREATED_AT_FIELD,
    ENGLISH_WORD_FIELD,
    EXAMPLE_SENTENCES_FIELD,
    MEANING_FIELD,
    TOTAL_ATTEMPTS_FIELD,
)
from core.types import StoredWord, VocabularyEntry


def entry_to_payload(entry: VocabularyEntry) -> dict[str, object]:
    """Serialize a vocabulary entry using export column names.

    Args:
        entry: Vocabulary entry.

    Returns:
        JSON-safe dictionary in export column order.
    """
    return {
        ENGLISH_WORD_FIELD: entry.english_word,
        MEANING_FIELD: entry.meaning,
        EXAMPLE_SENTENCES_FIELD: list(entry.example_sentences),
        TOTAL_ATTEMPTS_FIELD: entry.total_attempts,
        CORRECT_ANSWERS_FIELD: entry.correct_answers,
        CREATED_AT_FIELD: entry.created_at,
    }


def stored_word_to_payload(word: StoredWord) -> dict[str, object]:
    """Serialize a stored word into a JSON-safe payload."""
    return {
        "id": word.word_id,
        "user_id": word.owner_id,
        **entry_to_payload(word.entry),
        "updated_at": word.updated_at,
    }


def stored_word_from_payload(payload: dict[str, Any]) -> StoredWord:
    """Deserialize a stored word payload.

    Args:
        payload: Serialized word payload.

    Returns:
        Parsed stored word.
    """
    sentences = payload.get(EXAMPLE_SENTENCES_FIELD) or []
    entry = VocabularyEntry(
        english_word=str(payload.get(ENGLISH_WORD_FIELD, "")),
        meaning=str(payload.get(MEANING_FIELD, "")),
        created_at=str(payload.get(CREATED_AT_FIELD, "")),
        example_sentences=tuple(str(sentence) for sentence in sentences),
        total_attempts=int(payload.get(TOTAL_ATTEMPTS_FIELD) or 0),
        correct_answers=int(payload.get(CORRECT_ANSWERS_FIELD) or 0),
    )
    return StoredWord(
        word_id=str(payload.get("id", "")),
        owner_id=str(payload.get("user_id", "")),
        entry=entry,
        updated_at=str(payload.get("updated_at", "")),
    )


def write_words_jsonl(words_path: Path, words: list[StoredWord]) -> None:
    """Write stored words to a JSONL file through a temporary sibling.

    Args:
        words_path: Output JSONL file path.
        words: Words to serialize.
    """
    lines = [
        json.dumps(stored_word_to_payload(word), ensure_ascii=False, sort_keys=True)
        for word in words
    ]
    temp_path = words_path.with_suffix(words_path.suffix + ".tmp")
    temp_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    temp_path.replace(words_path)


def read_words_jsonl(words_path: Path) -> list[StoredWord]:
    """Read stored words from a JSONL file.

    Args:
        words_path: Input JSONL file path.

    Returns:
        Parsed words in file order.

    Raises:
        ValueError: If JSONL rows are invalid.
    """
    parsed_words: list[StoredWord] = []
    for line_number, line in enumerate(words_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        payload = _parse_payload_line(line, line_number)
        parsed_words.append(stored_word_from_payload(payload))
    return parsed_words


def _parse_payload_line(line: str, line_number: int) -> dict[str, Any]:
    """Parse and validate one JSONL payload row.

    Args:
        line: Raw JSONL line.
        line_number: One-based line number.

    Returns:
        Parsed payload dictionary.

    Raises:
        ValueError: If JSON row is invalid.
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise ValueError(
            f"Invalid JSON at line {line_number}: {error.msg}"
        ) from error
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid payload at line {line_number}: expected JSON object")
    return payload
