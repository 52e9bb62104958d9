"""Core constants used across vocabport modules.

This module centralizes column names, messages, and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".vocabport")
OWNERS_DIR_NAME = "owners"
WORDS_FILE_NAME = "words.jsonl"
SUPPORTED_FORMATS = ("csv", "json")
SUPPORTED_CSV_MODES = ("naive", "quoted")
DEFAULT_CSV_MODE = "naive"
SUPPORTED_IMPORT_POLICIES = ("block-on-errors", "accept-valid")
DEFAULT_IMPORT_POLICY = "block-on-errors"
DEFAULT_OWNER_ID = "local"

ENGLISH_WORD_FIELD = "english_word"
MEANING_FIELD = "persian_meaning"
EXAMPLE_SENTENCES_FIELD = "example_sentences"
TOTAL_ATTEMPTS_FIELD = "total_attempts"
CORRECT_ANSWERS_FIELD = "correct_answers"
CREATED_AT_FIELD = "created_at"
EXPORT_COLUMNS = (
    ENGLISH_WORD_FIELD,
    MEANING_FIELD,
    EXAMPLE_SENTENCES_FIELD,
    TOTAL_ATTEMPTS_FIELD,
    CORRECT_ANSWERS_FIELD,
    CREATED_AT_FIELD,
)
ENGLISH_WORD_ALIASES = ("english_word", "english", "word")
MEANING_ALIASES = ("persian_meaning", "persian", "meaning")
SENTENCE_SEPARATOR = ";"
CSV_DELIMITER = ","
CSV_QUOTE = '"'

ENGLISH_WORD_REQUIRED_MESSAGE = "English word is required and cannot be empty"
MEANING_REQUIRED_MESSAGE = "Persian meaning is required and cannot be empty"
EXAMPLE_SENTENCES_MESSAGE = (
    "Example sentences must be a string (semicolon-separated) or array of strings"
)
TOTAL_ATTEMPTS_MESSAGE = "Total attempts must be a non-negative integer"
CORRECT_ANSWERS_MESSAGE = "Correct answers must be a non-negative integer"
CORRECT_EXCEEDS_TOTAL_MESSAGE = "Correct answers cannot be greater than total attempts"
CREATED_AT_MESSAGE = "Created date must be a valid ISO date format (e.g., 2024-01-15T10:30:00Z)"

TEMPLATE_FILE_STEM = "vocabulary_template"
EXPORT_FILE_STEM = "vocabulary_export"
