"""Unit tests for the local word store."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import VocabConfig
from core.errors import VocabStoreError
from core.types import VocabularyEntry
from store.word_store import WordStore


def _entry(word: str, created_at: str) -> VocabularyEntry:
    return VocabularyEntry(
        english_word=word,
        meaning="معنی",
        created_at=created_at,
        example_sentences=("One", "Two"),
        total_attempts=3,
        correct_answers=1,
    )


def test_insert_entries_assigns_ids_and_timestamps(vocab_config: VocabConfig) -> None:
    """Inserted words receive unique ids and a modification timestamp."""
    store = WordStore(vocab_config)

    words = store.insert_entries("sara", [_entry("a", "2024-01-01T00:00:00.000Z")] * 2)

    assert len({word.word_id for word in words}) == 2
    assert all(word.updated_at.endswith("Z") for word in words)


def test_list_words_orders_newest_first(vocab_config: VocabConfig) -> None:
    """Listing sorts by creation date, newest first."""
    store = WordStore(vocab_config)
    store.insert_entries("sara", [_entry("old", "2024-01-01T00:00:00.000Z")])
    store.insert_entries("sara", [_entry("new", "2024-05-01T00:00:00.000Z")])

    words = store.list_words("sara")

    assert [word.entry.english_word for word in words] == ["new", "old"]


def test_list_words_roundtrips_entry_fields(vocab_config: VocabConfig) -> None:
    """Persisted entries load back unchanged."""
    store = WordStore(vocab_config)
    entry = _entry("cat", "2024-01-01T00:00:00.000Z")
    store.insert_entries("sara", [entry])

    assert store.list_words("sara")[0].entry == entry


def test_list_words_is_scoped_per_owner(vocab_config: VocabConfig) -> None:
    """Owners never see each other's words."""
    store = WordStore(vocab_config)
    store.insert_entries("sara", [_entry("cat", "2024-01-01T00:00:00.000Z")])

    assert store.list_words("omid") == []


def test_delete_word_removes_only_the_target(vocab_config: VocabConfig) -> None:
    """Deleting by id leaves other words in place."""
    store = WordStore(vocab_config)
    first, second = store.insert_entries(
        "sara",
        [_entry("a", "2024-01-01T00:00:00.000Z"), _entry("b", "2024-01-02T00:00:00.000Z")],
    )

    removed = store.delete_word("sara", first.word_id)

    assert removed is True
    assert [word.word_id for word in store.list_words("sara")] == [second.word_id]


def test_delete_word_reports_unknown_id(vocab_config: VocabConfig) -> None:
    """Unknown ids are not an error."""
    assert WordStore(vocab_config).delete_word("sara", "missing") is False


@pytest.mark.parametrize("owner_id", ["", "..", "../escape", "a/b"])
def test_store_rejects_unsafe_owner_ids(vocab_config: VocabConfig, owner_id: str) -> None:
    """Owner ids must be a single safe path segment."""
    with pytest.raises(VocabStoreError, match="Invalid owner id"):
        WordStore(vocab_config).list_words(owner_id)


def test_list_words_raises_for_corrupt_file(vocab_config: VocabConfig) -> None:
    """A corrupt words file surfaces as a store error."""
    words_path = vocab_config.data_root / "owners" / "sara" / "words.jsonl"
    words_path.parent.mkdir(parents=True)
    words_path.write_text("{not json\n", encoding="utf-8")

    with pytest.raises(VocabStoreError, match="line 1"):
        WordStore(vocab_config).list_words("sara")


def test_failed_batch_keeps_previous_words(
    vocab_config: VocabConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A batch that cannot be written saves nothing and leaves old words intact."""
    store = WordStore(vocab_config)
    store.insert_entries("sara", [_entry("kept", "2024-01-01T00:00:00.000Z")])
    words_path = vocab_config.data_root / "owners" / "sara" / "words.jsonl"
    before = words_path.read_text(encoding="utf-8")

    def _fail_replace(self: Path, target: Path) -> Path:
        raise OSError("disk full")

    monkeypatch.setattr(Path, "replace", _fail_replace)

    with pytest.raises(VocabStoreError, match="No words from this batch were saved"):
        store.insert_entries("sara", [_entry("lost", "2024-02-01T00:00:00.000Z")])

    assert words_path.read_text(encoding="utf-8") == before
    assert [word.entry.english_word for word in store.list_words("sara")] == ["kept"]
