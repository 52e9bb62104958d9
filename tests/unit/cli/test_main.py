"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from tests.fixture_paths import import_fixture


@pytest.fixture(autouse=True)
def _default_policies(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VOCAB_IMPORT_POLICY", raising=False)
    monkeypatch.delenv("VOCAB_CSV_MODE", raising=False)


def _run(tmp_path, *args: str) -> int:
    return main(["--data-root", str(tmp_path), *args])


def test_cli_validate_reports_counts_and_errors(tmp_path, capsys) -> None:
    """Validate prints counts and one line per error, exiting non-zero."""
    exit_code = _run(tmp_path, "validate", str(import_fixture("mixed_rows.csv")))
    lines = capsys.readouterr().out.strip().split("\n")

    assert exit_code == 1
    assert lines[:3] == ["rows=5", "accepted=3", "errors=6"]
    assert lines[3] == "row 2: english_word: English word is required and cannot be empty (value='')"


def test_cli_validate_clean_file_exits_zero(tmp_path, capsys) -> None:
    """A file without errors validates successfully."""
    exit_code = _run(tmp_path, "validate", str(import_fixture("valid_words.json")))

    assert exit_code == 0
    assert "errors=0" in capsys.readouterr().out


def test_cli_import_blocked_prints_errors_to_stderr(tmp_path, capsys) -> None:
    """Blocked imports exit non-zero and store nothing."""
    exit_code = _run(
        tmp_path, "import", str(import_fixture("mixed_rows.csv")), "--owner", "sara"
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "import_blocked=" in captured.err
    assert "row 5: created_at:" in captured.err
    assert _run(tmp_path, "words", "--owner", "sara") == 0
    assert capsys.readouterr().out == ""


def test_cli_import_accept_valid_then_list_words(tmp_path, capsys) -> None:
    """Accept-valid imports the good rows and lists them."""
    exit_code = _run(
        tmp_path,
        "import",
        str(import_fixture("mixed_rows.csv")),
        "--owner",
        "sara",
        "--policy",
        "accept-valid",
    )
    import_output = capsys.readouterr().out.split("\n")
    _run(tmp_path, "words", "--owner", "sara")
    listed = capsys.readouterr().out.strip().split("\n")

    assert exit_code == 0
    assert import_output[:3] == ["imported=3", "accepted=3", "errors=6"]
    assert len(listed) == 3
    assert listed[-1].split("\t")[1:4] == ["book", "کتاب", "1/2"]


def test_cli_export_json_to_file(tmp_path, capsys) -> None:
    """Export writes the rendered file and prints its location."""
    _run(tmp_path, "import", str(import_fixture("valid_words.csv")), "--owner", "sara")
    capsys.readouterr()
    output_path = tmp_path / "out" / "words.json"

    exit_code = _run(
        tmp_path,
        "export",
        "--owner",
        "sara",
        "--format",
        "json",
        "--output",
        str(output_path),
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == str(output_path.resolve())
    exported = json.loads(output_path.read_text(encoding="utf-8"))
    assert [item["english_word"] for item in exported] == ["thank you", "goodbye", "hello"]


def test_cli_export_without_words_fails(tmp_path, capsys) -> None:
    """Exporting an empty vocabulary is an error."""
    exit_code = _run(tmp_path, "export", "--owner", "sara")

    assert exit_code == 1
    assert "No words to export" in capsys.readouterr().err


def test_cli_template_prints_csv_by_default(tmp_path, capsys) -> None:
    """Template without --output prints the CSV sample."""
    exit_code = _run(tmp_path, "template")
    lines = capsys.readouterr().out.strip().split("\n")

    assert exit_code == 0
    assert lines[0].startswith("english_word,persian_meaning")
    assert len(lines) == 4


def test_cli_format_error_exits_non_zero(tmp_path, capsys) -> None:
    """File-level failures are reported as errors."""
    exit_code = _run(tmp_path, "validate", str(import_fixture("notes.txt")))

    assert exit_code == 1
    assert "Unsupported file type" in capsys.readouterr().err
