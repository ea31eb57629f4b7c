"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from apidoc_model.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["normalize", "--input", "/tmp/tags.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--kind" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["normalize", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_deserialization_error_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "tag.json"
    input_path.write_text('{"description": "nameless"}', encoding="utf-8")

    exit_code = main(["normalize", "--kind", "tag", "--input", str(input_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Missing required field: name" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_kind_is_reported(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "tag.json"
    input_path.write_text('{"name": "pet"}', encoding="utf-8")

    exit_code = main(["normalize", "--kind", "operation", "--input", str(input_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Unknown object kind 'operation'" in captured.err


def test_missing_input_file_is_reported(tmp_path: Path, capsys) -> None:
    exit_code = main(["normalize", "--kind", "tag", "--input", str(tmp_path / "absent.json")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "absent.json" in captured.err
