from unittest.mock import patch

import pytest

import run_checker
from src.spellchecker.text_processor import RED_COLOR


@pytest.fixture
def checker_files(tmp_path, vocabulary_file):
    """A config pointing at the test vocabulary plus an input text."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        f"dictionary_path = {vocabulary_file}\nuse_color = yes\n",
        encoding="utf-8",
    )
    input_path = tmp_path / "input.txt"
    input_path.write_text("Helo world\n", encoding="utf-8")
    return config_path, input_path


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("run_checker.setup_logging") as mock_setup:
        yield mock_setup


def test_main_highlights_without_fixing(checker_files, capsys):
    config_path, input_path = checker_files

    exit_code = run_checker.main(
        [
            "--config_path",
            str(config_path),
            "--input",
            str(input_path),
            "--no-interactive",
        ],
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert f"{RED_COLOR}Helo" in out
    assert input_path.read_text(encoding="utf-8") == "Helo world\n"


def test_main_no_color(checker_files, capsys):
    config_path, input_path = checker_files

    run_checker.main(
        [
            "--config_path",
            str(config_path),
            "--input",
            str(input_path),
            "--no-interactive",
            "--no-color",
        ],
    )

    assert RED_COLOR not in capsys.readouterr().out


def test_main_interactive_fix(checker_files, tmp_path):
    config_path, input_path = checker_files
    output_path = tmp_path / "fixed.txt"

    with patch("builtins.input", side_effect=["0"]):
        exit_code = run_checker.main(
            [
                "--config_path",
                str(config_path),
                "--input",
                str(input_path),
                "--output",
                str(output_path),
            ],
        )

    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == "hello world\n"


def test_main_stdin_closed_during_fix(checker_files, tmp_path, capsys):
    config_path, input_path = checker_files
    output_path = tmp_path / "fixed.txt"

    with patch("builtins.input", side_effect=EOFError):
        exit_code = run_checker.main(
            [
                "--config_path",
                str(config_path),
                "--input",
                str(input_path),
                "--output",
                str(output_path),
            ],
        )

    assert exit_code == 0
    assert "no changes saved" in capsys.readouterr().err
    assert not output_path.exists()
    assert input_path.read_text(encoding="utf-8") == "Helo world\n"


def test_main_missing_dictionary(tmp_path, capsys):
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        f"dictionary_path = {tmp_path / 'missing.txt'}\n",
        encoding="utf-8",
    )

    exit_code = run_checker.main(["--config_path", str(config_path)])

    assert exit_code == 1
    assert "Cannot open dictionary file" in capsys.readouterr().err


def test_main_missing_config(tmp_path, capsys):
    exit_code = run_checker.main(
        ["--config_path", str(tmp_path / "nope.txt")],
    )

    assert exit_code == 1
    assert "Missing required configuration file" in capsys.readouterr().err


def test_main_missing_input(checker_files, tmp_path, capsys):
    config_path, _ = checker_files

    exit_code = run_checker.main(
        [
            "--config_path",
            str(config_path),
            "--input",
            str(tmp_path / "absent.txt"),
        ],
    )

    assert exit_code == 1
    assert "File not found" in capsys.readouterr().err
