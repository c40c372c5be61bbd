from __future__ import annotations

from pathlib import Path

import pytest

from main import main, run_shell
from recommender.sample_data import build_sample_store


def test_single_query(capsys) -> None:
    assert main(["--user", "Eve", "--count", "2"]) == 0
    out = capsys.readouterr().out

    assert "--- Similar Users for Eve ---" in out
    assert "- Charlie (Similarity: 0.5000)" in out
    assert "- Alice (Similarity: 0.3090)" in out
    assert "1. Item D" in out
    assert "2. Item C" in out
    assert "3." not in out


def test_single_query_unknown_user(capsys) -> None:
    assert main(["--user", "Frank"]) == 1
    assert "User 'Frank' not found" in capsys.readouterr().out


def test_single_query_from_csv(tmp_path: Path, capsys) -> None:
    path = tmp_path / "ratings.csv"
    path.write_text("user,item,rating\nann,x,4\nann,y,2\nbob,x,4\nbob,z,5\n")

    assert main(["--user", "ann", "--ratings-file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "- bob (Similarity: 1.0000)" in out
    assert "1. z" in out


def test_bad_csv_exits_nonzero(tmp_path: Path, capsys) -> None:
    path = tmp_path / "ratings.csv"
    path.write_text("user,item,rating\nann,x\n")

    assert main(["--user", "ann", "--ratings-file", str(path)]) == 1
    assert "Could not load ratings" in capsys.readouterr().out


def test_interactive_shell(capsys) -> None:
    answers = iter(["Frank", "Eve", "abc", "Eve", "1", "David", "0", "EXIT"])
    run_shell(build_sample_store(), input_func=lambda prompt: next(answers))
    out = capsys.readouterr().out

    assert out.startswith("Welcome to the Simple Recommendation System!")
    assert "Available users: Alice, Bob, Charlie, David, Eve" in out
    assert "User 'Frank' not found in the system. Please try again." in out
    assert "Invalid number. Please enter an integer." in out
    assert "--- Top 1 Recommendations for Eve ---" in out
    assert "1. Item D" in out
    assert "No recommendations could be generated for David." in out
    assert out.rstrip().endswith("Exiting Recommendation System. Goodbye!")


def test_interactive_shell_stops_on_eof(capsys) -> None:
    def no_input(prompt: str) -> str:
        raise EOFError

    run_shell(build_sample_store(), input_func=no_input)
    assert "Goodbye!" in capsys.readouterr().out


def test_log_level_is_validated(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--user", "Eve", "--log-level", "loud"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_log_level_is_case_insensitive(capsys) -> None:
    assert main(["--user", "Eve", "--log-level", "debug"]) == 0
