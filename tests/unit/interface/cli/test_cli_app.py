from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process and checks console messages and exit codes for
usage errors, root validation, and each output mode.
"""

from pathlib import Path

import pytest

from treeprinter.interface.cli.app import main


# Handlers bound to the captured streams of one test must not leak into the next
pytestmark = pytest.mark.usefixtures("reset_logging")


def test_no_arguments_prints_usage(capsys) -> None:
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Usage: treeprinter <folder-path> [flags]")


def test_help_flag_prints_usage(capsys) -> None:
    assert main(["--help"]) == 0
    assert "Examples:" in capsys.readouterr().out


def test_missing_path_message(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "nope"

    assert main([str(missing)]) == 0
    assert capsys.readouterr().out == f"The specified path does not exist: {missing}\n"


def test_regular_file_path_message_only(tmp_path: Path, capsys) -> None:
    target = tmp_path / "file.txt"
    target.write_text("data", encoding="utf-8")

    assert main([str(target), "-b"]) == 0
    assert capsys.readouterr().out == f"The specified path is not a directory: {target}\n"
    assert not (tmp_path / "file.txt_tree.txt").exists()


def test_invalid_flag_prints_message_and_usage(sample_tree: Path, capsys) -> None:
    assert main([str(sample_tree), "-z"]) == 0

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "Invalid flag: -z"
    assert lines[1].startswith("Usage: ")
    assert "proj" not in lines


def test_console_default(sample_tree: Path, capsys, expected_visible: str) -> None:
    assert main([str(sample_tree)]) == 0
    assert capsys.readouterr().out == expected_visible


def test_file_mode_writes_in_working_directory(
        sample_tree: Path, tmp_path: Path, monkeypatch, capsys, expected_with_hidden: str
) -> None:
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(sample_tree), "-f", "-h"]) == 0

    assert (workdir / "proj_tree.txt").read_text(encoding="utf-8") == expected_with_hidden
    assert capsys.readouterr().out == "Directory tree successfully written to: proj_tree.txt\n"


def test_both_mode_failure_exit_code(
        sample_tree: Path, tmp_path: Path, monkeypatch, capsys, expected_visible: str
) -> None:
    workdir = tmp_path / "work"
    workdir.mkdir()
    # A directory squatting on the output name makes open() fail
    (workdir / "proj_tree.txt").mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(sample_tree), "-b"]) == 1

    out = capsys.readouterr().out
    assert out.startswith(expected_visible)
    assert "Error writing to file: " in out


@pytest.mark.parametrize("bad_flag", ["-hx", "-cf", "--log-file"])
def test_malformed_flags_report_invalid_flag(
        sample_tree: Path, tmp_path: Path, monkeypatch, capsys, bad_flag: str
) -> None:
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(sample_tree), bad_flag]) == 0

    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0] == f"Invalid flag: {bad_flag}"
    assert lines[1].startswith("Usage: ")
    assert captured.err == ""
    assert list(workdir.iterdir()) == []
