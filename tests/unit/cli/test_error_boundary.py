"""Tests for the CLI error boundary decorator."""

import pytest

from git_file.cli.error_boundary import FATAL_EXIT_CODE, cli_error_boundary
from git_file.core.errors import (
    NotTrackedError,
    PullFailedError,
    ScopedDirectoryError,
)


def test_passes_through_return_value() -> None:
    @cli_error_boundary
    def command() -> str:
        return "ok"

    assert command() == "ok"


def test_git_file_error_exits_with_status_one(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def command() -> None:
        raise NotTrackedError("doc.md")

    with pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == 1
    assert "Error: File 'doc.md' is not tracked by git-file" in capsys.readouterr().err


def test_wrapped_error_message_names_entry(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def command() -> None:
        raise PullFailedError("b", NotTrackedError("b"))

    with pytest.raises(SystemExit):
        command()

    assert "Failed to pull 'b': File 'b' is not tracked by git-file" in capsys.readouterr().err


def test_value_error_exits_with_status_one(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def command() -> None:
        raise ValueError("Malformed config file")

    with pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == 1
    assert "Error: Malformed config file" in capsys.readouterr().err


def test_fatal_error_uses_distinct_status(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def command() -> None:
        raise ScopedDirectoryError("Failed to create temporary clone directory")

    with pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == FATAL_EXIT_CODE
    assert "Fatal: Failed to create temporary clone directory" in capsys.readouterr().err


def test_unexpected_errors_propagate() -> None:
    @cli_error_boundary
    def command() -> None:
        raise KeyError("bug")

    with pytest.raises(KeyError):
        command()
