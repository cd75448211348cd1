"""Tests for relcut.output.errors module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relcut.core.config import ConfigError
from relcut.core.errors import ErrorCode
from relcut.output.console import MockConsole
from relcut.output.errors import print_release_error, release_error_exit_code
from relcut.release.errors import (
    BuildFailureError,
    DirtyRepositoryError,
    InvalidReleaseError,
    ReleaseError,
)
from relcut.vcs.errors import BackendCommandError, NoBackendDetectedError, PerforceConfigError
from relcut.version.errors import DescriptorIOError, VersionNotFoundError


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigError("bad"), ErrorCode.USER_ERROR),
        (VersionNotFoundError(path=Path("Makefile")), ErrorCode.USER_ERROR),
        (InvalidReleaseError(version="1-SNAPSHOT"), ErrorCode.USER_ERROR),
        (NoBackendDetectedError(), ErrorCode.ENV_ERROR),
        (PerforceConfigError(variable="P4USER"), ErrorCode.ENV_ERROR),
        (BuildFailureError(command=("make",), returncode=2), ErrorCode.BUILD_ERROR),
        (DirtyRepositoryError(files=("a",)), ErrorCode.VCS_ERROR),
        (BackendCommandError(command="git tag", exit_status=1, output=""), ErrorCode.VCS_ERROR),
        (DescriptorIOError(path=Path("Makefile"), reason="gone"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: ReleaseError | ConfigError, code: ErrorCode) -> None:
    assert release_error_exit_code(error) == int(code)


def test_dirty_lists_files() -> None:
    console = MockConsole()

    print_release_error(DirtyRepositoryError(files=("src/a.c", "b.txt")), console)

    assert console.has_error()
    assert "  src/a.c" in console.messages
    assert "  b.txt" in console.messages


def test_backend_command_shows_output() -> None:
    console = MockConsole()
    error = BackendCommandError(command="git push origin main", exit_status=1, output="rejected\n")

    print_release_error(error, console)

    assert 'error: command "git push origin main" failed with status 1' in console.messages
    assert "rejected" in console.messages


def test_hint_printed() -> None:
    console = MockConsole()

    print_release_error(InvalidReleaseError(version="1.0-SNAPSHOT"), console)

    assert any(m.startswith("hint:") and "NEXT_VERSION" in m for m in console.messages)


def test_perforce_message_names_variable() -> None:
    console = MockConsole()
    print_release_error(PerforceConfigError(variable="P4CLIENT"), console)
    assert "P4CLIENT" in console.text
