"""Tests for relcut.vcs.perforce module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relcut.core.result import Err, Ok, Result
from relcut.platform.process import ProcessError
from relcut.vcs.errors import BackendCommandError, PerforceConfigError
from relcut.vcs.perforce import PerforceBackend, parse_change_files

P4_ENV = {
    "P4PORT": "ssl:perforce:1666",
    "P4USER": "builder",
    "P4PASSWD": "s3cret",
    "P4CLIENT": "builder-ws",
}
P4_PREFIX = [
    "p4",
    "-p",
    "ssl:perforce:1666",
    "-u",
    "builder",
    "-P",
    "s3cret",
    "-c",
    "builder-ws",
]

CHANGE_SPEC = """\
# A Perforce Change Specification.
Change:\tnew

Client:\tbuilder-ws

Description:
\t<enter description here>

Files:
\t//depot/project/Makefile\t# edit
\t//depot/project/src/main.c\t# edit
"""


class FakeRunner:
    def __init__(self, result: Result[str, ProcessError] | None = None) -> None:
        self.result: Result[str, ProcessError] = result if result is not None else Ok("")
        self.calls: list[list[str]] = []

    def __call__(self, cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        self.calls.append(cmd)
        return self.result


def _backend(tmp_path: Path, runner: FakeRunner, env: dict[str, str] | None = None) -> PerforceBackend:
    return PerforceBackend(cwd=tmp_path, env=P4_ENV if env is None else env, runner=runner)


class TestAppliesTo:
    def test_requires_p4port(self, tmp_path: Path) -> None:
        assert PerforceBackend.applies_to(tmp_path, {"P4PORT": "perforce:1666"}) is True
        assert PerforceBackend.applies_to(tmp_path, {}) is False

    def test_git_checkout_wins(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        assert PerforceBackend.applies_to(tmp_path, {"P4PORT": "perforce:1666"}) is False


class TestConnection:
    @pytest.mark.parametrize("missing", ["P4PORT", "P4USER", "P4PASSWD", "P4CLIENT"])
    def test_every_variable_is_required(self, tmp_path: Path, missing: str) -> None:
        runner = FakeRunner()
        env = {k: v for k, v in P4_ENV.items() if k != missing}

        result = _backend(tmp_path, runner, env).uncommitted_files()

        assert result == Err(PerforceConfigError(variable=missing))
        assert runner.calls == []

    def test_password_masked_in_error(self, tmp_path: Path) -> None:
        runner = FakeRunner(Err(ProcessError(command=("p4",), returncode=1, output="denied")))

        result = _backend(tmp_path, runner).commit(Path("Makefile"), "msg")

        assert isinstance(result, Err)
        assert isinstance(result.error, BackendCommandError)
        assert "s3cret" not in result.error.command
        assert "-P ********" in result.error.command
        assert result.error.output == "denied"


class TestCommands:
    def test_parse_change_files(self) -> None:
        assert parse_change_files(CHANGE_SPEC) == [
            "//depot/project/Makefile\t# edit",
            "//depot/project/src/main.c\t# edit",
        ]

    def test_parse_change_without_files(self) -> None:
        assert parse_change_files("Change:\tnew\n\nDescription:\n\tx\n") == []

    def test_uncommitted_files(self, tmp_path: Path) -> None:
        runner = FakeRunner(Ok(CHANGE_SPEC))

        result = _backend(tmp_path, runner).uncommitted_files()

        assert isinstance(result, Ok)
        assert len(result.value) == 2
        assert runner.calls == [[*P4_PREFIX, "change", "-o"]]

    def test_stage_for_edit(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        assert _backend(tmp_path, runner).stage_for_edit(Path("Makefile")) == Ok(None)
        assert runner.calls == [[*P4_PREFIX, "edit", "Makefile"]]

    def test_commit_submits_file(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        assert _backend(tmp_path, runner).commit(Path("Makefile"), "Release 1.0") == Ok(None)
        assert runner.calls == [[*P4_PREFIX, "submit", "-d", "Release 1.0", "Makefile"]]

    def test_tag_labels_client(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        assert _backend(tmp_path, runner).tag("1.0.0") == Ok(None)
        assert runner.calls == [[*P4_PREFIX, "tag", "-l", "1.0.0", "//builder-ws/..."]]

    def test_push_is_noop(self, tmp_path: Path) -> None:
        runner = FakeRunner()
        assert _backend(tmp_path, runner).push() == Ok(None)
        assert runner.calls == []
