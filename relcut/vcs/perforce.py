"""Perforce release backend.

Every p4 invocation carries explicit connection settings taken from the
``P4PORT``, ``P4USER``, ``P4PASSWD`` and ``P4CLIENT`` environment variables.
All four are required.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from relcut.core.result import Err, Ok, Result
from relcut.platform.process import run as run_process

from .base import CommandRunner, to_backend_error
from .errors import BackendError, PerforceConfigError
from .git import find_git_root

__all__ = ["PerforceBackend", "REQUIRED_ENV_VARS", "parse_change_files"]

REQUIRED_ENV_VARS = ("P4PORT", "P4USER", "P4PASSWD", "P4CLIENT")

_MASK = "********"


def parse_change_files(output: str) -> list[str]:
    """Entries listed after the ``Files:`` field of `p4 change -o`."""
    files: list[str] | None = None
    for line in output.splitlines():
        if files is not None:
            entry = line.strip()
            if entry:
                files.append(entry)
        elif line.startswith("Files:"):
            files = []
    return files or []


class PerforceBackend:
    """Release operations against a Perforce client workspace."""

    name: ClassVar[str] = "perforce"

    def __init__(
        self,
        *,
        cwd: Path,
        env: Mapping[str, str] | None = None,
        runner: CommandRunner = run_process,
    ) -> None:
        self.cwd = cwd
        self._env: Mapping[str, str] = os.environ if env is None else env
        self._runner = runner

    @classmethod
    def applies_to(cls, cwd: Path, env: Mapping[str, str]) -> bool:
        return find_git_root(cwd) is None and bool(env.get("P4PORT"))

    def _connection(self) -> Result[dict[str, str], PerforceConfigError]:
        values: dict[str, str] = {}
        for var in REQUIRED_ENV_VARS:
            value = self._env.get(var)
            if not value:
                return Err(PerforceConfigError(variable=var))
            values[var] = value
        return Ok(values)

    def _p4(self, *args: str) -> Result[str, BackendError]:
        conn = self._connection()
        if isinstance(conn, Err):
            return conn
        c = conn.value

        prefix = ["p4", "-p", c["P4PORT"], "-u", c["P4USER"]]
        suffix = ["-c", c["P4CLIENT"], *args]
        cmd = [*prefix, "-P", c["P4PASSWD"], *suffix]
        display = " ".join([*prefix, "-P", _MASK, *suffix])
        return to_backend_error(self._runner(cmd, self.cwd), display=display)

    def uncommitted_files(self) -> Result[list[str], BackendError]:
        result = self._p4("change", "-o")
        if isinstance(result, Err):
            return result
        return Ok(parse_change_files(result.value))

    def stage_for_edit(self, path: Path) -> Result[None, BackendError]:
        """Open the file for edit; Perforce keeps files read-only otherwise."""
        result = self._p4("edit", str(path))
        if isinstance(result, Err):
            return result
        return Ok(None)

    def commit(self, path: Path, message: str) -> Result[None, BackendError]:
        result = self._p4("submit", "-d", message, str(path))
        if isinstance(result, Err):
            return result
        return Ok(None)

    def tag(self, name: str) -> Result[None, BackendError]:
        """Label every file of the client workspace, replacing an existing label."""
        conn = self._connection()
        if isinstance(conn, Err):
            return conn
        result = self._p4("tag", "-l", name, f"//{conn.value['P4CLIENT']}/...")
        if isinstance(result, Err):
            return result
        return Ok(None)

    def push(self) -> Result[None, BackendError]:
        # Submitted changes are already on the server
        return Ok(None)
