"""Running the project build against a release-candidate descriptor."""

from __future__ import annotations

import shlex
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from relcut.core.result import Err, Ok, Result
from relcut.platform.process import ProcessError, run_live

from .errors import BuildFailureError

__all__ = [
    "DEFAULT_BUILD_ARGS",
    "BuildRunner",
    "CommandBuildRunner",
    "build_args",
]

DEFAULT_BUILD_ARGS = ("clean", "build", "DEBUG=no")
DESCRIPTOR_PLACEHOLDER = "{descriptor}"


class BuildRunner(Protocol):
    def run(self, descriptor: Path, args: Sequence[str]) -> Result[None, BuildFailureError]:
        """Build the project using descriptor; Ok only if the build succeeded."""
        ...


def build_args(options: str | None) -> list[str]:
    """Split a free-form options string; empty or None means the default targets."""
    if options is None or not options.strip():
        return list(DEFAULT_BUILD_ARGS)
    return shlex.split(options)


class CommandBuildRunner:
    """Runs the configured build command with output streamed to the terminal.

    ``{descriptor}`` in the command is replaced by the candidate path; when
    the command has no placeholder the path is appended instead.
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        cwd: Path,
        runner: Callable[[list[str], Path], Result[None, ProcessError]] = run_live,
    ) -> None:
        self._command = tuple(command)
        self._cwd = cwd
        self._runner = runner

    def command_for(self, descriptor: Path, args: Sequence[str]) -> list[str]:
        if any(DESCRIPTOR_PLACEHOLDER in part for part in self._command):
            cmd = [part.replace(DESCRIPTOR_PLACEHOLDER, str(descriptor)) for part in self._command]
        else:
            cmd = [*self._command, str(descriptor)]
        return [*cmd, *args]

    def run(self, descriptor: Path, args: Sequence[str]) -> Result[None, BuildFailureError]:
        cmd = self.command_for(descriptor, args)
        result = self._runner(cmd, self._cwd)
        if isinstance(result, Err):
            return Err(BuildFailureError(command=tuple(cmd), returncode=result.error.returncode))
        return Ok(None)
