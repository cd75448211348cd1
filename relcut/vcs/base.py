"""Backend protocol shared by the Git and Perforce adapters."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol

from relcut.core.result import Err, Ok, Result
from relcut.platform.process import ProcessError

from .errors import BackendCommandError, BackendError

__all__ = ["Backend", "BackendVariant", "CommandRunner", "to_backend_error"]

type CommandRunner = Callable[[list[str], Path], Result[str, ProcessError]]


class Backend(Protocol):
    """Commands one VCS needs to support for a release.

    Every method issues external commands and returns Err on the first
    non-zero exit. Nothing is retried.
    """

    name: str

    def uncommitted_files(self) -> Result[list[str], BackendError]:
        """Paths with staged, unstaged or untracked changes."""
        ...

    def stage_for_edit(self, path: Path) -> Result[None, BackendError]:
        """Make path writable/tracked before the release rewrites it."""
        ...

    def commit(self, path: Path, message: str) -> Result[None, BackendError]: ...

    def tag(self, name: str) -> Result[None, BackendError]:
        """Create or overwrite tag `name` and publish it where applicable."""
        ...

    def push(self) -> Result[None, BackendError]: ...


class BackendVariant(Protocol):
    """A Backend class: detection plus construction."""

    name: str

    def applies_to(self, cwd: Path, env: Mapping[str, str]) -> bool: ...

    def __call__(self, *, cwd: Path, env: Mapping[str, str]) -> Backend: ...


def to_backend_error(
    result: Result[str, ProcessError],
    *,
    display: str | None = None,
) -> Result[str, BackendCommandError]:
    """Map a process result to the backend error type.

    Args:
        result: Outcome of the command.
        display: Command text to report instead of the raw argv.
    """
    match result:
        case Ok(output):
            return Ok(output)
        case Err(e):
            return Err(
                BackendCommandError(
                    command=display if display is not None else " ".join(e.command),
                    exit_status=e.returncode,
                    output=e.output,
                )
            )
