"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relcut.core.config import ConfigError
from relcut.core.errors import ErrorCode
from relcut.output.console import Style
from relcut.release.errors import (
    BuildFailureError,
    DirtyRepositoryError,
    InvalidReleaseError,
    ReleaseError,
)
from relcut.vcs.errors import BackendCommandError, NoBackendDetectedError, PerforceConfigError
from relcut.version.errors import DescriptorIOError, VersionNotFoundError

if TYPE_CHECKING:
    from relcut.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError | ConfigError, console: ConsoleProtocol) -> None:
    """Print a release error with its hint, if any."""
    match error:
        case ConfigError(message=message):
            console.error(message)
        case DirtyRepositoryError(files=files):
            console.error("Uncommitted files violate the First Principle Of Release!")
            for path in files:
                console.print(f"  {path}", Style.DIM)
        case BackendCommandError(command=command, exit_status=status, output=output):
            console.error(f'command "{command}" failed with status {status}')
            if output.strip():
                console.print(output.rstrip(), Style.DIM)
        case InvalidReleaseError() | NoBackendDetectedError():
            console.error(error.message)
            console.print(f"hint: {error.hint}", Style.DIM)
        case _:
            console.error(error.message)


def release_error_exit_code(error: ReleaseError | ConfigError) -> int:
    """Get exit code for a release error."""
    match error:
        case ConfigError() | VersionNotFoundError() | InvalidReleaseError():
            return int(ErrorCode.USER_ERROR)
        case NoBackendDetectedError() | PerforceConfigError():
            return int(ErrorCode.ENV_ERROR)
        case BuildFailureError():
            return int(ErrorCode.BUILD_ERROR)
        case DirtyRepositoryError() | BackendCommandError():
            return int(ErrorCode.VCS_ERROR)
        case DescriptorIOError():
            return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.USER_ERROR)
