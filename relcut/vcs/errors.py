from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BackendCommandError:
    """A VCS command exited non-zero (or could not be started)."""

    command: str
    exit_status: int
    output: str

    @property
    def message(self) -> str:
        text = f'command "{self.command}" failed with status {self.exit_status}'
        output = self.output.strip()
        return f"{text}\n{output}" if output else text


@dataclass(frozen=True, slots=True)
class PerforceConfigError:
    variable: str

    @property
    def message(self) -> str:
        return f"perforce release missing required {self.variable} environment"


@dataclass(frozen=True, slots=True)
class NoBackendDetectedError:
    @property
    def message(self) -> str:
        return "Unable to detect the Version Control System."

    @property
    def hint(self) -> str:
        return "Run from inside a git checkout, or set P4PORT for Perforce"


BackendError = BackendCommandError | PerforceConfigError
