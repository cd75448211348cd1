from __future__ import annotations

from dataclasses import dataclass

from relcut.vcs.errors import BackendError, NoBackendDetectedError
from relcut.version.errors import DescriptorError


@dataclass(frozen=True, slots=True)
class InvalidReleaseError:
    version: str

    @property
    def message(self) -> str:
        return f"The next version can't be equal to the current version {self.version}."

    @property
    def hint(self) -> str:
        return (
            "Update THIS_VERSION/VERSION_NUMBER, pass --next-version "
            "or set the NEXT_VERSION env var"
        )


@dataclass(frozen=True, slots=True)
class DirtyRepositoryError:
    files: tuple[str, ...]

    @property
    def message(self) -> str:
        listing = "\n".join(self.files)
        return f"Uncommitted files violate the First Principle Of Release!\n{listing}"


@dataclass(frozen=True, slots=True)
class BuildFailureError:
    command: tuple[str, ...]
    returncode: int

    @property
    def message(self) -> str:
        return f"release build failed (exit {self.returncode}): {' '.join(self.command)}"


ReleaseError = (
    DescriptorError
    | BackendError
    | NoBackendDetectedError
    | InvalidReleaseError
    | DirtyRepositoryError
    | BuildFailureError
)
