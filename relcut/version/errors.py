from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DescriptorIOError:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"cannot access build descriptor {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class VersionNotFoundError:
    path: Path

    @property
    def message(self) -> str:
        return f'Looking for THIS_VERSION = "1.0.0-rc1" in {self.path}, none found'


DescriptorError = DescriptorIOError | VersionNotFoundError
