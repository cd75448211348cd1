"""Exit codes for the relcut CLI.

These values are process exit codes and should remain stable:
- 0: Release completed
- 1: User error (bad descriptor, bad config, version collision)
- 2: Environment error (no VCS detected, missing Perforce settings)
- 3: Build error (the release candidate build failed)
- 4: VCS error (dirty working tree, failed git/p4 command)
- 5: I/O error (descriptor missing, unreadable or unwritable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    VCS_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
