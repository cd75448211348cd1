"""Release orchestration."""

from .build import DEFAULT_BUILD_ARGS, BuildRunner, CommandBuildRunner, build_args
from .engine import ReleaseEngine, ReleaseOutcome, ReleaseState
from .errors import BuildFailureError, DirtyRepositoryError, InvalidReleaseError, ReleaseError

__all__ = [
    "DEFAULT_BUILD_ARGS",
    "BuildFailureError",
    "BuildRunner",
    "CommandBuildRunner",
    "DirtyRepositoryError",
    "InvalidReleaseError",
    "ReleaseEngine",
    "ReleaseError",
    "ReleaseOutcome",
    "ReleaseState",
    "build_args",
]
