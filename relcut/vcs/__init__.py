"""Version-control backends.

Usage:
    from relcut.vcs import default_registry

    backend = default_registry().find()
    if backend is None:
        raise SystemExit("no VCS")
"""

from .base import Backend, BackendVariant, CommandRunner
from .errors import BackendCommandError, BackendError, NoBackendDetectedError, PerforceConfigError
from .git import GitBackend, find_git_root
from .perforce import PerforceBackend
from .registry import BackendRegistry, default_registry

__all__ = [
    "Backend",
    "BackendCommandError",
    "BackendError",
    "BackendRegistry",
    "BackendVariant",
    "CommandRunner",
    "GitBackend",
    "NoBackendDetectedError",
    "PerforceBackend",
    "PerforceConfigError",
    "default_registry",
    "find_git_root",
]
