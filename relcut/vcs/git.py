"""Git release backend.

Usage:
    if GitBackend.applies_to(Path.cwd(), os.environ):
        git = GitBackend(cwd=Path.cwd(), env=os.environ)
        match git.uncommitted_files():
            case Ok([]):
                print("clean")
            case Ok(files):
                print("\\n".join(files))
            case Err(e):
                print(e.message)
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from relcut.core.result import Err, Ok, Result
from relcut.platform.process import run as run_process

from .base import CommandRunner, to_backend_error
from .errors import BackendCommandError

__all__ = ["GitBackend", "find_git_root", "parse_porcelain_paths"]

TAG_MESSAGE_PREFIX = "[relcut]"


def find_git_root(start: Path) -> Path | None:
    """Walk up from start to the filesystem root looking for a `.git` marker."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def parse_porcelain_paths(output: str) -> list[str]:
    """Paths from `git status --porcelain` (rename entries yield the new path)."""
    paths: list[str] = []
    for line in output.splitlines():
        if len(line) < 4:
            continue
        path = line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        paths.append(path.strip('"'))
    return paths


class GitBackend:
    """Release operations on a Git working tree.

    Attributes:
        cwd: Directory the git commands run in.
    """

    name: ClassVar[str] = "git"

    def __init__(
        self,
        *,
        cwd: Path,
        env: Mapping[str, str] | None = None,
        runner: CommandRunner = run_process,
    ) -> None:
        self.cwd = cwd
        self._runner = runner

    @classmethod
    def applies_to(cls, cwd: Path, env: Mapping[str, str]) -> bool:
        return find_git_root(cwd) is not None

    def _git(self, *args: str) -> Result[str, BackendCommandError]:
        cmd = ["git", *args]
        return to_backend_error(self._runner(cmd, self.cwd))

    def uncommitted_files(self) -> Result[list[str], BackendCommandError]:
        result = self._git("status", "--porcelain")
        if isinstance(result, Err):
            return result
        return Ok(parse_porcelain_paths(result.value))

    def stage_for_edit(self, path: Path) -> Result[None, BackendCommandError]:
        # Git tracks edits through the working tree diff
        return Ok(None)

    def commit(self, path: Path, message: str) -> Result[None, BackendCommandError]:
        """Commit a single file. The file must already be known to git."""
        result = self._git("commit", "-m", message, "--", str(path))
        if isinstance(result, Err):
            return result
        return Ok(None)

    def current_branch(self) -> Result[str | None, BackendCommandError]:
        """Name of the checked-out branch; None when HEAD is detached."""
        result = self._git("branch")
        if isinstance(result, Err):
            return result
        for line in result.value.splitlines():
            if line.startswith("* "):
                name = line[2:].strip()
                if name.startswith("(") and name.endswith(")"):
                    return Ok(None)
                return Ok(name)
        return Ok(None)

    def remote(self) -> Result[str | None, BackendCommandError]:
        """Remote tracked by the current branch, or None if there is none."""
        branch = self.current_branch()
        if isinstance(branch, Err):
            return branch
        if branch.value is None:
            return Ok(None)

        # `git config --get` exits 1 when the key is unset
        configured = self._runner(
            ["git", "config", "--get", f"branch.{branch.value}.remote"], self.cwd
        )
        if isinstance(configured, Err):
            return Ok(None)
        name = configured.value.strip()
        if not name:
            return Ok(None)

        remotes = self._git("remote")
        if isinstance(remotes, Err):
            return remotes
        if name not in remotes.value.split():
            return Ok(None)
        return Ok(name)

    def push(self) -> Result[None, BackendCommandError]:
        """Push the current branch to its remote; no-op without a remote."""
        remote = self.remote()
        if isinstance(remote, Err):
            return remote
        if remote.value is None:
            return Ok(None)

        branch = self.current_branch()
        if isinstance(branch, Err):
            return branch
        if branch.value is None:
            return Ok(None)

        result = self._git("push", remote.value, branch.value)
        if isinstance(result, Err):
            return result
        return Ok(None)

    def tag(self, name: str) -> Result[None, BackendCommandError]:
        """Create or overwrite an annotated tag, replacing it on the remote too."""
        remote = self.remote()
        if isinstance(remote, Err):
            return remote

        if remote.value is not None:
            # Fails when the remote has no such tag yet
            self._git("push", remote.value, f":refs/tags/{name}")

        created = self._git(
            "tag", "-f", "-a", name, "-m", f"{TAG_MESSAGE_PREFIX} Cutting release {name}"
        )
        if isinstance(created, Err):
            return created

        if remote.value is not None:
            pushed = self._git("push", remote.value, "tag", name)
            if isinstance(pushed, Err):
                return pushed
        return Ok(None)
