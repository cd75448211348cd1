"""Release engine.

One call to :meth:`ReleaseEngine.make` walks a strictly linear sequence::

    START -> VERSION_EXTRACTED -> VALIDATED -> CANDIDATE_BUILT
          -> TAGGED -> [ADVANCED] -> DONE

and stops in FAILED at the first error. The descriptor only ever carries
the release version if the build that used it succeeded: the build runs
against ``<descriptor>.next`` and the candidate replaces the descriptor
through a rename only afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from relcut.core.config import ReleaseConfig
from relcut.core.policy import resolve_policy
from relcut.core.result import Err, Ok, Result
from relcut.output.console import ConsoleProtocol
from relcut.platform.files import atomic_write_text, write_text_exact
from relcut.vcs.base import Backend
from relcut.version.advance import is_snapshot, next_version, release_version
from relcut.version.descriptor import candidate_path, extract_version, with_version
from relcut.version.errors import DescriptorIOError

from .build import BuildRunner, build_args
from .errors import DirtyRepositoryError, InvalidReleaseError, ReleaseError

__all__ = ["ReleaseEngine", "ReleaseOutcome", "ReleaseState"]

DEFAULT_COMMIT_MESSAGE = "Changed version number to {version}"


class ReleaseState(StrEnum):
    START = "start"
    VERSION_EXTRACTED = "version_extracted"
    VALIDATED = "validated"
    CANDIDATE_BUILT = "candidate_built"
    TAGGED = "tagged"
    ADVANCED = "advanced"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    """Summary of a completed release.

    Attributes:
        this_version: Version found in the descriptor when the run started.
        release_version: Version that was built and tagged.
        tag: Tag name created in the VCS.
        next_version: Version the descriptor was advanced to, None if unchanged.
    """

    this_version: str
    release_version: str
    tag: str
    next_version: str | None


class ReleaseEngine:
    """Runs one release of the project described by ``config.descriptor``."""

    def __init__(
        self,
        *,
        backend: Backend,
        config: ReleaseConfig,
        builder: BuildRunner,
        console: ConsoleProtocol,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._backend = backend
        self._config = config
        self._builder = builder
        self._console = console
        self._env: Mapping[str, str] = os.environ if env is None else env
        self._this_version: str | None = None
        self._history: list[ReleaseState] = [ReleaseState.START]

    @property
    def descriptor(self) -> Path:
        return self._config.descriptor

    @property
    def state(self) -> ReleaseState:
        return self._history[-1]

    @property
    def history(self) -> tuple[ReleaseState, ...]:
        return tuple(self._history)

    @property
    def this_version(self) -> str:
        """The descriptor version captured at the start of the run."""
        if self._this_version is None:
            raise RuntimeError("this_version is only known once the version was extracted")
        return self._this_version

    def _enter(self, state: ReleaseState) -> None:
        self._history.append(state)

    # -------------------------------------------------------------------------
    # Policies
    # -------------------------------------------------------------------------

    def next_version(self, version: str) -> str:
        return next_version(version, self._config.next_version, env=self._env)

    def tag_name(self, version: str) -> str:
        if self._config.tag_name is None:
            return version
        return resolve_policy(self._config.tag_name, version)

    def commit_message(self, version: str) -> str:
        if self._config.commit_message is None:
            return DEFAULT_COMMIT_MESSAGE.format(version=version)
        return resolve_policy(self._config.commit_message, version)

    # -------------------------------------------------------------------------
    # Release sequence
    # -------------------------------------------------------------------------

    def make(self, options: str | None = None) -> Result[ReleaseOutcome, ReleaseError]:
        """Cut a release.

        Args:
            options: Free-form build arguments; None builds ``clean build DEBUG=no``.

        Returns:
            Ok(ReleaseOutcome) when every step succeeded, otherwise the first error.
        """
        if self.state != ReleaseState.START:
            raise RuntimeError(f"release already ran (state: {self.state})")

        result = self._make(options)
        if isinstance(result, Err):
            self._enter(ReleaseState.FAILED)
        return result

    def _make(self, options: str | None) -> Result[ReleaseOutcome, ReleaseError]:
        extracted = extract_version(self.descriptor)
        if isinstance(extracted, Err):
            return extracted
        self._this_version = extracted.value
        self._console.step(f"Releasing {self.descriptor.name} version {extracted.value}")
        self._enter(ReleaseState.VERSION_EXTRACTED)

        checked = self.check()
        if isinstance(checked, Err):
            return checked
        self._enter(ReleaseState.VALIDATED)

        built = self.build_release_candidate(options)
        if isinstance(built, Err):
            return built
        self._enter(ReleaseState.CANDIDATE_BUILT)

        tag = self.resolve_tag()
        if isinstance(tag, Err):
            return tag
        tagged = self.tag_release(tag.value)
        if isinstance(tagged, Err):
            return tagged
        self._enter(ReleaseState.TAGGED)

        advanced_to: str | None = None
        upcoming = self.next_version(self.this_version)
        if upcoming != self.this_version:
            advanced = self.update_version_to_next(upcoming)
            if isinstance(advanced, Err):
                return advanced
            advanced_to = upcoming
            self._enter(ReleaseState.ADVANCED)

        self._enter(ReleaseState.DONE)
        return Ok(
            ReleaseOutcome(
                this_version=self.this_version,
                release_version=release_version(self.this_version),
                tag=tag.value,
                next_version=advanced_to,
            )
        )

    def check(self) -> Result[None, ReleaseError]:
        """Refuse releases that cannot advance or that start from a dirty tree."""
        version = self.this_version
        if is_snapshot(version) and self.next_version(version) == version:
            return Err(InvalidReleaseError(version=version))

        uncommitted = self._backend.uncommitted_files()
        if isinstance(uncommitted, Err):
            return uncommitted
        if uncommitted.value:
            return Err(DirtyRepositoryError(files=tuple(uncommitted.value)))
        return Ok(None)

    def build_release_candidate(self, options: str | None) -> Result[None, ReleaseError]:
        """Build with the release version; keep the descriptor change only on success."""
        version = release_version(self.this_version)
        contents = with_version(self.descriptor, version)
        if isinstance(contents, Err):
            return contents

        candidate = candidate_path(self.descriptor)
        self._console.step(f"Building release candidate {version}")
        try:
            try:
                write_text_exact(candidate, contents.value)
            except OSError as e:
                return Err(DescriptorIOError(path=candidate, reason=str(e)))

            built = self._builder.run(candidate, build_args(options))
            if isinstance(built, Err):
                return built

            # A release version equal to the current one leaves nothing to edit
            if version == self.this_version:
                return Ok(None)

            staged = self._backend.stage_for_edit(self.descriptor)
            if isinstance(staged, Err):
                return staged

            try:
                os.chmod(candidate, self.descriptor.stat().st_mode)
                os.replace(candidate, self.descriptor)
            except OSError as e:
                return Err(DescriptorIOError(path=self.descriptor, reason=str(e)))
        finally:
            candidate.unlink(missing_ok=True)
        return Ok(None)

    def resolve_tag(self) -> Result[str, ReleaseError]:
        current = extract_version(self.descriptor)
        if isinstance(current, Err):
            return current
        return Ok(self.tag_name(current.value))

    def tag_release(self, tag: str) -> Result[None, ReleaseError]:
        """Commit the release version if it changed, then tag it."""
        current = extract_version(self.descriptor)
        if isinstance(current, Err):
            return current

        if current.value != self.this_version:
            self._console.step(f"Committing buildfile with version number {current.value}")
            committed = self._commit_descriptor(self.commit_message(current.value))
            if isinstance(committed, Err):
                return committed

        self._console.step(f"Tagging release {tag}")
        return self._backend.tag(tag)

    def update_version_to_next(self, version: str) -> Result[None, ReleaseError]:
        """Rewrite the descriptor with the next version and commit it."""
        staged = self._backend.stage_for_edit(self.descriptor)
        if isinstance(staged, Err):
            return staged

        contents = with_version(self.descriptor, version)
        if isinstance(contents, Err):
            return contents
        try:
            atomic_write_text(self.descriptor, contents.value)
        except OSError as e:
            return Err(DescriptorIOError(path=self.descriptor, reason=str(e)))

        self._console.step(f"Current version is now {version}")
        return self._commit_descriptor(self.commit_message(version))

    def _commit_descriptor(self, message: str) -> Result[None, ReleaseError]:
        committed = self._backend.commit(self.descriptor, message)
        if isinstance(committed, Err):
            return committed
        return self._backend.push()
