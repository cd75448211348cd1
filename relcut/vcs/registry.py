"""Backend selection.

Variants are tried in registration order; the first one that applies to
the working directory wins and is reused for the rest of the process.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .base import Backend, BackendVariant
from .git import GitBackend
from .perforce import PerforceBackend

__all__ = ["BackendRegistry", "default_registry"]


class BackendRegistry:
    def __init__(self) -> None:
        self._variants: list[BackendVariant] = []
        self._found: Backend | None = None

    def register(self, variant: BackendVariant) -> None:
        """Add a variant; registering the same variant twice is a no-op."""
        if variant not in self._variants:
            self._variants.append(variant)

    @property
    def variants(self) -> tuple[BackendVariant, ...]:
        return tuple(self._variants)

    def find(
        self,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Backend | None:
        """Return the backend for the working directory, or None if no VCS applies."""
        if self._found is not None:
            return self._found

        where = Path.cwd() if cwd is None else cwd
        environ = os.environ if env is None else env
        for variant in self._variants:
            if variant.applies_to(where, environ):
                self._found = variant(cwd=where, env=environ)
                break
        return self._found


def default_registry() -> BackendRegistry:
    registry = BackendRegistry()
    registry.register(GitBackend)
    registry.register(PerforceBackend)
    return registry
