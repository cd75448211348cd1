"""Release and next-version computation."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

from relcut.core.policy import Policy, resolve_policy

__all__ = [
    "NEXT_VERSION_ENV_VARS",
    "SNAPSHOT_SUFFIX",
    "default_next_version",
    "is_snapshot",
    "next_version",
    "release_version",
]

SNAPSHOT_SUFFIX = "-SNAPSHOT"
NEXT_VERSION_ENV_VARS = ("NEXT_VERSION", "next_version")

_TRAILING_DIGITS_RE = re.compile(r"(\d+)$")


def is_snapshot(version: str) -> bool:
    return version.endswith(SNAPSHOT_SUFFIX)


def release_version(version: str) -> str:
    """The version to build and tag: the snapshot suffix stripped."""
    if is_snapshot(version):
        return version[: -len(SNAPSHOT_SUFFIX)]
    return version


def default_next_version(current: str) -> str:
    """Increment the last segment of a snapshot version.

    The digit width of the incremented number is kept (``09`` -> ``10``,
    ``009`` -> ``010``) and grows when needed (``99`` -> ``100``).
    Non-snapshot versions, and snapshots whose last segment has no trailing
    number, are returned unchanged.
    """
    if not is_snapshot(current):
        return current

    segments = release_version(current).split(".")
    m = _TRAILING_DIGITS_RE.search(segments[-1])
    if m is None:
        return current

    digits = m.group(1)
    bumped = f"{int(digits) + 1:0{len(digits)}d}"
    segments[-1] = segments[-1][: m.start(1)] + bumped
    return ".".join(segments) + SNAPSHOT_SUFFIX


def next_version(
    current: str,
    override: Policy | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> str:
    """Resolve the version the descriptor moves to after the release.

    First non-empty source wins: the configured override, then the
    ``NEXT_VERSION`` / ``next_version`` environment variables, then
    :func:`default_next_version`.
    """
    if override is not None:
        resolved = resolve_policy(override, current)
        if resolved:
            return resolved

    environ = os.environ if env is None else env
    for name in NEXT_VERSION_ENV_VARS:
        value = environ.get(name, "")
        if value:
            return value

    return default_next_version(current)
