"""Constant-or-computed configuration values.

Tag names, commit messages and next versions can each be configured either
as a fixed string or as a function of a version string. Both shapes are
resolved through :func:`resolve_policy` at the point of use.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Computed", "Constant", "Policy", "policy_from_value", "resolve_policy"]

VERSION_PLACEHOLDER = "{version}"


@dataclass(frozen=True, slots=True)
class Constant:
    value: str


@dataclass(frozen=True, slots=True)
class Computed:
    fn: Callable[[str], str]


type Policy = Constant | Computed


def resolve_policy(policy: Policy, version: str) -> str:
    """Evaluate a policy for a version. Computed policies run exactly once."""
    match policy:
        case Constant(value=value):
            return value
        case Computed(fn=fn):
            return fn(version)


def policy_from_value(value: str) -> Policy:
    """Build a policy from a config or CLI string.

    Strings containing ``{version}`` become templates formatted with the
    version; anything else is taken literally.
    """
    if VERSION_PLACEHOLDER not in value:
        return Constant(value)

    def render(version: str) -> str:
        return value.replace(VERSION_PLACEHOLDER, version)

    return Computed(render)
