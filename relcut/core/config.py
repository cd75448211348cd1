"""Typed release configuration.

The configuration is built once per process from defaults, an optional
``relcut.toml`` file and CLI flags, then handed to the release engine.
It is frozen: nothing mutates it after construction.

Example ``relcut.toml``::

    descriptor = "Makefile"
    build_command = ["make", "-f", "{descriptor}"]
    tag_name = "v{version}"
    commit_message = "Bump version to {version}"
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .policy import Policy, policy_from_value
from .result import Err, Ok, Result

__all__ = [
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
    "DEFAULT_BUILD_COMMAND",
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_DESCRIPTOR",
]

DEFAULT_CONFIG_NAME = "relcut.toml"
DEFAULT_DESCRIPTOR = "Makefile"
DEFAULT_BUILD_COMMAND: tuple[str, ...] = ("make", "-f", "{descriptor}")

_POLICY_KEYS = ("tag_name", "commit_message", "next_version")
_KNOWN_KEYS = frozenset({"descriptor", "build_command", *_POLICY_KEYS})


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Settings for one release run.

    Attributes:
        descriptor: Build descriptor holding the version assignment.
        build_command: Build command prefix. ``{descriptor}`` is replaced with
            the candidate descriptor path.
        tag_name: Tag policy; the release version itself when None.
        commit_message: Commit message policy; a default message when None.
        next_version: Next-version policy; env override or default when None.
    """

    descriptor: Path = Path(DEFAULT_DESCRIPTOR)
    build_command: tuple[str, ...] = DEFAULT_BUILD_COMMAND
    tag_name: Policy | None = None
    commit_message: Policy | None = None
    next_version: Policy | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[ReleaseConfig, str]:
        """Create a ReleaseConfig from a parsed TOML table."""
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            return Err(f"unknown keys: {', '.join(unknown)}")

        descriptor = data.get("descriptor", DEFAULT_DESCRIPTOR)
        if not isinstance(descriptor, str) or not descriptor.strip():
            return Err("descriptor must be a non-empty string")

        build_command = data.get("build_command", list(DEFAULT_BUILD_COMMAND))
        if (
            not isinstance(build_command, list)
            or not build_command
            or not all(isinstance(part, str) for part in build_command)
        ):
            return Err("build_command must be a non-empty list of strings")

        policies: dict[str, Policy] = {}
        for key in _POLICY_KEYS:
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, str) or not value.strip():
                return Err(f"{key} must be a non-empty string")
            policies[key] = policy_from_value(value)

        return Ok(
            cls(
                descriptor=Path(descriptor),
                build_command=tuple(build_command),
                **policies,
            )
        )

    def with_overrides(
        self,
        *,
        descriptor: Path | None = None,
        tag_name: str | None = None,
        commit_message: str | None = None,
        next_version: str | None = None,
    ) -> ReleaseConfig:
        """Return a copy with CLI overrides applied (None keeps the current value)."""
        changes: dict[str, object] = {}
        if descriptor is not None:
            changes["descriptor"] = descriptor
        if tag_name:
            changes["tag_name"] = policy_from_value(tag_name)
        if commit_message:
            changes["commit_message"] = policy_from_value(commit_message)
        if next_version:
            changes["next_version"] = policy_from_value(next_version)
        return dataclasses.replace(self, **changes)


def _parse_toml(path: Path) -> Result[dict[str, object], ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        data: dict[str, object] = tomllib.loads(path.read_text(encoding="utf-8"))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and validate a release configuration file.

    Args:
        path: Path to relcut.toml

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    parsed = _parse_toml(path)
    if isinstance(parsed, Err):
        return parsed

    config = ReleaseConfig.from_dict(parsed.value)
    if isinstance(config, Err):
        return Err(ConfigError(f"Invalid config: {config.error}", path=path))
    return config


def load_config_or_default(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load config when the file exists; defaults otherwise.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(ReleaseConfig())
    return load_config(path)
