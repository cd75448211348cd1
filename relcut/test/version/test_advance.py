"""Tests for relcut.version.advance module."""

from __future__ import annotations

import pytest

from relcut.core.policy import Computed, Constant
from relcut.version.advance import default_next_version, is_snapshot, next_version, release_version


class TestDefaultNextVersion:
    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            ("1.2.9-SNAPSHOT", "1.2.10-SNAPSHOT"),
            ("1.2.09-SNAPSHOT", "1.2.10-SNAPSHOT"),
            ("1.2.009-SNAPSHOT", "1.2.010-SNAPSHOT"),
            ("1.2.99-SNAPSHOT", "1.2.100-SNAPSHOT"),
            ("1.0.0-SNAPSHOT", "1.0.1-SNAPSHOT"),
            ("7-SNAPSHOT", "8-SNAPSHOT"),
            ("1.0.rc1-SNAPSHOT", "1.0.rc2-SNAPSHOT"),
        ],
    )
    def test_snapshot_increments_last_segment(self, current: str, expected: str) -> None:
        assert default_next_version(current) == expected

    @pytest.mark.parametrize("current", ["1.0.0", "1.0.0-rc1", "2.3", "1.0.0-snapshot"])
    def test_non_snapshot_unchanged(self, current: str) -> None:
        assert default_next_version(current) == current

    def test_snapshot_without_number_unchanged(self) -> None:
        assert default_next_version("1.0.final-SNAPSHOT") == "1.0.final-SNAPSHOT"


class TestNextVersion:
    def test_default_policy(self) -> None:
        assert next_version("1.2.9-SNAPSHOT", env={}) == "1.2.10-SNAPSHOT"

    def test_env_override(self) -> None:
        assert next_version("1.0-SNAPSHOT", env={"NEXT_VERSION": "3.0-SNAPSHOT"}) == "3.0-SNAPSHOT"

    def test_lowercase_env_override(self) -> None:
        assert next_version("1.0-SNAPSHOT", env={"next_version": "4.0"}) == "4.0"

    def test_empty_env_ignored(self) -> None:
        assert next_version("1.0-SNAPSHOT", env={"NEXT_VERSION": ""}) == "1.1-SNAPSHOT"

    def test_config_override_beats_env(self) -> None:
        result = next_version(
            "1.0-SNAPSHOT",
            Constant("9.9-SNAPSHOT"),
            env={"NEXT_VERSION": "3.0-SNAPSHOT"},
        )
        assert result == "9.9-SNAPSHOT"

    def test_function_override_receives_current(self) -> None:
        calls: list[str] = []

        def bump_rc(version: str) -> str:
            calls.append(version)
            return version[:-1] + str(int(version[-1]) + 1)

        assert next_version("1.0.0-rc1", Computed(bump_rc), env={}) == "1.0.0-rc2"
        assert calls == ["1.0.0-rc1"]

    def test_empty_override_falls_through(self) -> None:
        assert next_version("1.0-SNAPSHOT", Computed(lambda v: ""), env={}) == "1.1-SNAPSHOT"


def test_release_version_strips_suffix() -> None:
    assert release_version("1.1.0-SNAPSHOT") == "1.1.0"
    assert release_version("1.1.0") == "1.1.0"


def test_is_snapshot() -> None:
    assert is_snapshot("1.0-SNAPSHOT")
    assert not is_snapshot("1.0")
