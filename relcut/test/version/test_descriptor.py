"""Tests for relcut.version.descriptor module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relcut.core.result import Err, Ok
from relcut.version.descriptor import (
    candidate_path,
    extract_version,
    parse_version,
    replace_version,
    with_version,
)
from relcut.version.errors import DescriptorIOError, VersionNotFoundError

BUILDFILE = """\
# Project build
THIS_VERSION = "1.0.0-rc1"

build:
\techo $(THIS_VERSION)
"""


class TestParseVersion:
    def test_this_version(self) -> None:
        assert parse_version(BUILDFILE) == "1.0.0-rc1"

    @pytest.mark.parametrize(
        "line",
        [
            'VERSION_NUMBER = "2.3.4"',
            "VERSION_NUMBER='2.3.4'",
            'VERSION_NUMBER   =   "2.3.4"',
        ],
    )
    def test_version_number_variants(self, line: str) -> None:
        assert parse_version(f"{line}\n") == "2.3.4"

    def test_first_match_wins(self) -> None:
        text = 'THIS_VERSION = "1.0"\nVERSION_NUMBER = "2.0"\n'
        assert parse_version(text) == "1.0"

    def test_mismatched_quotes_do_not_match(self) -> None:
        assert parse_version("THIS_VERSION = \"1.0'\n") is None

    def test_no_assignment(self) -> None:
        assert parse_version("VERSION = 1\n") is None


class TestReplaceVersion:
    def test_only_quoted_value_changes(self) -> None:
        replaced = replace_version(BUILDFILE, "1.0.0")
        assert replaced == BUILDFILE.replace('"1.0.0-rc1"', '"1.0.0"')

    def test_keeps_quote_style(self) -> None:
        assert replace_version("VERSION_NUMBER='1'\n", "2") == "VERSION_NUMBER='2'\n"

    def test_only_first_assignment(self) -> None:
        text = 'THIS_VERSION = "1"\nTHIS_VERSION = "1"\n'
        assert replace_version(text, "2") == 'THIS_VERSION = "2"\nTHIS_VERSION = "1"\n'

    def test_no_assignment_unchanged(self) -> None:
        assert replace_version("nothing here", "2") == "nothing here"


class TestExtractVersion:
    def test_extracts(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_text(BUILDFILE)
        assert extract_version(path) == Ok("1.0.0-rc1")

    def test_pattern_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_text("all:\n\ttrue\n")

        result = extract_version(path)

        assert result == Err(VersionNotFoundError(path=path))
        assert "THIS_VERSION" in result.error.message

    def test_missing_file_is_a_distinct_error(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"

        result = extract_version(path)

        assert isinstance(result, Err)
        assert isinstance(result.error, DescriptorIOError)
        assert result.error.path == path


class TestWithVersion:
    def test_does_not_write(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_text(BUILDFILE)

        result = with_version(path, "1.0.0")

        assert isinstance(result, Ok)
        assert 'THIS_VERSION = "1.0.0"' in result.value
        assert path.read_text() == BUILDFILE

    def test_preserves_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_bytes(b'A = 1\r\nTHIS_VERSION = "1.0-SNAPSHOT"\r\n')

        result = with_version(path, "1.0")

        assert result == Ok('A = 1\r\nTHIS_VERSION = "1.0"\r\n')

    def test_pattern_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_text("x")
        assert isinstance(with_version(path, "1"), Err)


def test_candidate_path_is_sibling(tmp_path: Path) -> None:
    assert candidate_path(tmp_path / "Makefile") == tmp_path / "Makefile.next"
