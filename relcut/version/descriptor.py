"""Reading and substituting the version assignment of a build descriptor.

A descriptor is any text build file holding one line such as::

    THIS_VERSION = "1.2.0-SNAPSHOT"
    VERSION_NUMBER = '2.0'

Only the quoted value is ever rewritten; every other byte of the file is
preserved.
"""

from __future__ import annotations

import re
from pathlib import Path

from relcut.core.result import Err, Ok, Result
from relcut.platform.files import read_text_exact

from .errors import DescriptorError, DescriptorIOError, VersionNotFoundError

__all__ = [
    "THIS_VERSION_PATTERN",
    "candidate_path",
    "extract_version",
    "parse_version",
    "replace_version",
    "with_version",
]

THIS_VERSION_PATTERN = re.compile(r"""(THIS_VERSION|VERSION_NUMBER)\s*=\s*(['"])(.*)\2""")

CANDIDATE_SUFFIX = ".next"


def candidate_path(descriptor: Path) -> Path:
    """Sibling path of the release-candidate copy (``<descriptor>.next``)."""
    return descriptor.with_name(descriptor.name + CANDIDATE_SUFFIX)


def parse_version(text: str) -> str | None:
    """Return the first version assignment in text, or None."""
    m = THIS_VERSION_PATTERN.search(text)
    if m is None:
        return None
    return m.group(3)


def replace_version(text: str, new_version: str) -> str:
    """Substitute the quoted value of the first version assignment.

    The assignment name, spacing and quote character are kept. Text without
    an assignment is returned unchanged.
    """
    m = THIS_VERSION_PATTERN.search(text)
    if m is None:
        return text
    return text[: m.start(3)] + new_version + text[m.end(3) :]


def _read(path: Path) -> Result[str, DescriptorIOError]:
    try:
        return Ok(read_text_exact(path))
    except FileNotFoundError:
        return Err(DescriptorIOError(path=path, reason="file not found"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(DescriptorIOError(path=path, reason=str(e)))


def extract_version(path: Path) -> Result[str, DescriptorError]:
    """Extract the current version from the descriptor at path."""
    text = _read(path)
    if isinstance(text, Err):
        return text

    version = parse_version(text.value)
    if version is None:
        return Err(VersionNotFoundError(path=path))
    return Ok(version)


def with_version(path: Path, new_version: str) -> Result[str, DescriptorError]:
    """Return the descriptor contents with the version replaced, without writing."""
    text = _read(path)
    if isinstance(text, Err):
        return text

    if parse_version(text.value) is None:
        return Err(VersionNotFoundError(path=path))
    return Ok(replace_version(text.value, new_version))
