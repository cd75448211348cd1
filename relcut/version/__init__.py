"""Version extraction and advancement."""

from .advance import default_next_version, is_snapshot, next_version, release_version
from .descriptor import (
    THIS_VERSION_PATTERN,
    candidate_path,
    extract_version,
    parse_version,
    replace_version,
    with_version,
)
from .errors import DescriptorError, DescriptorIOError, VersionNotFoundError

__all__ = [
    # advance
    "default_next_version",
    "is_snapshot",
    "next_version",
    "release_version",
    # descriptor
    "THIS_VERSION_PATTERN",
    "candidate_path",
    "extract_version",
    "parse_version",
    "replace_version",
    "with_version",
    # errors
    "DescriptorError",
    "DescriptorIOError",
    "VersionNotFoundError",
]
