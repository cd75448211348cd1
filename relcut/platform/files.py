"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["atomic_write_text", "read_text_exact", "write_text_exact"]


def read_text_exact(path: Path) -> str:
    """Read text without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text_exact(path: Path, content: str) -> None:
    """Write text without newline translation so untouched bytes stay identical."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def atomic_write_text(path: Path, content: str) -> None:
    """Rewrite a file in place via a sibling temp file and os.replace."""
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode)
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)
