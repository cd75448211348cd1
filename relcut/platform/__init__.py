"""Process and filesystem primitives."""

from .files import atomic_write_text, read_text_exact, write_text_exact
from .process import ProcessError, run, run_live

__all__ = [
    "ProcessError",
    "atomic_write_text",
    "read_text_exact",
    "run",
    "run_live",
    "write_text_exact",
]
