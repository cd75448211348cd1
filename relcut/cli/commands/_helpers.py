"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from relcut.output.errors import print_release_error, release_error_exit_code
from relcut.vcs.base import Backend
from relcut.vcs.errors import NoBackendDetectedError

if TYPE_CHECKING:
    from relcut.cli.context import CLIContext
    from relcut.core.config import ConfigError
    from relcut.release.errors import ReleaseError


DESCRIPTOR_OPTION = typer.Option(
    None, "--descriptor", "-f", help="Build descriptor holding THIS_VERSION/VERSION_NUMBER"
)
CONFIG_OPTION = typer.Option(
    None, "--config", help="Config file (default: ./relcut.toml when present)"
)
NEXT_VERSION_OPTION = typer.Option(
    None, "--next-version", help="Version to advance to; may contain {version}"
)


def exit_with_error(error: ReleaseError | ConfigError, ctx: CLIContext) -> NoReturn:
    """Print error and exit with its mapped exit code."""
    print_release_error(error, ctx.console)
    raise typer.Exit(code=release_error_exit_code(error))


def require_backend(ctx: CLIContext, cwd: Path | None = None) -> Backend:
    """Detected VCS backend; exits when no VCS applies."""
    backend = ctx.registry.find(cwd or ctx.cwd)
    if backend is None:
        exit_with_error(NoBackendDetectedError(), ctx)
    return backend
