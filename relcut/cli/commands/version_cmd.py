"""Version command - show what a release would do."""

from __future__ import annotations

from pathlib import Path

from relcut.cli.commands._helpers import (
    CONFIG_OPTION,
    DESCRIPTOR_OPTION,
    NEXT_VERSION_OPTION,
    exit_with_error,
)
from relcut.cli.context import build_context
from relcut.core.result import Err
from relcut.output.console import Style
from relcut.version.advance import next_version as resolve_next_version
from relcut.version.advance import release_version
from relcut.version.descriptor import extract_version


def version(
    descriptor: Path | None = DESCRIPTOR_OPTION,
    config: Path | None = CONFIG_OPTION,
    next_version: str | None = NEXT_VERSION_OPTION,
) -> None:
    """Show the current, release and next version and the detected VCS."""
    ctx = build_context(config_path=config, descriptor=descriptor, next_version=next_version)

    current = extract_version(ctx.config.descriptor)
    if isinstance(current, Err):
        exit_with_error(current.error, ctx)

    this_version = current.value
    upcoming = resolve_next_version(this_version, ctx.config.next_version)
    backend = ctx.registry.find(ctx.cwd)

    ctx.console.print(f"descriptor: {ctx.config.descriptor}")
    ctx.console.print(f"current:    {this_version}")
    ctx.console.print(f"release:    {release_version(this_version)}")
    ctx.console.print(f"next:       {upcoming}")
    ctx.console.print(
        f"vcs:        {backend.name if backend is not None else 'none'}",
        Style.DIM,
    )
