"""Release command - build, tag and advance the build descriptor."""

from __future__ import annotations

from pathlib import Path

import typer

from relcut.cli.commands._helpers import (
    CONFIG_OPTION,
    DESCRIPTOR_OPTION,
    NEXT_VERSION_OPTION,
    exit_with_error,
    require_backend,
)
from relcut.cli.context import build_context
from relcut.core.result import Err, Ok
from relcut.release.build import CommandBuildRunner
from relcut.release.engine import ReleaseEngine


def release(
    options: str | None = typer.Argument(
        None,
        help="Build arguments, as one string (default: 'clean build DEBUG=no')",
        show_default=False,
    ),
    descriptor: Path | None = DESCRIPTOR_OPTION,
    config: Path | None = CONFIG_OPTION,
    tag_name: str | None = typer.Option(
        None, "--tag-name", help="Tag to create; may contain {version}"
    ),
    commit_message: str | None = typer.Option(
        None, "--commit-message", help="Descriptor commit message; may contain {version}"
    ),
    next_version: str | None = NEXT_VERSION_OPTION,
) -> None:
    """Release by building, tagging, then incrementing the version number."""
    ctx = build_context(
        config_path=config,
        descriptor=descriptor,
        tag_name=tag_name,
        commit_message=commit_message,
        next_version=next_version,
    )
    backend = require_backend(ctx)
    ctx.console.info(f"{backend.name} detected")

    engine = ReleaseEngine(
        backend=backend,
        config=ctx.config,
        builder=CommandBuildRunner(ctx.config.build_command, cwd=ctx.cwd),
        console=ctx.console,
    )

    match engine.make(options):
        case Ok(outcome):
            ctx.console.success(f"released {outcome.release_version} (tag {outcome.tag})")
            if outcome.next_version is not None:
                ctx.console.print(f"next version: {outcome.next_version}")
        case Err(error):
            exit_with_error(error, ctx)
