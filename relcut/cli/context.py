from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relcut.core.config import DEFAULT_CONFIG_NAME, ReleaseConfig, load_config, load_config_or_default
from relcut.core.result import Err
from relcut.output.console import ConsoleProtocol, RichConsole
from relcut.output.errors import print_release_error, release_error_exit_code
from relcut.vcs.registry import BackendRegistry, default_registry


@dataclass(frozen=True, slots=True)
class CLIContext:
    cwd: Path
    config: ReleaseConfig
    registry: BackendRegistry
    console: ConsoleProtocol


def build_context(
    *,
    config_path: Path | None = None,
    descriptor: Path | None = None,
    tag_name: str | None = None,
    commit_message: str | None = None,
    next_version: str | None = None,
) -> CLIContext:
    cwd = Path.cwd()
    console = RichConsole()

    loaded = (
        load_config(config_path)
        if config_path is not None
        else load_config_or_default(cwd / DEFAULT_CONFIG_NAME)
    )
    if isinstance(loaded, Err):
        print_release_error(loaded.error, console)
        raise typer.Exit(code=release_error_exit_code(loaded.error))

    config = loaded.value.with_overrides(
        descriptor=descriptor,
        tag_name=tag_name,
        commit_message=commit_message,
        next_version=next_version,
    )
    if not config.descriptor.is_absolute():
        config = config.with_overrides(descriptor=cwd / config.descriptor)

    return CLIContext(
        cwd=cwd,
        config=config,
        registry=default_registry(),
        console=console,
    )
