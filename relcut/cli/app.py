from __future__ import annotations

import typer

from relcut import __version__
from relcut.cli.commands.release_cmd import release
from relcut.cli.commands.version_cmd import version

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


app.command()(release)
app.command()(version)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    show_version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if show_version:
        typer.echo(__version__)
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


def main() -> None:
    app()
