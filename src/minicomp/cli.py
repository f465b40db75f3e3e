"""
minicomp CLI.

Commands:
- resolve: Print the copy patterns for a project's component graph
- entries: List the entries synthesized from the configured source roots
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from minicomp.core.config import DEFAULT_CONFIG_NAME, ProjectConfig, load_config
from minicomp.core.context import ResolveContext
from minicomp.core.entries import collect_entries
from minicomp.core.errors import ConfigError
from minicomp.core.models import Compilation, CompilationOptions
from minicomp.core.resolver import resolve_components

console = Console()
err_console = Console(stderr=True)


def get_version() -> str:
    """Get minicomp version from package metadata."""
    from minicomp import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"minicomp version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="""minicomp – resolve mini-program component graphs into copy patterns

Reads minicomp.toml in the current directory unless --config is given.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """minicomp CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(config: str) -> ProjectConfig:
    try:
        return load_config(Path(config))
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command(name="resolve")
def resolve_command(
    config: str = typer.Option(DEFAULT_CONFIG_NAME, "--config", "-c", help="Path to config file"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: 'table' or 'json'"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any error was recorded"),
) -> None:
    """
    Resolve the component graph and print the resulting copy patterns.
    """
    project = _load(config)
    compilation = Compilation(options=CompilationOptions(context=project.root.as_posix()))
    result = resolve_components(compilation, project.components)

    if format == "json":
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        table = Table(title=f"Copy patterns ({len(result.patterns)})")
        table.add_column("From", overflow="fold")
        table.add_column("To", overflow="fold")
        for pattern in result.patterns:
            table.add_row(pattern.from_, pattern.to or ".")
        console.print(table)
        for error in result.diagnostics:
            err_console.print(f"[yellow]warning:[/yellow] {error}", highlight=False)

    if strict and not result.ok:
        raise typer.Exit(code=1)


@app.command(name="entries")
def entries_command(
    config: str = typer.Option(DEFAULT_CONFIG_NAME, "--config", "-c", help="Path to config file"),
) -> None:
    """
    List the entries collected from the configured source roots.
    """
    project = _load(config)
    ctx = ResolveContext(project_root=project.root.as_posix())
    entries = collect_entries(project.components.src, "json", ctx)

    if not entries:
        typer.echo("No entries found")
    for entry in entries:
        for name in entry.assets:
            typer.echo(f"{name}  ({entry.context})")
    for error in ctx.diagnostics:
        typer.echo(f"warning: {error}", err=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
