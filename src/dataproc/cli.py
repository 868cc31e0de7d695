"""CLI entry point using Typer."""

from typing import Optional

import typer

from dataproc import __version__
from dataproc.config import load_config
from dataproc.dispatch import run
from dataproc.errors import DataProcError
from dataproc.observability import set_verbose
from dataproc.operations.registry import OPERATION_HELP

PROGRAM_NAME = "dataproc"

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Elementary data processing operations for cross-process demos",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_NAME} {__version__}")
        raise typer.Exit()


def _list_callback(value: bool) -> None:
    if value:
        for name, synopsis, description in OPERATION_HELP:
            typer.echo(f"{name:<12}{synopsis:<22}{description}")
        raise typer.Exit()


@app.command(
    context_settings={
        # everything after the operation name belongs to the operation,
        # including tokens such as "-1"
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    }
)
def main(
    tokens: Optional[list[str]] = typer.Argument(
        None, help="Operation name followed by its arguments"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print a single JSON object instead of text"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only print the RESULT line"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log operation events to stderr"
    ),
    tag: Optional[str] = typer.Option(
        None, "--tag", help="Prefix for trace lines (default: [Python])"
    ),
    list_operations: bool = typer.Option(
        False,
        "--list",
        help="List supported operations and exit",
        callback=_list_callback,
        is_eager=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Run one operation: dataproc <operation> <arguments...>"""
    try:
        config = load_config()
    except DataProcError as e:
        typer.echo(f"Error: {e}", err=True, color=True)
        raise typer.Exit(1)

    if json_output:
        config.output.format = "json"
    if quiet:
        config.output.trace = False
    if verbose:
        config.logging.verbose = True
    if tag:
        config.output.tag = tag

    set_verbose(config.logging.verbose)

    exit_code = run(tokens or [], config, program=PROGRAM_NAME)
    if exit_code != 0:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
