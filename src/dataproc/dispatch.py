"""Operation dispatcher: resolve, run, print, map errors to exit codes."""

import json
import time

import typer

from dataproc.config import DataprocConfig
from dataproc.errors import DataProcError, UsageError
from dataproc.observability import log_operation_event
from dataproc.operations.arguments import format_list
from dataproc.operations.registry import normalize_name, resolve_operation, usage_text
from dataproc.schemas import OperationResult

EXIT_OK = 0
EXIT_FAILURE = 1


def execute(tokens: list[str]) -> OperationResult:
    """Run the operation named by ``tokens[0]`` on ``tokens[1:]``.

    Raises:
        UsageError: Fewer than two tokens, or an unknown operation name.
        ValidationError: The operation rejected its arguments.
    """
    if len(tokens) < 2:
        raise UsageError("Missing operation or arguments")

    name = normalize_name(tokens[0])
    handler = resolve_operation(name)
    if handler is None:
        raise UsageError(f"Unknown operation '{tokens[0]}'")

    args = list(tokens[1:])
    start_time = time.perf_counter()
    outcome = handler(args)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    return OperationResult(
        operation=name,
        requested_as=tokens[0],
        arguments=args,
        execution_time_ms=elapsed_ms,
        **outcome,
    )


def render_text(result: OperationResult, tag: str, trace: bool = True) -> list[str]:
    """Build the stdout lines of a successful run."""
    if not trace:
        return [f"RESULT: {result.rendered}"]

    lines = [
        f"{tag} Starting data processing...",
        f"{tag} Operation: {result.requested_as or result.operation}",
        f"{tag} Arguments: {format_list(result.arguments)}",
    ]
    lines.extend(f"{tag} {message}" for message in result.trace)
    lines.append(f"RESULT: {result.rendered}")
    lines.append(f"{tag} Execution time: {result.execution_time_ms:.3f}ms")
    lines.append(f"{tag} Processing completed successfully!")
    return lines


def render_json(result: OperationResult) -> str:
    return json.dumps(result.to_json_dict())


def run(
    tokens: list[str],
    config: DataprocConfig,
    program: str = "dataproc",
) -> int:
    """Execute one invocation and print its outcome.

    Returns:
        Process exit code: 0 on success, 1 on any error.
    """
    try:
        result = execute(tokens)
    except UsageError as e:
        typer.echo(f"Error: {e}", color=True)
        typer.echo(usage_text(program), color=True)
        return EXIT_FAILURE
    except DataProcError as e:
        typer.echo(f"Error: {e}", err=True, color=True)
        return EXIT_FAILURE
    except Exception as e:
        log_operation_event("dispatch", f"unexpected {type(e).__name__}", "error")
        typer.echo(f"Error: {e}", err=True, color=True)
        return EXIT_FAILURE

    # color=True keeps escape sequences in user text when stdout is a pipe
    if config.output.format == "json":
        typer.echo(render_json(result), color=True)
    else:
        for line in render_text(result, config.output.tag, config.output.trace):
            typer.echo(line, color=True)
    return EXIT_OK
