"""Parent-side helper: invoke the dataproc CLI in a subprocess and read its output."""

import re
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional, Union

# Default timeout for one CLI invocation (seconds)
DEFAULT_TIMEOUT = 30

_RESULT_PREFIX = "RESULT: "
_EXECUTION_TIME_RE = re.compile(r"Execution time: ([0-9]+(?:\.[0-9]+)?)ms")


@dataclass
class ProcessorRun:
    """Outcome of one CLI invocation."""

    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False
    error: Optional[str] = None
    result: Optional[str] = None
    execution_time_ms: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out and self.result is not None


def default_command() -> list[str]:
    return [sys.executable, "-m", "dataproc"]


def build_argv(operation: str, data: Union[str, int, list[str]]) -> list[str]:
    """Turn request data into operation arguments.

    A list becomes one argument per element; anything else is one argument.
    """
    if isinstance(data, list):
        return [operation, *(str(item) for item in data)]
    return [operation, str(data)]


def parse_result(stdout: str) -> Optional[str]:
    """Return the value of the first ``RESULT:`` line, or None."""
    for line in stdout.splitlines():
        if line.startswith(_RESULT_PREFIX):
            return line[len(_RESULT_PREFIX) :]
    return None


def parse_execution_time(stdout: str) -> Optional[float]:
    """Return the reported execution time in milliseconds, or None."""
    match = _EXECUTION_TIME_RE.search(stdout)
    if match:
        return float(match.group(1))
    return None


def parse_error(stderr: str) -> Optional[str]:
    """Return the message of the first ``Error:`` line, or None."""
    for line in stderr.splitlines():
        if line.startswith("Error: "):
            return line[len("Error: ") :]
    return None


def run_processor(
    operation: str,
    data: Union[str, int, list[str]],
    *,
    command: Optional[list[str]] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> ProcessorRun:
    """Run one operation through the CLI.

    Args:
        operation: Operation name (e.g. "reverse")
        data: A single value, or a list of values for sort/unique
        command: Command prefix; defaults to ``python -m dataproc``
        timeout: Seconds before the process is killed

    Returns:
        ProcessorRun with the raw output and the parsed RESULT value
    """
    argv = (command or default_command()) + build_argv(operation, data)

    try:
        completed = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return ProcessorRun(
            returncode=-1,
            stdout="",
            stderr="",
            timed_out=True,
            error=f"Timeout after {timeout} seconds",
        )
    except FileNotFoundError:
        return ProcessorRun(
            returncode=-1,
            stdout="",
            stderr="",
            error=f"Command not found: {argv[0]}",
        )

    return ProcessorRun(
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
        # usage errors are reported on stdout
        error=parse_error(completed.stderr) or parse_error(completed.stdout),
        result=parse_result(completed.stdout),
        execution_time_ms=parse_execution_time(completed.stdout),
    )
