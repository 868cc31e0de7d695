"""Observability utilities for operation handlers.

Provides stderr logging and timing for the handlers. Logging is silent
unless verbose mode is switched on, so that stderr only carries the
``Error:`` line of a failed run by default.
"""

import functools
import sys
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Turn stderr event logging on or off."""
    global _verbose
    _verbose = enabled


def is_verbose() -> bool:
    return _verbose


def _log(message: str, level: str = "info", operation: str = "dataproc") -> None:
    """Log message to stderr when verbose mode is on."""
    if not _verbose:
        return
    prefix = {
        "info": "ℹ️",
        "success": "✅",
        "error": "❌",
        "warning": "⚠️",
        "start": "🚀",
        "end": "🏁",
    }.get(level, "")
    print(f"{prefix} [{operation}] {message}", file=sys.stderr, flush=True)


def format_elapsed(elapsed: float) -> str:
    """Format seconds as ``1.23s`` or ``45ms``."""
    return f"{elapsed:.2f}s" if elapsed >= 1 else f"{elapsed * 1000:.0f}ms"


def traced_operation(name: str, *, log_input: bool = False) -> Callable[[F], F]:
    """Decorator to add timing and logging to an operation handler.

    Args:
        name: Operation name used as the log tag (e.g. "reverse").
        log_input: Whether to log the argument count.

    Example:
        @traced_operation("reverse")
        def handle_reverse(args: list[str]) -> dict:
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(args: list[str], *extra: Any, **kwargs: Any) -> dict:
            _log("Starting...", "start", name)
            if log_input:
                _log(f"Argument count: {len(args)}", "info", name)

            start_time = time.perf_counter()

            try:
                result = func(args, *extra, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                _log(f"Failed after {format_elapsed(elapsed)}: {e}", "error", name)
                raise

            elapsed = time.perf_counter() - start_time
            _log(f"Completed in {format_elapsed(elapsed)}", "success", name)
            return result

        return wrapper  # type: ignore

    return decorator


def log_operation_event(
    operation: str, event: str, level: str = "info", **data: Any
) -> None:
    """Log a custom event from within an operation.

    Example:
        log_operation_event("palindrome", "normalized", length=21)
    """
    if data:
        data_str = ", ".join(f"{k}={v}" for k, v in data.items())
        _log(f"{event} ({data_str})", level, operation)
    else:
        _log(event, level, operation)
