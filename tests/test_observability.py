"""Tests for stderr logging and timing."""

import pytest

from dataproc.observability import (
    format_elapsed,
    is_verbose,
    log_operation_event,
    set_verbose,
    traced_operation,
)


@traced_operation("echo", log_input=True)
def _echo(args: list[str]) -> dict:
    return {"value": " ".join(args), "trace": []}


@traced_operation("broken")
def _broken(args: list[str]) -> dict:
    raise ValueError("bad input")


class TestTracedOperation:
    """Tests for traced_operation decorator."""

    def test_silent_by_default(self, capsys):
        assert is_verbose() is False
        assert _echo(["a", "b"])["value"] == "a b"
        assert capsys.readouterr().err == ""

    def test_logs_start_and_completion(self, capsys):
        set_verbose(True)
        _echo(["a"])
        err = capsys.readouterr().err

        assert "[echo] Starting..." in err
        assert "[echo] Argument count: 1" in err
        assert "[echo] Completed in" in err

    def test_failure_is_logged_and_reraised(self, capsys):
        set_verbose(True)
        with pytest.raises(ValueError, match="bad input"):
            _broken([])

        assert "[broken] Failed after" in capsys.readouterr().err

    def test_preserves_function_metadata(self):
        assert _echo.__name__ == "_echo"


class TestLogOperationEvent:
    """Tests for log_operation_event function."""

    def test_with_data(self, capsys):
        set_verbose(True)
        log_operation_event("palindrome", "normalized", length=7)
        assert "[palindrome] normalized (length=7)" in capsys.readouterr().err

    def test_without_data(self, capsys):
        set_verbose(True)
        log_operation_event("sort", "done", "success")
        assert "[sort] done" in capsys.readouterr().err

    def test_silent_when_not_verbose(self, capsys):
        log_operation_event("sort", "done")
        assert capsys.readouterr().err == ""


class TestFormatElapsed:
    """Tests for format_elapsed function."""

    def test_milliseconds(self):
        assert format_elapsed(0.042) == "42ms"

    def test_seconds(self):
        assert format_elapsed(1.5) == "1.50s"
