"""Tests for the subprocess runner."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from dataproc.integrations.runner import (
    ProcessorRun,
    build_argv,
    parse_error,
    parse_execution_time,
    parse_result,
    run_processor,
)

SRC_DIR = Path(__file__).parent.parent / "src"

SAMPLE_STDOUT = """[Python] Starting data processing...
[Python] Operation: reverse
[Python] Arguments: [Hello World]
[Python] Reversing string: "Hello World"
RESULT: dlroW olleH
[Python] Execution time: 0.042ms
[Python] Processing completed successfully!
"""


class TestParsing:
    """Tests for the output parsers."""

    def test_parse_result(self):
        assert parse_result(SAMPLE_STDOUT) == "dlroW olleH"

    def test_parse_result_keeps_trailing_spaces(self):
        assert parse_result("RESULT: a b \n") == "a b "

    def test_parse_result_missing(self):
        assert parse_result("[Python] nothing here\n") is None

    def test_parse_execution_time(self):
        assert parse_execution_time(SAMPLE_STDOUT) == pytest.approx(0.042)

    def test_parse_execution_time_missing(self):
        assert parse_execution_time("RESULT: 1\n") is None

    def test_parse_error(self):
        assert parse_error("Error: Factorial input too large (max 20)\n") == (
            "Factorial input too large (max 20)"
        )


class TestBuildArgv:
    """Tests for build_argv function."""

    def test_single_string(self):
        assert build_argv("reverse", "Hello World") == ["reverse", "Hello World"]

    def test_integer(self):
        assert build_argv("prime", 17) == ["prime", "17"]

    def test_list(self):
        assert build_argv("sort", ["cherry", "apple"]) == ["sort", "cherry", "apple"]


class TestProcessorRun:
    """Tests for ProcessorRun dataclass."""

    def test_success(self):
        run = ProcessorRun(returncode=0, stdout="", stderr="", result="1")
        assert run.success is True

    def test_failed_exit_code(self):
        run = ProcessorRun(returncode=1, stdout="", stderr="", result="1")
        assert run.success is False

    def test_timed_out(self):
        run = ProcessorRun(returncode=-1, stdout="", stderr="", timed_out=True)
        assert run.success is False


class TestRunProcessor:
    """Tests for run_processor function."""

    @pytest.fixture(autouse=True)
    def _src_on_path(self, monkeypatch):
        monkeypatch.setenv("PYTHONPATH", str(SRC_DIR))

    def test_reverse(self):
        run = run_processor("reverse", "Hello World")
        assert run.success
        assert run.result == "dlroW olleH"
        assert run.execution_time_ms is not None

    def test_sort_list(self):
        run = run_processor("sort", ["cherry", "apple", "banana"])
        assert run.result == "apple,banana,cherry"

    def test_prime(self):
        run = run_processor("prime", 17)
        assert run.result == "true"

    def test_validation_error(self):
        run = run_processor("factorial", 21)
        assert run.returncode == 1
        assert run.success is False
        assert run.error == "Factorial input too large (max 20)"

    def test_unknown_operation(self):
        run = run_processor("fibonacci", 10)
        assert run.returncode == 1
        assert run.error == "Unknown operation 'fibonacci'"
        assert "Usage:" in run.stdout

    def test_timeout(self):
        with patch(
            "dataproc.integrations.runner.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="dataproc", timeout=1),
        ):
            run = run_processor("reverse", "x", timeout=1)

        assert run.timed_out is True
        assert run.error == "Timeout after 1 seconds"

    def test_missing_command(self):
        run = run_processor("reverse", "x", command=["/nonexistent/dataproc"])
        assert run.success is False
        assert run.error == "Command not found: /nonexistent/dataproc"

    def test_escape_sequences_survive_the_pipe(self):
        run = run_processor("uppercase", "\x1b[31mhi")
        assert run.success
        assert run.result == "\x1b[31MHI"
        assert "RESULT: \x1b[31MHI" in run.stdout

    def test_custom_command(self):
        run = run_processor(
            "uppercase", "hello", command=[sys.executable, "-m", "dataproc", "--quiet"]
        )
        assert run.stdout.splitlines() == ["RESULT: HELLO"]
