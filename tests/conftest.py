"""Pytest configuration and fixtures."""

import pytest

from dataproc.observability import set_verbose

DATAPROC_ENV_VARS = (
    "DATAPROC_TAG",
    "DATAPROC_TRACE",
    "DATAPROC_FORMAT",
    "DATAPROC_VERBOSE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run each test without DATAPROC_* variables, outside any config dir."""
    for name in DATAPROC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    set_verbose(False)
    yield
    set_verbose(False)
