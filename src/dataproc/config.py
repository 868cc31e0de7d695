"""Configuration loading."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from dataproc.errors import ConfigError


# Default values
DEFAULT_TAG = "[Python]"
DEFAULT_FORMAT = "text"
OUTPUT_FORMATS = ("text", "json")

# Config file path
CONFIG_PATH = ".dataproc/config.yml"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class OutputConfig:
    """Console output configuration."""

    tag: str = DEFAULT_TAG
    trace: bool = True
    format: str = DEFAULT_FORMAT


@dataclass
class LoggingConfig:
    """Stderr event logging."""

    verbose: bool = False


@dataclass
class DataprocConfig:
    """Main configuration class."""

    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


def _coerce_bool(value: object, default: bool) -> bool:
    """Read a YAML boolean; strings go through the same rules as env vars."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _parse_bool(value)
    if isinstance(value, (int, float)):
        return bool(value)
    return default


def _section(data: dict, key: str) -> dict:
    """Return a mapping section, or an empty one when it is missing or not a mapping."""
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _parse_format(value: object) -> str:
    if isinstance(value, str) and value.lower() in OUTPUT_FORMATS:
        return value.lower()
    return DEFAULT_FORMAT


def load_config(repo_path: Optional[Path] = None) -> DataprocConfig:
    """Load dataproc configuration.

    Priority (highest to lowest):
    1. Environment variables (DATAPROC_TAG, DATAPROC_TRACE, ...)
    2. Config file (.dataproc/config.yml)
    3. Package defaults

    Args:
        repo_path: Directory holding the config file. Defaults to current directory.

    Returns:
        DataprocConfig instance
    """
    config = DataprocConfig()

    if repo_path is None:
        repo_path = Path.cwd()

    config_file = repo_path / CONFIG_PATH
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {config_file}: {e}") from e

        if not isinstance(data, dict):
            data = {}

        config.version = str(data.get("version", config.version))

        output = _section(data, "output")
        if output.get("tag") is not None:
            config.output.tag = str(output["tag"])
        config.output.trace = _coerce_bool(output.get("trace"), True)
        config.output.format = _parse_format(output.get("format"))

        logging = _section(data, "logging")
        config.logging.verbose = _coerce_bool(logging.get("verbose"), False)

    # Override with environment variables
    if env_tag := os.environ.get("DATAPROC_TAG"):
        config.output.tag = env_tag
    if env_trace := os.environ.get("DATAPROC_TRACE"):
        config.output.trace = _parse_bool(env_trace)
    if env_format := os.environ.get("DATAPROC_FORMAT"):
        config.output.format = _parse_format(env_format)
    if env_verbose := os.environ.get("DATAPROC_VERBOSE"):
        config.logging.verbose = _parse_bool(env_verbose)

    return config
