"""Error types raised by the dispatcher and the operations."""


class DataProcError(Exception):
    """Base class for all dataproc errors."""


class UsageError(DataProcError):
    """The command line is malformed: missing tokens or unknown operation.

    The dispatcher prints the usage text after the message.
    """


class ValidationError(DataProcError):
    """An operation rejected its arguments (arity, range or number format)."""


class ConfigError(DataProcError):
    """The config file could not be read or is not valid YAML."""
