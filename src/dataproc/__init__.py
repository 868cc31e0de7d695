"""dataproc - elementary data processing operations behind a CLI."""

__version__ = "0.1.0"
