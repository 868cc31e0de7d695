"""Allow ``python -m dataproc``."""

from dataproc.cli import PROGRAM_NAME, app

if __name__ == "__main__":
    app(prog_name=PROGRAM_NAME)
