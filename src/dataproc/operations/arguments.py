"""Argument checks shared by the operation handlers."""

import re

from dataproc.errors import ValidationError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# decimal digits (any script) with an optional sign; no padding or underscores
_INTEGER_RE = re.compile(r"[+-]?\d+")


def require_exactly(args: list[str], count: int, message: str) -> None:
    if len(args) != count:
        raise ValidationError(message)


def require_at_least(args: list[str], count: int, message: str) -> None:
    if len(args) < count:
        raise ValidationError(message)


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer.

    Raises:
        ValidationError: If the text is not a decimal integer or is out of range.
    """
    if not _INTEGER_RE.fullmatch(text):
        raise ValidationError(f"Invalid integer: '{text}'")

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValidationError(f"Invalid integer: '{text}' (out of 32-bit range)")
    return value


def format_list(items: list[str]) -> str:
    """Format items as ``[a, b, c]`` for trace lines."""
    return "[" + ", ".join(items) + "]"
