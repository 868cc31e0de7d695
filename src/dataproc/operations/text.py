"""String operations: reverse, uppercase, wordcount, palindrome."""

import re

from dataproc.observability import log_operation_event, traced_operation
from dataproc.operations.arguments import require_exactly

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
_WHITESPACE_RUN_RE = re.compile(r"[ \t\n\x0b\f\r]+")

# characters at or below U+0020 count as padding
_PADDING = "".join(chr(c) for c in range(0x21))


def reverse_string(text: str) -> str:
    """Return the characters of text in reverse order."""
    return text[::-1]


def to_uppercase(text: str) -> str:
    """Map text to uppercase (locale-independent)."""
    return text.upper()


def count_words(text: str) -> int:
    """Count words separated by runs of ASCII whitespace.

    Padding (control characters and spaces) is trimmed first; text that is
    empty after trimming has zero words. Unicode spaces such as U+00A0 are
    part of a word.
    """
    trimmed = text.strip(_PADDING)
    if not trimmed:
        return 0
    return len(_WHITESPACE_RUN_RE.split(trimmed))


def normalize_palindrome(text: str) -> str:
    """Lowercase text and drop everything outside ``[a-z0-9]``."""
    return _NON_ALNUM_RE.sub("", text.lower())


def is_palindrome(text: str) -> bool:
    normalized = normalize_palindrome(text)
    return normalized == reverse_string(normalized)


@traced_operation("reverse")
def handle_reverse(args: list[str]) -> dict:
    """Reverse a single string."""
    require_exactly(args, 1, "Reverse operation requires exactly 1 string")

    text = args[0]
    return {
        "value": reverse_string(text),
        "trace": [f'Reversing string: "{text}"'],
    }


@traced_operation("uppercase")
def handle_uppercase(args: list[str]) -> dict:
    """Convert a single string to uppercase."""
    require_exactly(args, 1, "Uppercase operation requires exactly 1 string")

    text = args[0]
    return {
        "value": to_uppercase(text),
        "trace": [f'Converting to uppercase: "{text}"'],
    }


@traced_operation("wordcount")
def handle_wordcount(args: list[str]) -> dict:
    """Count the words of a single string."""
    require_exactly(args, 1, "WordCount operation requires exactly 1 string")

    text = args[0]
    return {
        "value": count_words(text),
        "trace": [f'Counting words in: "{text}"'],
    }


@traced_operation("palindrome")
def handle_palindrome(args: list[str]) -> dict:
    """Check whether a single string reads the same both ways."""
    require_exactly(args, 1, "Palindrome operation requires exactly 1 string")

    text = args[0]
    normalized = normalize_palindrome(text)
    log_operation_event("palindrome", "normalized", length=len(normalized))

    return {
        "value": normalized == reverse_string(normalized),
        "trace": [
            f'Checking if "{text}" is palindrome',
            f'Normalized: "{normalized}"',
        ],
    }
