"""Operation lookup table and usage text."""

from typing import Callable, Optional

from dataproc.operations.numbers import handle_factorial, handle_prime
from dataproc.operations.sequences import handle_sort, handle_unique
from dataproc.operations.text import (
    handle_palindrome,
    handle_reverse,
    handle_uppercase,
    handle_wordcount,
)

Handler = Callable[[list[str]], dict]

OPERATIONS: dict[str, Handler] = {
    "reverse": handle_reverse,
    "sort": handle_sort,
    "unique": handle_unique,
    "prime": handle_prime,
    "factorial": handle_factorial,
    "uppercase": handle_uppercase,
    "wordcount": handle_wordcount,
    "palindrome": handle_palindrome,
}

# (name, arguments synopsis, description)
OPERATION_HELP = [
    ("reverse", "<string>", "Reverse a string"),
    ("sort", "<item1> <item2>...", "Sort array elements"),
    ("unique", "<item1> <item2>...", "Remove duplicates from array"),
    ("prime", "<number>", "Check if number is prime"),
    ("factorial", "<number>", "Calculate factorial (max 20)"),
    ("uppercase", "<string>", "Convert string to uppercase"),
    ("wordcount", "<string>", "Count words in string"),
    ("palindrome", "<string>", "Check if string is palindrome"),
]

USAGE_EXAMPLES = [
    'reverse "Hello World"',
    "sort apple banana cherry",
    "prime 17",
    "factorial 5",
]


def normalize_name(name: str) -> str:
    return name.lower()


def resolve_operation(name: str) -> Optional[Handler]:
    """Look up a handler by case-insensitive name; None when unknown."""
    return OPERATIONS.get(normalize_name(name))


def supported_operations() -> list[str]:
    return list(OPERATIONS)


def usage_text(program: str = "dataproc") -> str:
    """Build the usage block printed on usage errors."""
    lines = [f"Usage: {program} <operation> <arguments>", "Operations:"]
    for name, synopsis, description in OPERATION_HELP:
        lines.append(f"  {f'{name} {synopsis}':<27}- {description}")
    lines.append("")
    lines.append("Examples:")
    for example in USAGE_EXAMPLES:
        lines.append(f"  {program} {example}")
    return "\n".join(lines)
