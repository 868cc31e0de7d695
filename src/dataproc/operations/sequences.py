"""List operations over the argument tokens: sort, unique."""

from dataproc.observability import traced_operation
from dataproc.operations.arguments import format_list, require_at_least


def sort_elements(elements: list[str]) -> list[str]:
    """Sort ascending by codepoint."""
    return sorted(elements)


def unique_elements(elements: list[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence of each element."""
    return list(dict.fromkeys(elements))


@traced_operation("sort", log_input=True)
def handle_sort(args: list[str]) -> dict:
    require_at_least(args, 1, "Sort operation requires at least 1 element")

    return {
        "value": ",".join(sort_elements(args)),
        "trace": [f"Sorting elements: {format_list(args)}"],
    }


@traced_operation("unique", log_input=True)
def handle_unique(args: list[str]) -> dict:
    require_at_least(args, 1, "Unique operation requires at least 1 element")

    return {
        "value": ",".join(unique_elements(args)),
        "trace": [f"Removing duplicates from: {format_list(args)}"],
    }
