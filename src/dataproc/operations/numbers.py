"""Integer operations: prime, factorial."""

from dataproc.errors import ValidationError
from dataproc.observability import traced_operation
from dataproc.operations.arguments import parse_int, require_exactly

# 20! is the largest factorial that fits a signed 64-bit integer
MAX_FACTORIAL_INPUT = 20


def is_prime(n: int) -> bool:
    """Trial division over 2, 3 and the 6k±1 candidates up to √n."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def factorial(n: int) -> int:
    """Iterative factorial for 0 <= n <= 20.

    Raises:
        ValidationError: If n is negative or larger than 20.
    """
    if n < 0:
        raise ValidationError("Factorial requires non-negative number")
    if n > MAX_FACTORIAL_INPUT:
        raise ValidationError(
            f"Factorial input too large (max {MAX_FACTORIAL_INPUT})"
        )

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


@traced_operation("prime")
def handle_prime(args: list[str]) -> dict:
    require_exactly(args, 1, "Prime operation requires exactly 1 number")

    number = parse_int(args[0])
    return {
        "value": is_prime(number),
        "trace": [f"Checking if {number} is prime"],
    }


@traced_operation("factorial")
def handle_factorial(args: list[str]) -> dict:
    require_exactly(args, 1, "Factorial operation requires exactly 1 number")

    number = parse_int(args[0])
    return {
        "value": factorial(number),
        "trace": [f"Calculating factorial of {number}"],
    }
