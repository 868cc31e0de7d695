"""Pydantic schemas for operation results."""

from typing import Literal, Union

from pydantic import BaseModel, Field

OperationName = Literal[
    "reverse",
    "sort",
    "unique",
    "prime",
    "factorial",
    "uppercase",
    "wordcount",
    "palindrome",
]


def render_value(value: Union[bool, int, str]) -> str:
    """Render a result value the way it appears on the RESULT line."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class OperationResult(BaseModel):
    """Outcome of a single operation run."""

    operation: OperationName
    requested_as: str = ""  # operation token as typed, e.g. "REVERSE"
    arguments: list[str]
    value: Union[bool, int, str]
    trace: list[str] = Field(default_factory=list)  # untagged trace messages
    execution_time_ms: float = 0.0

    @property
    def rendered(self) -> str:
        return render_value(self.value)

    def to_json_dict(self) -> dict:
        """Convert to the JSON payload printed by ``--json``."""
        return {
            "operation": self.operation,
            "arguments": self.arguments,
            "result": self.rendered,
            "executionTime": round(self.execution_time_ms, 3),
            "success": True,
        }
