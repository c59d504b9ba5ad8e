"""Exception capture data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TraceFrame:
    """One frame of a structured stack trace."""

    file: str
    line: int
    function: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ExceptionRecord:
    """A captured exception, normalized at capture time."""

    type: str
    message: str
    code: int
    file: str
    line: int
    stack_trace: str
    surrounding_lines: tuple[str, ...]
    stack_trace_html: str | None = None
    xdebug_link: str | None = None
