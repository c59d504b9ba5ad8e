"""Message-related data models."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class StringMessage:
    """A plain text payload, stored verbatim."""

    text: str


@dataclass(frozen=True)
class StructuredMessage:
    """Any non-string payload; needs a formatter to be displayed."""

    value: Any


LogPayload = Union[StringMessage, StructuredMessage]


def to_payload(message: Any) -> LogPayload:
    """Resolve a raw message into its payload variant."""
    if isinstance(message, str):
        return StringMessage(message)
    return StructuredMessage(message)


@dataclass(frozen=True)
class MessageRecord:
    """A single captured message."""

    text: str
    label: str
    timestamp: float
    is_string: bool = True
    rich_html: str | None = None
    collector: str | None = None  # set only on records read through aggregation
