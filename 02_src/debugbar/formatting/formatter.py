"""Plain-text value formatting."""

import pprint
from typing import Any, Protocol


class IValueFormatter(Protocol):
    """Turns an arbitrary value into display text."""

    def format(self, value: Any) -> str:
        """Format value as a string."""
        ...


class ReprFormatter:
    """pprint-based formatter for non-string messages."""

    def __init__(self, width: int = 100, depth: int | None = 6):
        self._width = width
        self._depth = depth

    def format(self, value: Any) -> str:
        """Format value as a string."""
        return pprint.pformat(
            value, width=self._width, depth=self._depth, sort_dicts=False
        )
