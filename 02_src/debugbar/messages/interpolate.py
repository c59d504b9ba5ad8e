"""Placeholder interpolation for log messages."""

import re
from collections.abc import Mapping
from typing import Any

from ..logging_config import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")

_COMPOSITES = (list, tuple, set, frozenset, Mapping)


def is_stringable(value: Any) -> bool:
    """True if value can stand in for a placeholder."""
    if isinstance(value, _COMPOSITES):
        return False
    if value is None or isinstance(value, (str, bytes, int, float, complex)):
        return True
    # Objects only qualify if their class declares its own __str__.
    return type(value).__str__ is not object.__str__


def _to_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def interpolate(message: str, context: Mapping[str, Any] | None = None) -> str:
    """
    Replace ``{key}`` tokens in message with values from context.

    Replacement is a single pass: substituted text is never rescanned.
    Tokens without a stringable context value are left as they are.
    """
    if not context:
        return message

    replacements = {}
    for key, value in context.items():
        if is_stringable(value):
            replacements[str(key)] = value
        else:
            logger.debug("Skipping unstringable context value for %r", key)

    def _substitute(match: re.Match) -> str:
        key = match.group(1)
        if key in replacements:
            return _to_text(replacements[key])
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, message)
