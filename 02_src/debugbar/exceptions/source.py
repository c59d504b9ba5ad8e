"""Source context extraction for captured exceptions."""

from ..config import LEADING_LINES, SURROUNDING_LINES
from ..logging_config import get_logger

logger = get_logger(__name__)


def unreadable_file_line(file: str) -> str:
    return f"Cannot open the file ({file}) in which the exception occurred"


def read_surrounding_lines(file: str, line: int) -> list[str]:
    """
    Lines around a 1-based line number, with their line endings.

    Starts LEADING_LINES before line (clipped at the top of the file) and
    returns at most SURROUNDING_LINES lines. An unreadable file yields a
    single explanatory line instead.
    """
    if not file:
        return [unreadable_file_line(file)]

    try:
        with open(file, encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        logger.warning("Cannot read source file %s: %s", file, e)
        return [unreadable_file_line(file)]

    start = max(0, line - LEADING_LINES - 1)
    return lines[start:start + SURROUNDING_LINES]
