"""Exceptions module."""

from .collector import ExceptionsCollector
from .source import read_surrounding_lines

__all__ = ["ExceptionsCollector", "read_surrounding_lines"]
