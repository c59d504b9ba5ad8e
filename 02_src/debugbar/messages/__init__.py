"""Messages module."""

from .collector import IMessagesAggregate, MessagesCollector
from .handler import CollectorLogHandler
from .interpolate import interpolate, is_stringable

__all__ = [
    "IMessagesAggregate",
    "MessagesCollector",
    "CollectorLogHandler",
    "interpolate",
    "is_stringable",
]
