"""Core data models for debugbar."""

from .assets import Asset
from .exceptions import ExceptionRecord, TraceFrame
from .messages import (
    LogPayload,
    MessageRecord,
    StringMessage,
    StructuredMessage,
    to_payload,
)

__all__ = [
    # Messages
    "MessageRecord",
    "LogPayload",
    "StringMessage",
    "StructuredMessage",
    "to_payload",
    # Exceptions
    "ExceptionRecord",
    "TraceFrame",
    # Assets
    "Asset",
]
