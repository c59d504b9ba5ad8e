"""Debug toolbar data collectors."""

from .config import Settings, load_settings
from .errors import ConfigurationError, DebugBarError
from .exceptions import ExceptionsCollector
from .factory import create_exceptions_collector, create_messages_collector
from .formatting import (
    HtmlValueRenderer,
    IDebugLinkBuilder,
    IRichValueRenderer,
    IValueFormatter,
    ReprFormatter,
    TemplateLinkBuilder,
)
from .messages import CollectorLogHandler, IMessagesAggregate, MessagesCollector
from .models import Asset, ExceptionRecord, MessageRecord, TraceFrame
from .payloads import ExceptionsPayload, MessagesPayload

__all__ = [
    # Collectors
    "MessagesCollector",
    "IMessagesAggregate",
    "CollectorLogHandler",
    "ExceptionsCollector",
    "create_messages_collector",
    "create_exceptions_collector",
    # Models
    "MessageRecord",
    "ExceptionRecord",
    "TraceFrame",
    "Asset",
    "MessagesPayload",
    "ExceptionsPayload",
    # Collaborators
    "IValueFormatter",
    "ReprFormatter",
    "IRichValueRenderer",
    "HtmlValueRenderer",
    "IDebugLinkBuilder",
    "TemplateLinkBuilder",
    # Config and errors
    "Settings",
    "load_settings",
    "DebugBarError",
    "ConfigurationError",
]
