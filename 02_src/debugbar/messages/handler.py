"""Bridge from the standard logging module into a MessagesCollector."""

import logging

from .collector import MessagesCollector

# Records from this package describe the collectors themselves.
INTERNAL_LOGGER = "debugbar"


class _ExcludeInternal(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        return not (name == INTERNAL_LOGGER or name.startswith(INTERNAL_LOGGER + "."))


class CollectorLogHandler(logging.Handler):
    """
    Logging handler that records each formatted LogRecord as a message.

    Records emitted by the debugbar package itself are dropped, so the
    handler can be attached to the root logger.
    """

    def __init__(self, collector: MessagesCollector, level: int = logging.NOTSET):
        super().__init__(level)
        self._collector = collector
        self.addFilter(_ExcludeInternal())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self.format(record)
            self._collector.add_message(text, record.levelname.lower())
        except Exception:
            self.handleError(record)
