"""MessagesCollector implementation."""

import dataclasses
import time
from collections.abc import Mapping
from typing import Any, Callable, Protocol

from ..config import DEFAULT_LABEL, DEFAULT_MESSAGES_NAME
from ..errors import ConfigurationError
from ..formatting import IRichValueRenderer, IValueFormatter
from ..logging_config import get_logger
from ..models import Asset, MessageRecord, StringMessage, StructuredMessage, to_payload
from ..payloads import MessagePayload, MessagesPayload
from .interpolate import interpolate

logger = get_logger(__name__)

Clock = Callable[[], float]


class IMessagesAggregate(Protocol):
    """Anything whose messages can be merged into another collector."""

    @property
    def name(self) -> str:
        """Name stamped on records read through aggregation."""
        ...

    def get_messages(self) -> list[MessageRecord]:
        """Current messages, sorted by timestamp."""
        ...


class MessagesCollector:
    """
    Collects log messages and arbitrary values during one execution.

    Rich rendering is enabled by passing a renderer at construction and cannot
    be toggled afterwards, so all records of a collector share one shape.
    Other collectors registered through aggregate() are read live on every
    get_messages() call.
    """

    def __init__(
        self,
        formatter: IValueFormatter,
        name: str = DEFAULT_MESSAGES_NAME,
        renderer: IRichValueRenderer | None = None,
        clock: Clock = time.time,
    ):
        self._name = name
        self._formatter = formatter
        self._renderer = renderer
        self._clock = clock
        self._messages: list[MessageRecord] = []
        self._aggregates: list[IMessagesAggregate] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def rich_rendering(self) -> bool:
        """Whether non-string messages also get an HTML rendering."""
        return self._renderer is not None

    def add_message(self, message: Any, label: str = DEFAULT_LABEL) -> MessageRecord:
        """
        Add a message.

        Strings are stored as they are. Anything else is formatted through the
        injected formatter (and renderer, if any); their errors propagate.
        """
        payload = to_payload(message)
        if isinstance(payload, StringMessage):
            record = MessageRecord(
                text=payload.text,
                label=label,
                timestamp=self._clock(),
            )
        else:
            record = self._structured_record(payload, label)

        self._messages.append(record)
        return record

    def _structured_record(self, payload: StructuredMessage, label: str) -> MessageRecord:
        # Text is always produced; it is what the toolbar searches on.
        text = self._formatter.format(payload.value)
        rich_html = None
        if self._renderer is not None:
            rich_html = self._renderer.render(payload.value)

        return MessageRecord(
            text=text,
            label=label,
            timestamp=self._clock(),
            is_string=False,
            rich_html=rich_html,
        )

    def aggregate(self, collector: IMessagesAggregate) -> None:
        """
        Merge another collector's messages into this one's reads.

        Registering the same collector twice yields its messages twice.
        Aggregation must stay acyclic: collectors that aggregate each other
        recurse without bound on get_messages().
        """
        if collector is self:
            raise ConfigurationError(f"Collector {self._name!r} cannot aggregate itself")

        self._aggregates.append(collector)
        logger.debug(
            "Collector %r aggregates %r",
            self._name,
            collector.name,
            extra={"context": {"collector": self._name, "peer": collector.name}},
        )

    def get_messages(self) -> list[MessageRecord]:
        """Own and aggregated messages, stably sorted by timestamp."""
        messages = list(self._messages)
        for collector in self._aggregates:
            messages.extend(
                dataclasses.replace(record, collector=collector.name)
                for record in collector.get_messages()
            )

        return sorted(messages, key=lambda record: record.timestamp)

    def clear(self) -> None:
        """Delete own messages. Aggregated collectors are untouched."""
        self._messages.clear()

    # Logger interface

    def log(
        self,
        level: str,
        message: Any,
        context: Mapping[str, Any] | None = None,
    ) -> MessageRecord:
        """Add a message under level, interpolating {key} placeholders for strings."""
        if isinstance(message, str):
            message = interpolate(message, context)
        return self.add_message(message, level)

    def emergency(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("emergency", message, context)

    def alert(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("alert", message, context)

    def critical(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("critical", message, context)

    def error(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("error", message, context)

    def warning(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("warning", message, context)

    def notice(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("notice", message, context)

    def info(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("info", message, context)

    def debug(self, message: Any, context: Mapping[str, Any] | None = None) -> MessageRecord:
        return self.log("debug", message, context)

    # Rendering layer interface

    def collect(self) -> MessagesPayload:
        """Snapshot of all messages for the rendering layer."""
        messages = self.get_messages()
        return MessagesPayload(
            count=len(messages),
            messages=[MessagePayload.from_record(record) for record in messages],
        )

    def get_assets(self) -> list[Asset]:
        """Assets needed to display rich messages."""
        if self._renderer is None:
            return []
        return self._renderer.get_assets()
