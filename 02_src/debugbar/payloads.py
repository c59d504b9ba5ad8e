"""Serializable collect() payloads consumed by the rendering layer."""

from pydantic import BaseModel

from .models import ExceptionRecord, MessageRecord


class MessagePayload(BaseModel):
    """Wire form of a MessageRecord."""

    message: str
    message_html: str | None = None
    is_string: bool
    label: str
    time: float
    collector: str | None = None

    @classmethod
    def from_record(cls, record: MessageRecord) -> "MessagePayload":
        return cls(
            message=record.text,
            message_html=record.rich_html,
            is_string=record.is_string,
            label=record.label,
            time=record.timestamp,
            collector=record.collector,
        )


class MessagesPayload(BaseModel):
    """Result of MessagesCollector.collect()."""

    count: int
    messages: list[MessagePayload]


class ExceptionPayload(BaseModel):
    """Wire form of an ExceptionRecord."""

    type: str
    message: str
    code: int
    file: str
    line: int
    stack_trace: str
    stack_trace_html: str | None = None
    surrounding_lines: list[str]
    xdebug_link: str | None = None

    @classmethod
    def from_record(cls, record: ExceptionRecord) -> "ExceptionPayload":
        return cls(
            type=record.type,
            message=record.message,
            code=record.code,
            file=record.file,
            line=record.line,
            stack_trace=record.stack_trace,
            stack_trace_html=record.stack_trace_html,
            surrounding_lines=list(record.surrounding_lines),
            xdebug_link=record.xdebug_link,
        )


class ExceptionsPayload(BaseModel):
    """Result of ExceptionsCollector.collect()."""

    count: int
    exceptions: list[ExceptionPayload]
