"""ExceptionsCollector implementation."""

import traceback

from ..config import DEFAULT_EXCEPTIONS_NAME, DEFAULT_MAX_CHAIN_DEPTH
from ..errors import ConfigurationError
from ..formatting import IDebugLinkBuilder, IRichValueRenderer
from ..logging_config import get_logger
from ..models import ExceptionRecord, TraceFrame
from ..payloads import ExceptionPayload, ExceptionsPayload
from .source import read_surrounding_lines
from .trace import error_cause, error_code, error_location, trace_frames, type_name

logger = get_logger(__name__)


class ExceptionsCollector:
    """
    Collects exceptions, normalizing each one as soon as it is added.

    Source lines and trace text are captured at add time, so later edits to
    the file or the exception object do not change the record.
    """

    def __init__(
        self,
        renderer: IRichValueRenderer | None = None,
        link_builder: IDebugLinkBuilder | None = None,
        chain_exceptions: bool = False,
        max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
        name: str = DEFAULT_EXCEPTIONS_NAME,
    ):
        self._renderer = renderer
        self._link_builder = link_builder
        self._chain_exceptions = chain_exceptions
        self._max_chain_depth = max_chain_depth
        self._name = name
        self._exceptions: list[ExceptionRecord] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def chain_exceptions(self) -> bool:
        return self._chain_exceptions

    @property
    def rich_rendering(self) -> bool:
        return self._renderer is not None

    def add_throwable(
        self, error: BaseException, rich_trace: bool | None = None
    ) -> ExceptionRecord:
        """
        Capture an exception.

        With chain_exceptions on, its causes are captured right after it,
        outermost first. A cause seen before in the same chain stops the
        walk, as does reaching max_chain_depth.

        Args:
            error: The exception to capture.
            rich_trace: Render the structured trace as HTML. Defaults to
                whether a renderer was configured.

        Returns:
            The record for ``error`` itself.
        """
        if rich_trace is None:
            rich_trace = self.rich_rendering
        elif rich_trace and self._renderer is None:
            raise ConfigurationError("rich_trace requested but no renderer configured")

        record = self.format_throwable_data(error, rich_trace)
        self._exceptions.append(record)
        logger.debug("Captured %s at %s:%d", record.type, record.file, record.line)

        if self._chain_exceptions:
            self._add_causes(error, rich_trace)
        return record

    def _add_causes(self, error: BaseException, rich_trace: bool) -> None:
        seen = {id(error)}
        cause = error_cause(error)
        depth = 1
        while cause is not None:
            if id(cause) in seen:
                logger.warning("Exception chain of %s is cyclic, stopping", type_name(error))
                return
            if depth > self._max_chain_depth:
                logger.warning(
                    "Exception chain of %s exceeds %d causes, stopping",
                    type_name(error),
                    self._max_chain_depth,
                )
                return
            seen.add(id(cause))
            self._exceptions.append(self.format_throwable_data(cause, rich_trace))
            cause = error_cause(cause)
            depth += 1

    def add_exception(self, error: BaseException) -> ExceptionRecord:
        """Alias of add_throwable, kept for older callers."""
        return self.add_throwable(error)

    def get_exceptions(self) -> list[ExceptionRecord]:
        """Captured exceptions in capture order."""
        return list(self._exceptions)

    # Formatting seams, overridable by subclasses

    def format_trace(self, frames: list[TraceFrame]) -> list[TraceFrame]:
        """Hook to scrub frames before rich rendering. Passthrough by default."""
        return frames

    def format_trace_as_string(self, error: BaseException) -> str:
        return "".join(traceback.format_tb(error.__traceback__))

    def format_throwable_data(
        self, error: BaseException, rich_trace: bool = False
    ) -> ExceptionRecord:
        """Build the ExceptionRecord for a single exception."""
        file, line = error_location(error)
        surrounding_lines = read_surrounding_lines(file, line)

        stack_trace_html = None
        if rich_trace:
            if self._renderer is None:
                raise ConfigurationError("rich_trace requested but no renderer configured")
            stack_trace_html = self._renderer.render(self.format_trace(trace_frames(error)))

        xdebug_link = None
        if self._link_builder is not None:
            xdebug_link = self._link_builder.build(file, line)

        return ExceptionRecord(
            type=type_name(error),
            message=str(error),
            code=error_code(error),
            file=file,
            line=line,
            stack_trace=self.format_trace_as_string(error),
            surrounding_lines=tuple(surrounding_lines),
            stack_trace_html=stack_trace_html,
            xdebug_link=xdebug_link,
        )

    def format_exception_data(self, error: BaseException) -> ExceptionRecord:
        """Alias of format_throwable_data, kept for older callers."""
        return self.format_throwable_data(error)

    # Rendering layer interface

    def collect(self) -> ExceptionsPayload:
        """Snapshot of all captured exceptions for the rendering layer."""
        return ExceptionsPayload(
            count=len(self._exceptions),
            exceptions=[ExceptionPayload.from_record(record) for record in self._exceptions],
        )
