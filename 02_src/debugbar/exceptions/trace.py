"""Helpers for pulling location, code and frames out of Python exceptions."""

import inspect
import traceback

from ..models import TraceFrame


def type_name(error: BaseException) -> str:
    """Qualified class name; builtins stay unprefixed."""
    cls = type(error)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def error_code(error: BaseException) -> int:
    """Integer code carried by the error, 0 if none."""
    if isinstance(error, SystemExit):
        code = error.code
    elif isinstance(error, OSError):
        code = error.errno
    else:
        code = getattr(error, "code", None)

    if isinstance(code, int) and not isinstance(code, bool):
        return code
    return 0


def error_location(error: BaseException) -> tuple[str, int]:
    """File and line where the error was raised, ("", 0) if it never was."""
    if isinstance(error, SyntaxError) and error.filename:
        return error.filename, error.lineno or 0

    summary = traceback.extract_tb(error.__traceback__)
    if not summary:
        return "", 0
    last = summary[-1]
    return last.filename, last.lineno or 0


def trace_frames(error: BaseException) -> list[TraceFrame]:
    """Structured frames, outermost first, with positional argument values."""
    frames = []
    for frame, lineno in traceback.walk_tb(error.__traceback__):
        arginfo = inspect.getargvalues(frame)
        args = {name: arginfo.locals[name] for name in arginfo.args if name in arginfo.locals}
        frames.append(
            TraceFrame(
                file=frame.f_code.co_filename,
                line=lineno,
                function=frame.f_code.co_name,
                args=args,
            )
        )
    return frames


def error_cause(error: BaseException) -> BaseException | None:
    """The exception this one was raised from, explicitly or implicitly."""
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__
