"""Error string construction for Err variants.

Every failure stores one formatted string built from (message, when, exception):

    Err[{when}] {message}
    Err[{when} - {ExceptionType}] {exception message} {message}

When ``when`` is empty it is derived from the nearest caller frame that lives
outside the library's own modules. With ``add_stack_trace`` enabled the whole
filtered stack is appended, one frame per line.

The active formatter is context-scoped:

    >>> from resultkit import Err
    >>> from resultkit.errors import use_formatter
    >>> with use_formatter(add_stack_trace=True):
    ...     err = Err("disk full")
    >>> "# Stack Trace" in err.error_message()
    True

Note:
    set_formatter() replaces the process default and is meant to be called once
    at startup. It is not guarded against concurrent error construction; use
    use_formatter() for anything scoped.
"""

from __future__ import annotations

import sys
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from resultkit.foundation.config import get_settings

from .types import ErrorFormatFn

if TYPE_CHECKING:
    from types import FrameType

ERR_MARKER = "Err["
STACK_HEADER = "# Stack Trace"

# Library modules whose frames are never reported as the error context.
# A marker also covers its sub-modules.
INTERNAL_MODULES: frozenset[str] = frozenset({
    "resultkit.errors",
    "resultkit.foundation",
    "resultkit.monads",
})


# ═════════════════════════════════════════════════════════════════════════════
# Stack Capture
# ═════════════════════════════════════════════════════════════════════════════


def _is_internal(module: str, markers: frozenset[str]) -> bool:
    if module in markers:
        return True
    return any(module.startswith(f"{m}.") for m in markers)


def _frame_label(frame: FrameType) -> str:
    module = frame.f_globals.get("__name__", "?")
    return f"{module}.{frame.f_code.co_qualname}"


def external_frames(
    markers: frozenset[str] = INTERNAL_MODULES,
    limit: int = 64,
) -> list[str]:
    """Labels of the calling frames outside ``markers``, nearest first.

    Args:
        markers: Module names to skip (sub-modules included).
        limit: Max number of labels returned.
    """
    labels: list[str] = []
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and len(labels) < limit:
        if not _is_internal(frame.f_globals.get("__name__", ""), markers):
            labels.append(_frame_label(frame))
        frame = frame.f_back
    return labels


def caller_label(markers: frozenset[str] = INTERNAL_MODULES) -> str:
    """Label of the nearest frame outside ``markers`` ("" if none)."""
    frames = external_frames(markers, limit=1)
    return frames[0] if frames else ""


def stack_trace(markers: frozenset[str] = INTERNAL_MODULES, limit: int = 64) -> str:
    """Multi-line filtered stack trace, one ``* module.qualname`` per frame."""
    return "\n".join([STACK_HEADER, *(f"* {label}" for label in external_frames(markers, limit))])


# ═════════════════════════════════════════════════════════════════════════════
# Formatter
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ErrorFormatter:
    """Policy turning (message, when, exception) into the stored error string.

    Attributes:
        add_stack_trace: Append the filtered stack after the message.
        format_fn: Replaces the default policy entirely when set.
        internal_modules: Module markers skipped when deriving ``when``.
        max_frames: Cap on captured frames for the stack trace.
    """

    add_stack_trace: bool = False
    format_fn: ErrorFormatFn | None = None
    internal_modules: frozenset[str] = INTERNAL_MODULES
    max_frames: int = 64

    @classmethod
    def from_settings(cls) -> ErrorFormatter:
        """Build the formatter described by RESULTKIT_ERR_* settings."""
        s = get_settings().errors
        return cls(
            add_stack_trace=s.add_stack_trace,
            internal_modules=INTERNAL_MODULES | frozenset(s.internal_modules),
            max_frames=s.max_stack_frames,
        )

    def __call__(self, message: str, when: str = "", exception: BaseException | None = None) -> str:
        if self.format_fn is not None:
            return self.format_fn(message, when, exception)
        return self.default_format(message, when, exception)

    def default_format(self, message: str, when: str = "", exception: BaseException | None = None) -> str:
        """The built-in policy, usable from custom format functions."""
        # Already formatted: re-threaded failures keep their original text
        if not when and exception is None and message.startswith(ERR_MARKER):
            return message

        when = when or caller_label(self.internal_modules)
        if exception is None:
            text = f"{ERR_MARKER}{when}] {message}"
        else:
            text = f"{ERR_MARKER}{when} - {type(exception).__name__}] {exception}"
            if message:
                text = f"{text} {message}"

        if self.add_stack_trace:
            return f"{text}\n{stack_trace(self.internal_modules, self.max_frames)}"
        return text


# ═════════════════════════════════════════════════════════════════════════════
# Active Formatter
# ═════════════════════════════════════════════════════════════════════════════

_default: ErrorFormatter | None = None
_scoped: ContextVar[ErrorFormatter | None] = ContextVar("resultkit_formatter", default=None)


def get_formatter() -> ErrorFormatter:
    """Context-scoped formatter if any, else the process default."""
    global _default
    scoped = _scoped.get()
    if scoped is not None:
        return scoped
    if _default is None:
        _default = ErrorFormatter.from_settings()
    return _default


def set_formatter(formatter: ErrorFormatter) -> None:
    """Replace the process-wide default formatter (configure once at startup)."""
    global _default
    _default = formatter


def reset_formatter() -> None:
    """Drop the process default so the next use rebuilds it from settings."""
    global _default
    _default = None


def format_error(message: str = "", when: str = "", exception: BaseException | None = None) -> str:
    """Format an error string with the active formatter."""
    return get_formatter()(message, when, exception)


class FormatterScope:
    """Context manager activating a formatter for the current context."""

    __slots__ = ("_formatter", "_token")

    def __init__(self, formatter: ErrorFormatter) -> None:
        self._formatter = formatter
        self._token: Token[ErrorFormatter | None] | None = None

    def __enter__(self) -> ErrorFormatter:
        self._token = _scoped.set(self._formatter)
        return self._formatter

    def __exit__(self, *_: object) -> None:
        if self._token is not None:
            _scoped.reset(self._token)
            self._token = None


def use_formatter(formatter: ErrorFormatter | None = None, **overrides: object) -> FormatterScope:
    """Scope a formatter to a ``with`` block.

    Args:
        formatter: Formatter to activate; defaults to the active one.
        **overrides: Field overrides applied on top (e.g. add_stack_trace=True).

    Example:
        >>> with use_formatter(format_fn=lambda m, w, e: f"E: {m}"):
        ...     Err("boom").error_message()
        'E: boom'
    """
    base = formatter if formatter is not None else get_formatter()
    return FormatterScope(replace(base, **overrides) if overrides else base)  # type: ignore[arg-type]
