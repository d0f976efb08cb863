"""Error string construction: formatter policy, scoping and stack capture.

- ErrorFormatter: (message, when, exception) -> "Err[...] ..." policy
- get_formatter/set_formatter/use_formatter: process default and scoped override
- caller_label/stack_trace: filtered call-stack labels
"""

from .formatter import (
    ERR_MARKER,
    INTERNAL_MODULES,
    STACK_HEADER,
    ErrorFormatter,
    FormatterScope,
    caller_label,
    external_frames,
    format_error,
    get_formatter,
    reset_formatter,
    set_formatter,
    stack_trace,
    use_formatter,
)
from .types import ErrorFactory, ErrorFormatFn, call_argument, describe

__all__ = [
    # Formatter
    "ErrorFormatter", "FormatterScope", "format_error",
    "get_formatter", "set_formatter", "reset_formatter", "use_formatter",
    # Stack capture
    "caller_label", "external_frames", "stack_trace",
    "ERR_MARKER", "INTERNAL_MODULES", "STACK_HEADER",
    # Types
    "ErrorFactory", "ErrorFormatFn", "call_argument", "describe",
]
