"""resultkit - fluent result algebra for chaining fallible operations.

Two result types, a library of short-circuiting combinators, and a
configurable error-string policy:

Quick Start:
    >>> from resultkit import Ok, Err, OkIf
    >>>
    >>> def load_user(user_id: int) -> ValueResult[dict]:
    ...     return OkIf(user_id > 0, {"id": user_id}, label="positive id")
    >>>
    >>> (
    ...     load_user(7)
    ...     .map(lambda u: u["id"])
    ...     .try_map(lambda i: 100 // i, "ratio")
    ...     .unwrap_or(0)
    ... )
    14

Valueless results:
    >>> Ok().try_(lambda: None).and_(Err("cache miss")).is_err()
    True

Error strings:
    >>> Err("disk full", "saving report").error_message()
    'Err[saving report] disk full'

Configuration (environment, or scoped in code):
    >>> from resultkit import use_formatter
    >>> with use_formatter(add_stack_trace=True):
    ...     detailed = Err("disk full")
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .errors import (
    ErrorFormatter,
    format_error,
    get_formatter,
    reset_formatter,
    set_formatter,
    use_formatter,
)

# Foundation
from .foundation import (
    ResultkitSettings,
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
)

# Result types
from .monads import (
    AnyResult,
    EmptyResult,
    Err,
    ErrOf,
    Ok,
    OkIf,
    OkIfWith,
    ValueResult,
    all_err,
    all_ok,
    and_all,
    any_err,
    any_ok,
    filter_map_unwrap,
    first_err,
    first_ok,
    into_res,
    last_err,
    last_ok,
    map_reduce,
    map_reduce_async,
    map_reduce_values,
    map_reduce_values_async,
    ok_if_not_none,
    reduce,
    reduce_async,
    reduce_values,
    reduce_values_async,
)

__all__ = [
    "__version__",
    # Result types
    "EmptyResult", "ValueResult", "AnyResult",
    "Ok", "Err", "ErrOf", "OkIf", "OkIfWith",
    "ok_if_not_none", "into_res",
    # Collections
    "reduce", "reduce_values", "map_reduce", "map_reduce_values",
    "reduce_async", "map_reduce_async", "reduce_values_async", "map_reduce_values_async",
    "and_all", "first_ok", "last_ok", "first_err", "last_err",
    "any_ok", "all_ok", "any_err", "all_err", "filter_map_unwrap",
    # Errors
    "ErrorFormatter", "format_error", "get_formatter", "set_formatter",
    "reset_formatter", "use_formatter",
    # Foundation
    "ResultkitSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
