"""Result types and combinators.

- EmptyResult: Ok / Err without payload
- ValueResult: Ok(value) / Err, never Ok(None)
- Constructors: Ok, Err, ErrOf, OkIf, OkIfWith
- Option bridging: ok_if_not_none, into_res, ValueResult.into_opt
- Collections: reduce, map_reduce, and_all, first/last scans

Example:
    >>> from resultkit.monads import Ok, ErrOf, reduce
    >>>
    >>> def divide(a: int, b: int) -> ValueResult[float]:
    ...     return Ok(b).ok_if(lambda d: d != 0, "division by zero").map(lambda d: a / d)
    >>>
    >>> divide(10, 2).map(lambda x: x * 2).unwrap()
    10.0
    >>> reduce([divide(1, 1), divide(1, 0)]).is_err()
    True
"""

from .collections import (
    AnyResult,
    all_err,
    all_ok,
    and_all,
    any_err,
    any_ok,
    filter_map_unwrap,
    first_err,
    first_ok,
    last_err,
    last_ok,
    map_reduce,
    map_reduce_async,
    map_reduce_values,
    map_reduce_values_async,
    reduce,
    reduce_async,
    reduce_values,
    reduce_values_async,
)
from .constructors import Err, ErrOf, Ok, OkIf, OkIfWith, into_res, ok_if_not_none
from .empty import EmptyResult
from .value import ValueResult

__all__ = [
    # Core types
    "EmptyResult",
    "ValueResult",
    "AnyResult",
    # Constructors
    "Ok",
    "Err",
    "ErrOf",
    "OkIf",
    "OkIfWith",
    # Option bridging
    "ok_if_not_none",
    "into_res",
    # Collection operations
    "reduce",
    "reduce_values",
    "map_reduce",
    "reduce_async",
    "map_reduce_async",
    "map_reduce_values",
    "reduce_values_async",
    "map_reduce_values_async",
    "and_all",
    "first_ok",
    "last_ok",
    "first_err",
    "last_err",
    "any_ok",
    "all_ok",
    "any_err",
    "all_err",
    "filter_map_unwrap",
]
