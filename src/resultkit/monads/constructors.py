"""Constructor functions and Option bridging.

The Option side is plain ``T | None``: a success never holds None, so
``into_opt()`` and ``into_res()`` round-trip without ambiguity.
"""

from __future__ import annotations

from typing import Callable, TypeVar, overload

from resultkit.errors.formatter import format_error
from resultkit.errors.types import call_argument

from .empty import OK_IF_FAILED, EmptyResult
from .value import NULL_VALUE, ValueResult

T = TypeVar("T")

_MISSING = object()

# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


@overload
def Ok() -> EmptyResult: ...
@overload
def Ok(value: T) -> ValueResult[T]: ...


def Ok(value: object = _MISSING) -> EmptyResult | ValueResult:  # type: ignore[type-arg]  # noqa: N802
    """Construct a success.

    ``Ok()`` is a valueless EmptyResult; ``Ok(value)`` a ValueResult. Passing
    None yields an Err ("Null value") rather than a success holding None.

    Example:
        >>> Ok(3).unwrap()
        3
        >>> Ok(None).is_err()
        True
    """
    return EmptyResult() if value is _MISSING else ValueResult(value)


def Err(  # noqa: N802
    message: str = "",
    when: str = "",
    exception: BaseException | None = None,
) -> EmptyResult:
    """Construct a valueless failure.

    Shapes: ``Err(msg)``, ``Err(msg, when)``, ``Err(when=..., exception=e)``,
    ``Err(msg, when, e)``. An empty ``when`` is filled with the caller's name.

    Example:
        >>> Err("sth went wrong", "saving user").error_message()
        'Err[saving user] sth went wrong'
    """
    return EmptyResult(format_error(message, when, exception))


def ErrOf(  # noqa: N802
    message: str = "",
    when: str = "",
    exception: BaseException | None = None,
) -> ValueResult:  # type: ignore[type-arg]
    """Construct a failure of a value-bearing result; same shapes as Err()."""
    return ValueResult.from_error(format_error(message, when, exception))


@overload
def OkIf(condition: bool, *, label: str = "") -> EmptyResult: ...
@overload
def OkIf(condition: bool, value: T, *, label: str = "") -> ValueResult[T]: ...


def OkIf(  # noqa: N802
    condition: bool,
    value: object = _MISSING,
    *,
    label: str = "",
) -> EmptyResult | ValueResult:  # type: ignore[type-arg]
    """Ok (or Ok(value)) when ``condition`` holds, else Err labelled ``label``.

    The label defaults to the source text of the condition argument.

    Example:
        >>> OkIf(len("abc") > 5, label="too short").is_err()
        True
        >>> OkIf(True, 7).unwrap()
        7
    """
    if condition:
        return EmptyResult() if value is _MISSING else ValueResult(value)
    error = format_error(label or call_argument("OkIf"), OK_IF_FAILED)
    return EmptyResult(error) if value is _MISSING else ValueResult.from_error(error)


def OkIfWith(  # noqa: N802
    condition: bool,
    get_value: Callable[[], T],
    *,
    label: str = "",
) -> ValueResult[T]:
    """Lazy OkIf: ``get_value`` is only called when ``condition`` holds."""
    if condition:
        return ValueResult(get_value())
    return ValueResult.from_error(format_error(label or call_argument("OkIfWith"), OK_IF_FAILED))


# ═════════════════════════════════════════════════════════════════════════════
# Option Bridging
# ═════════════════════════════════════════════════════════════════════════════


def ok_if_not_none(value: T | None) -> ValueResult[T]:
    """Ok(value), or Err ("Null value") when value is None."""
    if value is None:
        return ValueResult.from_error(format_error(NULL_VALUE))
    return ValueResult(value)


def into_res(option: T | None, message: str | None = None) -> ValueResult[T]:
    """Convert an optional value into a result.

    Args:
        option: The value, None meaning absent.
        message: Error message when absent (a generic one by default).

    Example:
        >>> into_res(None, "no user").is_err()
        True
        >>> into_res(4).unwrap()
        4
    """
    if option is None:
        return ValueResult.from_error(format_error(message or "into_res is called on None."))
    return ValueResult(option)
