"""EmptyResult: success/failure without a payload.

A success carries nothing; a failure carries one formatted error string.
Every combinator inspects the state and either passes the failure through
untouched or runs the next step:

    >>> from resultkit import Ok, Err, OkIf
    >>> Ok().ok_if(lambda: 2 > 1).map(lambda: "ready").unwrap()
    'ready'
    >>> Err("db down").map(lambda: "ready").is_err()
    True

Only throw_if_err() raises on purpose. The try_* combinators convert an
exception raised by the wrapped callable into a failure; the other combinators
let it propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

from resultkit.errors.formatter import format_error
from resultkit.errors.types import ErrorFactory, call_argument, describe
from resultkit.foundation.logging import get_logger, log_captured

if TYPE_CHECKING:
    from .value import ValueResult

U = TypeVar("U")

OK_IF_FAILED = "failed ok_if validation"

logger = get_logger("monads")


def _value_result() -> type[ValueResult]:  # type: ignore[type-arg]
    from .value import ValueResult
    return ValueResult


class EmptyResult:
    """Success (Ok) or failure (Err) flag without a payload.

    Immutable; all operations return self or a new result. ``bool(result)`` is
    ``result.is_ok()``.

    Examples:
        >>> Ok().and_(Err("b")).is_err()
        True
        >>> Err("a").or_(Ok()).is_ok()
        True
        >>> Ok().try_(lambda: 1 / 0, "divide").error_message()
        'Err[divide - ZeroDivisionError] division by zero'
    """

    __slots__ = ("_error",)

    def __init__(self, error: str | None = None) -> None:
        """Private constructor, ``EmptyResult()`` is Ok. Use Ok() or Err() instead."""
        self._error = error

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if result is Ok variant."""
        return self._error is None

    def is_err(self) -> bool:
        """Check if result is Err variant."""
        return self._error is not None

    def error_message(self) -> str | None:
        """The formatted error string, None when Ok."""
        return self._error

    def throw_if_err(self, factory: ErrorFactory | None = None) -> EmptyResult:
        """Return self when Ok, raise when Err.

        Raises:
            RuntimeError: On Err without ``factory``.
            BaseException: ``factory(error)`` on Err.
        """
        if self._error is None:
            return self
        logger.debug("throw_if_err on %s", self._error)
        raise factory(self._error) if factory is not None else RuntimeError(self._error)

    # ─────────────────────────────────────────────────────────────────
    # Validation
    # ─────────────────────────────────────────────────────────────────

    def ok_if(self, condition: bool | Callable[[], bool], label: str = "") -> EmptyResult:
        """Downgrade Ok to Err when the condition fails.

        ``condition`` is a bool or a zero-arg predicate, the latter evaluated
        only when Ok. The label defaults to the condition's source text.
        """
        if self._error is not None:
            return self
        if callable(condition):
            label = label or describe(condition)
            passed = condition()
        else:
            label = label or call_argument("ok_if")
            passed = condition
        return self if passed else EmptyResult(format_error(label, OK_IF_FAILED))

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching & Side Effects
    # ─────────────────────────────────────────────────────────────────

    def match(self, *, ok: U | Callable[[], U], err: Callable[[str], U]) -> U:
        """Exhaustive dispatch. ``ok`` is a value or a zero-arg callable.

        Example:
            >>> Err("bad request").match(ok="200", err=lambda e: "400")
            '400'
        """
        if self._error is None:
            return ok() if callable(ok) else ok  # type: ignore[return-value]
        return err(self._error)

    async def match_async(
        self,
        *,
        ok: Callable[[], Awaitable[U]],
        err: Callable[[str], Awaitable[U]],
    ) -> U:
        """Async dispatch awaiting the selected arm."""
        if self._error is None:
            return await ok()
        return await err(self._error)

    def match_do(self, *, ok: Callable[[], object], err: Callable[[str], object]) -> None:
        """Run the side effect for the current state."""
        if self._error is None:
            ok()
        else:
            err(self._error)

    def do(self, action: Callable[[], object]) -> EmptyResult:
        """Run action when Ok, return self."""
        if self._error is None:
            action()
        return self

    def do_if_err(self, action: Callable[[str], object]) -> EmptyResult:
        """Run action with the error string when Err, return self."""
        if self._error is not None:
            action(self._error)
        return self

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[], U]) -> ValueResult[U]:
        """Ok -> Ok(f()); Err -> same error as ValueResult.

        A None returned by ``f`` becomes an Err ("Null value").
        """
        vr = _value_result()
        return vr(f()) if self._error is None else vr.from_error(self._error)

    async def map_async(self, f: Callable[[], Awaitable[U]]) -> ValueResult[U]:
        """Async map awaiting ``f`` only when Ok."""
        vr = _value_result()
        return vr(await f()) if self._error is None else vr.from_error(self._error)

    def flat_map(self, f: Callable[[], EmptyResult | ValueResult[U]]) -> EmptyResult | ValueResult[U]:
        """Ok -> f() unchanged; Err -> self.

        Example:
            >>> Ok().flat_map(lambda: Ok(3)).unwrap()
            3
        """
        return f() if self._error is None else self

    async def flat_map_async(self, f: Callable[[], Awaitable[EmptyResult | ValueResult[U]]]) -> EmptyResult | ValueResult[U]:
        """Async flat_map awaiting ``f`` only when Ok."""
        return await f() if self._error is None else self

    # ─────────────────────────────────────────────────────────────────
    # Guarded Operations
    # ─────────────────────────────────────────────────────────────────

    def try_(self, action: Callable[[], object], label: str = "") -> EmptyResult:
        """Run action when Ok; an exception becomes Err labelled ``label``.

        The label defaults to a description of ``action``.
        """
        if self._error is not None:
            return self
        try:
            action()
        except Exception as e:
            return EmptyResult(_captured(label or describe(action), e))
        return self

    async def try_async(self, action: Callable[[], Awaitable[object]], label: str = "") -> EmptyResult:
        """Async try_; cancellation is not caught."""
        if self._error is not None:
            return self
        try:
            await action()
        except Exception as e:
            return EmptyResult(_captured(label or describe(action), e))
        return self

    def try_map(self, f: Callable[[], U], label: str = "") -> ValueResult[U]:
        """Guarded map: Ok(f()) or Err built from the raised exception."""
        vr = _value_result()
        if self._error is not None:
            return vr.from_error(self._error)
        try:
            return vr(f())
        except Exception as e:
            return vr.from_error(_captured(label or describe(f), e))

    async def try_map_async(self, f: Callable[[], Awaitable[U]], label: str = "") -> ValueResult[U]:
        """Async try_map."""
        vr = _value_result()
        if self._error is not None:
            return vr.from_error(self._error)
        try:
            return vr(await f())
        except Exception as e:
            return vr.from_error(_captured(label or describe(f), e))

    def try_flat_map(self, f: Callable[[], EmptyResult | ValueResult[U]], label: str = "") -> EmptyResult | ValueResult[U]:
        """Guarded flat_map: f() unchanged or Err built from the raised exception."""
        if self._error is not None:
            return self
        try:
            return f()
        except Exception as e:
            return EmptyResult(_captured(label or describe(f), e))

    async def try_flat_map_async(self, f: Callable[[], Awaitable[EmptyResult | ValueResult[U]]], label: str = "") -> EmptyResult | ValueResult[U]:
        """Async try_flat_map."""
        if self._error is not None:
            return self
        try:
            return await f()
        except Exception as e:
            return EmptyResult(_captured(label or describe(f), e))

    # ─────────────────────────────────────────────────────────────────
    # Logical Combinators
    # ─────────────────────────────────────────────────────────────────

    def and_(
        self,
        other: EmptyResult | ValueResult[Any] | Callable[[], EmptyResult | ValueResult[Any]],
    ) -> EmptyResult:
        """Ok only if both are Ok. Both Err joins the two messages line by line.

        A ValueResult counts by its state only, its value is dropped. A
        zero-arg producer is only called when self is Ok.
        """
        if callable(other):
            if self._error is not None:
                return self
            other = other()
        if isinstance(other, _value_result()):
            other = other.without_val()
        if not isinstance(other, EmptyResult):
            raise TypeError(f"and_() expects a result or a producer of one, got {type(other).__name__}")

        if self._error is None:
            return other
        if other._error is None:
            return self
        return EmptyResult(f"{self._error}\n{other._error}")

    def or_(self, other: EmptyResult | Callable[[], EmptyResult]) -> EmptyResult:
        """Self if Ok, else other (a producer is only called on Err)."""
        if self._error is None:
            return self
        return other() if callable(other) else other

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_err_of(self) -> ValueResult[U]:
        """Err as ValueResult in every case; Ok yields a synthesized error."""
        vr = _value_result()
        if self._error is None:
            return vr.from_error(format_error(f"to_err_of is called on '{self}'."))
        return vr.from_error(self._error)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._error is None

    def __repr__(self) -> str:
        return "Ok()" if self._error is None else f"Err({self._error!r})"

    def __str__(self) -> str:
        return "Ok" if self._error is None else self._error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmptyResult):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((EmptyResult, self._error))


def _captured(label: str, exc: Exception) -> str:
    """Error string for an exception caught by a guarded combinator."""
    log_captured(logger, label, exc)
    return format_error("", label, exc)
