"""ValueResult: success carrying a value, or failure carrying an error string.

Tagged variant: ``_is_ok`` selects whether the single slot holds the payload or
the formatted error. A success never holds None: building one from None
yields an Err ("Null value") instead, so callers never check "Ok but null".

    >>> from resultkit import Ok, ErrOf
    >>> Ok(5).map(lambda x: x * 2).unwrap()
    10
    >>> Ok({"id": 7}).map(lambda d: d.get("name")).is_err()
    True
    >>> ErrOf("missing").unwrap_or(0)
    0

Railway-oriented composition:
    >>> def parse(s: str) -> ValueResult[int]:
    ...     return Ok(s).try_map(int, "parse")
    >>> Ok("42").flat_map(parse).ok_if(lambda n: n > 0).unwrap()
    42

unwrap() and throw_if_err() are the only operations raising on purpose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Generic, TypeVar, cast

from resultkit.errors.formatter import format_error
from resultkit.errors.types import ErrorFactory, describe
from resultkit.foundation.logging import get_logger

from .empty import OK_IF_FAILED, EmptyResult, _captured

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type

NULL_VALUE = "Null value"

# Discriminants
_OK = True
_ERR = False

logger = get_logger("monads")


class ValueResult(Generic[T]):
    """Success (Ok) with a non-None value, or failure (Err) with an error string.

    Notes:
        - Uses __slots__, immutable (all operations return self or a new result)
        - Equality: Ok == Ok by value, Err == Err by error string, never across
        - Iterating yields the value zero or one times
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | str | None, is_ok: bool = _OK) -> None:
        """Private constructor. Use Ok(value) or ErrOf() instead."""
        if is_ok and value is None:
            value, is_ok = format_error(NULL_VALUE), _ERR
        self._value = value
        self._is_ok = is_ok

    @classmethod
    def from_error(cls, error: str) -> ValueResult[T]:
        """Err carrying an already formatted error string."""
        return cls(error, _ERR)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if result is Err variant."""
        return not self._is_ok

    def error_message(self) -> str | None:
        """The formatted error string, None when Ok."""
        return None if self._is_ok else cast(str, self._value)

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        This is the single extraction that can fail; prefer unwrap_or or match.

        Raises:
            RuntimeError: If result is Err
        """
        if self._is_ok:
            return cast(T, self._value)
        logger.debug("unwrap on %s", self._value)
        raise RuntimeError(f"Cannot unwrap Err.\n{self._value}")

    def unwrap_or(self, fallback: T) -> T:
        """Extract Ok value or return fallback."""
        return cast(T, self._value) if self._is_ok else fallback

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Extract Ok value or compute the fallback lazily."""
        return cast(T, self._value) if self._is_ok else f()

    async def unwrap_or_else_async(self, f: Callable[[], Awaitable[T]]) -> T:
        """Extract Ok value or await the lazily computed fallback."""
        return cast(T, self._value) if self._is_ok else await f()

    def into_opt(self) -> T | None:
        """Option view: the value if Ok, None if Err (the error is dropped)."""
        return cast(T, self._value) if self._is_ok else None

    def throw_if_err(self, factory: ErrorFactory | None = None) -> ValueResult[T]:
        """Return self when Ok, raise ``factory(error)`` or RuntimeError when Err."""
        if self._is_ok:
            return self
        error = cast(str, self._value)
        logger.debug("throw_if_err on %s", error)
        raise factory(error) if factory is not None else RuntimeError(error)

    # ─────────────────────────────────────────────────────────────────
    # Validation
    # ─────────────────────────────────────────────────────────────────

    def ok_if(self, predicate: Callable[[T], bool], label: str = "") -> ValueResult[T]:
        """Keep Ok only if the value satisfies ``predicate``.

        Example:
            >>> Ok(-3).ok_if(lambda x: x >= 0, "non-negative").is_err()
            True
        """
        if not self._is_ok or predicate(cast(T, self._value)):
            return self
        return ValueResult.from_error(format_error(label or describe(predicate), OK_IF_FAILED))

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching & Side Effects
    # ─────────────────────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[str], U]) -> U:
        """Exhaustive case analysis.

        Example:
            >>> Ok(42).match(ok=lambda x: f"got {x}", err=lambda e: "failed")
            'got 42'
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(str, self._value))

    async def match_async(
        self,
        *,
        ok: Callable[[T], Awaitable[U]],
        err: Callable[[str], Awaitable[U]],
    ) -> U:
        """Async dispatch awaiting the selected arm."""
        if self._is_ok:
            return await ok(cast(T, self._value))
        return await err(cast(str, self._value))

    def match_do(self, *, ok: Callable[[T], object], err: Callable[[str], object]) -> None:
        """Run the side effect for the current state."""
        if self._is_ok:
            ok(cast(T, self._value))
        else:
            err(cast(str, self._value))

    def do(self, action: Callable[[T], object]) -> ValueResult[T]:
        """Call action with the Ok value for side effects, return self."""
        if self._is_ok:
            action(cast(T, self._value))
        return self

    def do_if_err(self, action: Callable[[str], object]) -> ValueResult[T]:
        """Call action with the error string when Err, return self."""
        if not self._is_ok:
            action(cast(str, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> ValueResult[U]:
        """Apply f to the Ok value. A None result becomes Err ("Null value").

        Type signature: ValueResult[T] -> (T -> U) -> ValueResult[U]
        """
        if self._is_ok:
            return ValueResult(f(cast(T, self._value)))
        return cast(ValueResult[U], self)

    async def map_async(self, f: Callable[[T], Awaitable[U]]) -> ValueResult[U]:
        """Async map awaiting ``f`` only when Ok."""
        if self._is_ok:
            return ValueResult(await f(cast(T, self._value)))
        return cast(ValueResult[U], self)

    def starmap(self, f: Callable[..., U]) -> ValueResult[U]:
        """Map over a tuple payload, spreading it as positional arguments.

        Example:
            >>> Ok(2).and_(Ok(3)).starmap(lambda a, b: a * b).unwrap()
            6
        """
        return self.map(lambda args: f(*args))  # type: ignore[arg-type]

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], ValueResult[U] | EmptyResult]) -> ValueResult[U] | EmptyResult:
        """Monadic bind: f(value) unchanged when Ok, Err passed through.

        Type signature: ValueResult[T] -> (T -> ValueResult[U]) -> ValueResult[U]
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(ValueResult[U], self)

    async def flat_map_async(
        self,
        f: Callable[[T], Awaitable[ValueResult[U] | EmptyResult]],
    ) -> ValueResult[U] | EmptyResult:
        """Async flat_map awaiting ``f`` only when Ok."""
        if self._is_ok:
            return await f(cast(T, self._value))
        return cast(ValueResult[U], self)

    def flat_map_back(self, f: Callable[[T], EmptyResult]) -> ValueResult[T]:
        """Run a validation/side-effect step, keeping the original Ok value.

        Example:
            >>> Ok(5).flat_map_back(lambda x: Ok()).unwrap()
            5
        """
        if not self._is_ok:
            return self
        step = f(cast(T, self._value))
        return self if step.is_ok() else ValueResult.from_error(cast(str, step.error_message()))

    async def flat_map_back_async(self, f: Callable[[T], Awaitable[EmptyResult]]) -> ValueResult[T]:
        """Async flat_map_back."""
        if not self._is_ok:
            return self
        step = await f(cast(T, self._value))
        return self if step.is_ok() else ValueResult.from_error(cast(str, step.error_message()))

    def flatten(self) -> ValueResult[T] | EmptyResult:
        """Unwrap one level of nesting: Ok(result) -> result, otherwise self."""
        if self._is_ok and isinstance(self._value, (ValueResult, EmptyResult)):
            return self._value
        return self

    # ─────────────────────────────────────────────────────────────────
    # Guarded Operations
    # ─────────────────────────────────────────────────────────────────

    def try_(self, action: Callable[[T], object], label: str = "") -> EmptyResult:
        """Run action with the value; Ok() if it returns, Err if it raises."""
        if not self._is_ok:
            return self.without_val()
        try:
            action(cast(T, self._value))
        except Exception as e:
            return EmptyResult(_captured(label or describe(action), e))
        return EmptyResult()

    async def try_async(self, action: Callable[[T], Awaitable[object]], label: str = "") -> EmptyResult:
        """Async try_; cancellation is not caught."""
        if not self._is_ok:
            return self.without_val()
        try:
            await action(cast(T, self._value))
        except Exception as e:
            return EmptyResult(_captured(label or describe(action), e))
        return EmptyResult()

    def try_map(self, f: Callable[[T], U], label: str = "") -> ValueResult[U]:
        """Guarded map: Ok(f(value)) or Err built from the raised exception.

        Example:
            >>> Ok("x").try_map(int, "parse").error_message()
            "Err[parse - ValueError] invalid literal for int() with base 10: 'x'"
        """
        if not self._is_ok:
            return cast(ValueResult[U], self)
        try:
            return ValueResult(f(cast(T, self._value)))
        except Exception as e:
            return ValueResult.from_error(_captured(label or describe(f), e))

    async def try_map_async(self, f: Callable[[T], Awaitable[U]], label: str = "") -> ValueResult[U]:
        """Async try_map."""
        if not self._is_ok:
            return cast(ValueResult[U], self)
        try:
            return ValueResult(await f(cast(T, self._value)))
        except Exception as e:
            return ValueResult.from_error(_captured(label or describe(f), e))

    def try_flat_map(
        self,
        f: Callable[[T], ValueResult[U] | EmptyResult],
        label: str = "",
    ) -> ValueResult[U] | EmptyResult:
        """Guarded flat_map: f(value) unchanged or Err built from the raised exception."""
        if not self._is_ok:
            return cast(ValueResult[U], self)
        try:
            return f(cast(T, self._value))
        except Exception as e:
            return ValueResult.from_error(_captured(label or describe(f), e))

    async def try_flat_map_async(
        self,
        f: Callable[[T], Awaitable[ValueResult[U] | EmptyResult]],
        label: str = "",
    ) -> ValueResult[U] | EmptyResult:
        """Async try_flat_map."""
        if not self._is_ok:
            return cast(ValueResult[U], self)
        try:
            return await f(cast(T, self._value))
        except Exception as e:
            return ValueResult.from_error(_captured(label or describe(f), e))

    # ─────────────────────────────────────────────────────────────────
    # Logical Combinators
    # ─────────────────────────────────────────────────────────────────

    def and_(self, other: object) -> ValueResult:  # type: ignore[type-arg]
        """Combine with another result; Err wins, both Err join line by line.

        - EmptyResult: Ok keeps this value.
        - ValueResult[U]: Ok yields the pair (this value, other value).
        - Zero-arg producer of either: only called when self is Ok.
        """
        if callable(other):
            if not self._is_ok:
                return self
            other = other()
        if not isinstance(other, (ValueResult, EmptyResult)):
            raise TypeError(f"and_() expects a result or a producer of one, got {type(other).__name__}")

        other_err = other.error_message()
        if self._is_ok:
            if other_err is not None:
                return ValueResult.from_error(other_err)
            if isinstance(other, ValueResult):
                return ValueResult((self._value, other._value))
            return self
        if other_err is None:
            return self
        return ValueResult.from_error(f"{self._value}\n{other_err}")

    def or_(self, other: ValueResult[T] | Callable[[], ValueResult[T]]) -> ValueResult[T]:
        """Self if Ok, else other (a producer is only called on Err)."""
        if self._is_ok:
            return self
        return other() if callable(other) else other

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def without_val(self) -> EmptyResult:
        """Drop the value: Ok() or the same error as EmptyResult."""
        return EmptyResult() if self._is_ok else EmptyResult(cast(str, self._value))

    def to_err_of(self) -> ValueResult[U]:
        """Err of any payload type; Ok yields a synthesized error."""
        if self._is_ok:
            return ValueResult.from_error(format_error(f"to_err_of is called on '{self}'."))
        return cast(ValueResult[U], self)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Enable truthiness checking (True if Ok)."""
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    def __str__(self) -> str:
        return f"Ok({self._value})" if self._is_ok else cast(str, self._value)

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, ValueResult):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Ok value (yields 0 or 1 element)."""
        if self._is_ok:
            yield cast(T, self._value)
