"""Collection operations over results.

- reduce / map_reduce: fail fast on the first Err, in input order
- reduce_values / map_reduce_values (and async forms): always Ok(list), Ok([]) when empty
- reduce_async / map_reduce_async: await everything concurrently, then reduce in input order
- and_all: zip 2..8 results (or lazy producers) into a tuple
- first_ok / last_ok / first_err / last_err: linear scans returning ``T | None``
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterable, TypeVar, Union, cast

from .empty import EmptyResult
from .value import ValueResult

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")

AnyResult = Union[EmptyResult, ValueResult[Any]]

MIN_AND_ALL, MAX_AND_ALL = 2, 8

# ═════════════════════════════════════════════════════════════════════════════
# Reduction
# ═════════════════════════════════════════════════════════════════════════════


def reduce(results: Iterable[AnyResult]) -> AnyResult:
    """Reduce results to a single result, failing fast on the first Err.

    EmptyResult items reduce to Ok(). Once a ValueResult is seen, the Ok
    values are collected, in input order, into ``Ok(list)``. An empty input is
    vacuously Ok().

    Example:
        >>> reduce([Ok(1), Ok(2), Ok(3)]).unwrap()
        [1, 2, 3]
        >>> reduce([Ok(1), ErrOf("x"), Ok(3)]).is_err()
        True
    """
    values: list[Any] | None = None
    for item in results:
        if item.is_err():
            return item if isinstance(item, EmptyResult) else item.to_err_of()
        if isinstance(item, ValueResult):
            if values is None:
                values = []
            values.append(item.unwrap())
    return EmptyResult() if values is None else ValueResult(values)


def reduce_values(results: Iterable[ValueResult[T]]) -> ValueResult[list[T]]:
    """Value-bearing reduce: always ``ValueResult[list[T]]`` (Ok([]) when empty).

    Example:
        >>> reduce_values([]).unwrap()
        []
    """
    values: list[T] = []
    for item in results:
        if item.is_err():
            return item.to_err_of()
        values.append(item.unwrap())
    return ValueResult(values)


def map_reduce(items: Iterable[T], f: Callable[[T], AnyResult]) -> AnyResult:
    """Apply ``f`` to each item then reduce; stops calling ``f`` after the first Err.

    Example:
        >>> map_reduce(["1", "2"], lambda s: Ok(s).try_map(int)).unwrap()
        [1, 2]
    """
    return reduce(f(item) for item in items)


def map_reduce_values(items: Iterable[T], f: Callable[[T], ValueResult[U]]) -> ValueResult[list[U]]:
    """Value-bearing map_reduce: Ok([]) when ``items`` is empty.

    Example:
        >>> map_reduce_values([], lambda s: Ok(int(s))).unwrap()
        []
    """
    return reduce_values(f(item) for item in items)


async def reduce_async(results: Iterable[Awaitable[AnyResult]]) -> AnyResult:
    """Await all results concurrently, then reduce in input order.

    The reported Err is the first in input order, not the first to complete.
    """
    return reduce(await asyncio.gather(*results))


async def map_reduce_async(items: Iterable[T], f: Callable[[T], Awaitable[AnyResult]]) -> AnyResult:
    """Async map_reduce: every ``f(item)`` runs concurrently."""
    return await reduce_async([f(item) for item in items])


async def reduce_values_async(results: Iterable[Awaitable[ValueResult[T]]]) -> ValueResult[list[T]]:
    """Value-bearing reduce_async: Ok([]) when there is nothing to await."""
    return reduce_values(await asyncio.gather(*results))


async def map_reduce_values_async(
    items: Iterable[T],
    f: Callable[[T], Awaitable[ValueResult[U]]],
) -> ValueResult[list[U]]:
    """Value-bearing map_reduce_async: Ok([]) when ``items`` is empty."""
    return await reduce_values_async([f(item) for item in items])


# ═════════════════════════════════════════════════════════════════════════════
# Tuples
# ═════════════════════════════════════════════════════════════════════════════


def and_all(*results: ValueResult[Any] | Callable[[], ValueResult[Any]]) -> ValueResult[tuple[Any, ...]]:
    """Zip 2..8 results into Ok(tuple), or the first Err in argument order.

    Arguments may be results or zero-arg producers (mixed is fine). Producers
    are called in order; none after the first Err is called.

    Example:
        >>> and_all(Ok(1), Ok("a")).unwrap()
        (1, 'a')
        >>> and_all(lambda: ErrOf("bad"), lambda: Ok(2)).is_err()
        True
    """
    if not MIN_AND_ALL <= len(results) <= MAX_AND_ALL:
        raise ValueError(f"and_all() takes {MIN_AND_ALL} to {MAX_AND_ALL} results, got {len(results)}")
    values: list[Any] = []
    for res in results:
        res = res() if callable(res) else res
        if res.is_err():
            return res.to_err_of()
        values.append(res.unwrap())
    return ValueResult(tuple(values))


# ═════════════════════════════════════════════════════════════════════════════
# Scans
# ═════════════════════════════════════════════════════════════════════════════


def first_ok(results: Iterable[ValueResult[T]]) -> T | None:
    """Value of the first Ok, None if there is none."""
    return next((r.unwrap() for r in results if r.is_ok()), None)


def last_ok(results: Iterable[ValueResult[T]]) -> T | None:
    """Value of the last Ok, None if there is none."""
    return first_ok(_reversed(results))


def first_err(results: Iterable[AnyResult]) -> str | None:
    """Error string of the first Err, None if there is none."""
    return next((r.error_message() for r in results if r.is_err()), None)


def last_err(results: Iterable[AnyResult]) -> str | None:
    """Error string of the last Err, None if there is none."""
    return first_err(_reversed(results))


def any_ok(results: Iterable[AnyResult]) -> bool:
    return any(r.is_ok() for r in results)


def all_ok(results: Iterable[AnyResult]) -> bool:
    return all(r.is_ok() for r in results)


def any_err(results: Iterable[AnyResult]) -> bool:
    return any(r.is_err() for r in results)


def all_err(results: Iterable[AnyResult]) -> bool:
    return all(r.is_err() for r in results)


def filter_map_unwrap(results: Iterable[ValueResult[T]]) -> Iterator[T]:
    """Lazily yield the values of the Ok results, skipping Errs."""
    for r in results:
        if r.is_ok():
            yield r.unwrap()


def _reversed(results: Iterable[T]) -> Iterable[T]:
    try:
        return reversed(cast(Any, results))
    except TypeError:
        return list(results)[::-1]
