"""Tests for EmptyResult and its constructors."""

from __future__ import annotations

import pytest

from resultkit import EmptyResult, Err, ErrOf, Ok, OkIf, ValueResult


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_default_is_ok() -> None:
    """EmptyResult() and Ok() are both success."""
    assert EmptyResult().is_ok()
    assert Ok() == EmptyResult()
    assert Ok().error_message() is None


def test_err_shapes() -> None:
    """All four Err shapes produce the documented layout."""
    assert Err("disk full", "saving").error_message() == "Err[saving] disk full"

    exc = ValueError("bad input")
    assert Err(when="parsing", exception=exc).error_message() == "Err[parsing - ValueError] bad input"
    assert Err("retry later", "parsing", exc).error_message() == "Err[parsing - ValueError] bad input retry later"


def test_err_derives_when_from_caller() -> None:
    """Without ``when`` the calling function names the context."""
    def save_report() -> EmptyResult:
        return Err("disk full")

    message = save_report().error_message() or ""
    assert message.startswith("Err[")
    assert "save_report" in message
    assert message.endswith("] disk full")


def test_ok_if_constructor_label_from_call_site() -> None:
    """Without label, OkIf reports the condition as written."""
    items = [1, 2]
    message = OkIf(len(items) > 3).error_message() or ""

    assert "failed ok_if validation" in message
    assert "len(items) > 3" in message


def test_ok_if_constructor_explicit_label() -> None:
    """An explicit label wins over the call-site text."""
    assert OkIf(True, label="never shown") == Ok()
    assert OkIf(False, label="needs admin").error_message() == "Err[failed ok_if validation] needs admin"


# ═════════════════════════════════════════════════════════════════════════════
# Validation
# ═════════════════════════════════════════════════════════════════════════════


class TestOkIf:
    """Tests for EmptyResult.ok_if."""

    def test_bool_condition(self) -> None:
        """A bool condition keeps or downgrades Ok."""
        assert Ok().ok_if(True) == Ok()
        failed = Ok().ok_if(1 > 2)
        assert "1 > 2" in (failed.error_message() or "")

    def test_predicate_only_called_on_ok(self) -> None:
        """Lazy predicates are skipped on Err."""
        calls: list[int] = []

        def check() -> bool:
            calls.append(1)
            return True

        assert Err("earlier").ok_if(check).is_err()
        assert calls == []
        assert Ok().ok_if(check).is_ok()
        assert calls == [1]

    def test_predicate_label(self) -> None:
        """A failing predicate is described by its name or source."""
        def has_quota() -> bool:
            return False

        assert "has_quota" in (Ok().ok_if(has_quota).error_message() or "")
        assert "3 < 2" in (Ok().ok_if(lambda: 3 < 2).error_message() or "")

    def test_err_is_returned_unchanged(self) -> None:
        """Validation never rewrites an existing failure."""
        err = Err("earlier")
        assert err.ok_if(False, "later") is err


# ═════════════════════════════════════════════════════════════════════════════
# Matching & Side Effects
# ═════════════════════════════════════════════════════════════════════════════


def test_match_value_and_callable() -> None:
    """The ok arm accepts a value or a zero-arg callable."""
    assert Ok().match(ok="200", err=lambda e: "500") == "200"
    assert Ok().match(ok=lambda: "201", err=lambda e: "500") == "201"
    assert Err("bad").match(ok="200", err=lambda e: e) == Err("bad").error_message()


def test_match_do_and_do() -> None:
    """Side effects run in the matching state only."""
    seen: list[str] = []
    ok, err = Ok(), Err("bad")

    assert ok.do(lambda: seen.append("do")) is ok
    assert err.do(lambda: seen.append("never")) is err
    assert err.do_if_err(lambda e: seen.append("do_if_err")) is err
    assert ok.do_if_err(lambda e: seen.append("never")) is ok
    ok.match_do(ok=lambda: seen.append("ok"), err=seen.append)
    err.match_do(ok=lambda: seen.append("never"), err=lambda e: seen.append("err"))

    assert seen == ["do", "do_if_err", "ok", "err"]


def test_throw_if_err() -> None:
    """Err raises RuntimeError, or the factory's exception."""
    assert Ok().throw_if_err() == Ok()

    with pytest.raises(RuntimeError, match="not okay"):
        Err("not okay").throw_if_err()

    with pytest.raises(PermissionError, match="forbidden"):
        Err("forbidden").throw_if_err(PermissionError)


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_produces_value_result() -> None:
    """map turns a valueless success into a value-bearing one."""
    result = Ok().map(lambda: "ready")

    assert isinstance(result, ValueResult)
    assert result.unwrap() == "ready"


def test_map_keeps_error_and_guards_null() -> None:
    """Err keeps its string; None from the mapper becomes Err."""
    err = Err("db down")
    mapped = err.map(lambda: 1)

    assert isinstance(mapped, ValueResult)
    assert mapped.error_message() == err.error_message()
    assert "Null value" in (Ok().map(lambda: None).error_message() or "")


def test_flat_map() -> None:
    """flat_map returns the nested result directly."""
    assert Ok().flat_map(lambda: Ok(3)) == Ok(3)
    assert Ok().flat_map(lambda: Err("inner")).is_err()

    err = Err("outer")
    assert err.flat_map(lambda: Ok(3)) is err


# ═════════════════════════════════════════════════════════════════════════════
# Guarded Operations
# ═════════════════════════════════════════════════════════════════════════════


class TestTry:
    """Tests for the try_* family."""

    def test_try_ok(self) -> None:
        """A completing action keeps Ok."""
        calls: list[int] = []
        assert Ok().try_(lambda: calls.append(1)) == Ok()
        assert calls == [1]

    def test_try_captures_with_label(self) -> None:
        """The label and exception type appear in the error."""
        message = Ok().try_(lambda: 1 / 0, "divide").error_message()
        assert message == "Err[divide - ZeroDivisionError] division by zero"

    def test_try_default_label_is_lambda_source(self) -> None:
        """A lambda is described by its source text."""
        message = Ok().try_(lambda: {}["missing"]).error_message() or ""

        assert "KeyError" in message
        assert 'lambda: {}["missing"]' in message

    def test_try_skipped_on_err(self) -> None:
        """Err never runs the action."""
        def explode() -> None:
            raise AssertionError("must not be called")

        err = Err("earlier")
        assert err.try_(explode) is err
        assert err.try_map(explode).error_message() == err.error_message()

    def test_try_map(self) -> None:
        """try_map yields Ok(value) or the captured error."""
        assert Ok().try_map(lambda: int("5")) == Ok(5)

        failed = Ok().try_map(lambda: int("five"), "parse")
        assert isinstance(failed, ValueResult)
        assert "Err[parse - ValueError]" in (failed.error_message() or "")

    def test_try_flat_map(self) -> None:
        """try_flat_map passes the nested result through or captures."""
        assert Ok().try_flat_map(lambda: Ok(1)) == Ok(1)

        def fetch() -> EmptyResult:
            raise ConnectionError("refused")

        failed = Ok().try_flat_map(fetch)
        assert isinstance(failed, EmptyResult)
        assert "ConnectionError" in (failed.error_message() or "")
        assert "fetch" in (failed.error_message() or "")


# ═════════════════════════════════════════════════════════════════════════════
# Logical Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_and_table() -> None:
    """Ok only when both are Ok; one Err wins."""
    a, b = Err("a", "x"), Err("b", "y")

    assert Ok().and_(Ok()) == Ok()
    assert Ok().and_(a) == a
    assert a.and_(Ok()) == a
    assert a.and_(b).error_message() == "Err[x] a\nErr[y] b"


def test_and_producer_is_lazy() -> None:
    """A producer is only called when self is Ok."""
    calls: list[int] = []

    def step() -> EmptyResult:
        calls.append(1)
        return Ok()

    assert Err("first").and_(step).is_err()
    assert calls == []
    assert Ok().and_(step) == Ok()
    assert calls == [1]


def test_or() -> None:
    """or_ falls back only on Err."""
    def fallback() -> EmptyResult:
        raise AssertionError("must not be called")

    assert Ok().or_(fallback) == Ok()
    assert Err("a").or_(Ok()) == Ok()
    assert Err("a").or_(lambda: Err("b", "retry")).error_message() == "Err[retry] b"


def test_to_err_of() -> None:
    """to_err_of always yields a ValueResult Err."""
    err = Err("bad")
    assert err.to_err_of().error_message() == err.error_message()

    from_ok = Ok().to_err_of()
    assert isinstance(from_ok, ValueResult)
    assert "to_err_of is called on 'Ok'." in (from_ok.error_message() or "")


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_dunders() -> None:
    """bool, str, repr, equality and hashing."""
    assert bool(Ok()) is True
    assert bool(Err("x")) is False
    assert str(Ok()) == "Ok"
    assert str(Err("x", "ctx")) == "Err[ctx] x"
    assert repr(Ok()) == "Ok()"
    assert Err("x", "ctx") == Err("x", "ctx")
    assert Err("x", "ctx") != Err("y", "ctx")
    assert len({Ok(), Ok(), Err("x", "ctx"), Err("x", "ctx")}) == 2


def test_and_with_value_result() -> None:
    """A ValueResult counts by its state only."""
    joined = Err("a", "x").and_(ErrOf("b", "y"))

    assert isinstance(joined, EmptyResult)
    assert joined.error_message() == "Err[x] a\nErr[y] b"
    assert Ok().and_(Ok(3)) == Ok()
    assert Ok().and_(ErrOf("b", "y")) == Err("b", "y")
    assert Err("a", "x").and_(Ok(3)) == Err("a", "x")
    assert Ok().and_(lambda: Ok(3)) == Ok()


def test_and_rejects_non_results() -> None:
    """Anything but a result or a producer of one is a TypeError."""
    with pytest.raises(TypeError, match=r"and_\(\) expects a result"):
        Ok().and_(5)  # type: ignore[arg-type]


def test_empty_and_value_results_are_distinct() -> None:
    """An EmptyResult never equals a ValueResult."""
    assert Ok() != Ok(1)
    assert Err("x", "ctx") != ErrOf("x", "ctx")
