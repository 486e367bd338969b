"""Unit tests for the Verdict pass/fail container."""

from __future__ import annotations

import pytest

from citeguard.core.result import Failed, Passed, Verdict, failed, passed


def test_passed_exposes_value() -> None:
    v: Verdict[int] = passed(10)
    assert v.success and bool(v)
    assert v.data == 10
    assert v.errors == ()
    assert v.unwrap() == 10


def test_failed_exposes_errors() -> None:
    v: Verdict[int] = failed(["a", "b"])
    assert isinstance(v, Failed)
    assert not v.success and not bool(v)
    assert v.data is None
    assert v.errors == ("a", "b")


def test_unwrap_on_failure_raises() -> None:
    v: Verdict[int] = failed(["boom"])
    with pytest.raises(RuntimeError, match="boom"):
        v.unwrap()


def test_with_errors_appends_or_keeps() -> None:
    ok: Verdict[str] = passed("doc")
    assert ok.with_errors([]) is ok

    turned = ok.with_errors(["late"])
    assert turned.errors == ("late",)

    more = failed(["first"]).with_errors(["second"])
    assert more.errors == ("first", "second")


def test_to_dict_for_plain_values() -> None:
    assert passed({"k": 1}).to_dict() == {"success": True, "data": {"k": 1}}
    assert failed(["e"]).to_dict() == {"success": False, "errors": ["e"]}


def test_equality_is_structural() -> None:
    assert passed(1) == Passed(1)
    assert failed(["x"]) == Failed(("x",))
    assert passed(1) != failed(["x"])
