import math
from dataclasses import FrozenInstanceError

import pytest

from fp_utils import option
from fp_utils.option import (
    Nothing,
    Some,
    flat_map,
    from_nullable,
    get_or_else,
    get_or_else_lazy,
    is_none,
    is_some,
    match,
    none,
    some,
)


def test_some__wraps_anything():
    assert some(5).value == 5
    assert some(None).value is None
    assert some(some(1)).value == some(1)
    f = lambda x: x  # noqa: E731
    assert some(f).value is f


def test_none__is_singleton():
    assert Nothing() is none
    assert none == Nothing()
    assert repr(none) == "none"


def test_predicates__exclusive_and_exhaustive():
    for o in (some(1), some(None), none):
        assert is_some(o) != is_none(o)
    assert is_some(some(0))
    assert is_none(none)


@pytest.mark.parametrize("value", [0, "", False, [], {}, 0.0])
def test_from_nullable__falsy_values_are_present(value):
    assert from_nullable(value) == some(value)


def test_from_nullable__none():
    assert from_nullable(None) is none


def test_from_nullable__nan_is_present():
    o = from_nullable(math.nan)
    assert is_some(o)
    assert math.isnan(o.value)


def test_map():
    assert option.map(lambda x: x * 2)(some(5)) == some(10)
    assert option.map(lambda x: x * 2)(none) is none


def test_map__does_not_flatten():
    assert option.map(some)(some(1)) == some(some(1))


def test_map__not_called_on_none(call_counter):
    option.map(call_counter(str))(none)
    assert call_counter.count == 0


def test_flat_map():
    half = lambda x: some(x // 2) if x % 2 == 0 else none  # noqa: E731
    assert flat_map(half)(some(4)) == some(2)
    assert flat_map(half)(some(3)) is none
    assert flat_map(half)(none) is none


def test_get_or_else():
    assert get_or_else(0)(some(5)) == 5
    assert get_or_else(0)(none) == 0


def test_get_or_else_lazy(call_counter):
    fallback = call_counter(lambda: 0)
    assert get_or_else_lazy(fallback)(some(5)) == 5
    assert call_counter.count == 0
    assert get_or_else_lazy(fallback)(none) == 0
    assert call_counter.count == 1


def test_match():
    m = match(lambda: "nothing", lambda x: f"got {x}")
    assert m(some(1)) == "got 1"
    assert m(none) == "nothing"


def test_match__calls_exactly_one_branch(call_counter):
    on_none = call_counter(lambda: "none")
    m = match(on_none, lambda x: x)
    m(some(1))
    assert call_counter.count == 0
    m(none)
    assert call_counter.count == 1


def test_dunder__len_bool_iter():
    assert len(some(0)) == 1 and len(none) == 0
    assert bool(some(0)) and bool(some(False))
    assert not none
    assert list(some("a")) == ["a"]
    assert list(none) == []


def test_structural_pattern_matching():
    def describe(o):
        match o:
            case Some(value):
                return f"some {value}"
            case Nothing():
                return "none"

    assert describe(some(3)) == "some 3"
    assert describe(none) == "none"


def test_equality():
    assert some(1) == some(1)
    assert some(1) != some(2)
    assert some(None) != none
    assert hash(some(1)) == hash(some(1))


def test_immutable():
    with pytest.raises(FrozenInstanceError):
        some(1).value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        none.value = 2  # type: ignore[attr-defined]
