"""
Property-Based Fuzzing for the shrink algorithms using Hypothesis.

Run with: pytest tests/test_shrink_fuzzer.py --hypothesis-show-statistics -v

Every shrinker must return a finite, deterministic candidate list that never
contains its own input, and every candidate must be no more complex than the
input under the domain's own order.

Requires: pip install hypothesis
"""

from contextlib import contextmanager
from datetime import datetime as dt, timedelta

import pytest

# Skip all tests if hypothesis is not installed
pytest.importorskip("hypothesis", reason="hypothesis required for fuzzer tests")

from hypothesis import given, strategies as st, settings, assume

from arbitrary import (
    integer, nat, number, elements, string, not_empty_string, asciistring, datetime,
)
from arbitrary.engine import random_source
from arbitrary.primitives.numeric import FLOAT_SHRINK_EPSILON
from arbitrary.primitives.dates import EPOCH, to_millis

finite_floats = st.floats(allow_nan=False, allow_infinity=False, min_value=-1e12, max_value=1e12)


@contextmanager
def reseeded(seed):
    """Seed the shared random source for one example; restore it afterwards."""
    state = random_source.getstate()
    random_source.seed(seed)
    try:
        yield
    finally:
        random_source.setstate(state)


# =============================================================================
# Integer / nat
# =============================================================================

@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_integer_candidates_not_larger(i):
    candidates = integer.shrink(i)
    assert all(abs(c) < abs(i) for c in candidates)


@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_integer_never_reproduces_input(i):
    assert i not in integer.shrink(i)


@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_integer_candidate_count_logarithmic(i):
    assert len(integer.shrink(i)) <= 4 * abs(i).bit_length() + 1


@given(st.integers(min_value=-(2**31), max_value=2**31))
def test_integer_shrink_deterministic(i):
    assert integer.shrink(i) == integer.shrink(i)


@given(st.integers(min_value=0, max_value=2**63))
def test_nat_candidates(n):
    candidates = nat.shrink(n)
    assert all(0 <= c < n for c in candidates)
    if n == 0:
        assert candidates == []
    else:
        assert candidates


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=2**32))
def test_integer_generation_in_range(size, seed):
    with reseeded(seed):
        assert -size <= integer.generator(size) <= size
        assert 0 <= nat.generator(size) <= size


# =============================================================================
# Rescaled integer
# =============================================================================

@given(
    st.integers(min_value=-1000, max_value=1000),
    st.integers(min_value=1, max_value=1000),
    st.integers(min_value=0, max_value=2**32),
)
def test_rescaled_integer_range(lo, span, seed):
    arb = integer(lo, lo + span)
    with reseeded(seed):
        v = arb.generator(10)
    assert lo <= v <= lo + span
    assert all(lo <= c < v for c in arb.shrink(v))


# =============================================================================
# Number
# =============================================================================

@given(finite_floats)
def test_number_large_halves(x):
    assume(abs(x) > FLOAT_SHRINK_EPSILON)
    assert number.shrink(x) == [0, x / 2, -x / 2]


@given(st.floats(min_value=-1e-6, max_value=1e-6))
def test_number_epsilon_band(x):
    assert number.shrink(x) == []


# =============================================================================
# Elements
# =============================================================================

@given(st.lists(st.integers(), min_size=1, max_size=20, unique=True), st.data())
def test_elements_shrink_is_prefix(items, data):
    x = data.draw(st.sampled_from(items))
    idx = items.index(x)
    assert elements(items).shrink(x) == items[:idx]


# =============================================================================
# Strings
# =============================================================================

@given(st.text(max_size=30))
def test_string_candidates_shorter(s):
    candidates = string.shrink(s)
    assert all(len(c) == len(s) - 1 for c in candidates)
    assert s not in candidates


@given(st.text(min_size=1, max_size=30))
def test_not_empty_string_never_empty(s):
    assert "" not in not_empty_string.shrink(s)


@given(st.text(min_size=1, max_size=1))
def test_string_single_char_reaches_empty(s):
    assert string.shrink(s) == [""]


@given(st.text(alphabet=st.characters(min_codepoint=0x20, max_codepoint=0x7E), max_size=30))
def test_asciistring_candidates_are_subsequences(s):
    for c in asciistring.shrink(s):
        it = iter(s)
        assert all(ch in it for ch in c)


# =============================================================================
# Datetime
# =============================================================================

@settings(max_examples=50)
@given(
    st.datetimes(min_value=dt(1990, 1, 1),
                 max_value=dt(2030, 1, 1)),
    st.integers(min_value=1, max_value=10**6),
    st.integers(min_value=0, max_value=2**32),
)
def test_bounded_datetime_round_trip(start, span_seconds, seed):
    end = start + timedelta(seconds=span_seconds)
    with reseeded(seed):
        d = datetime(start, end).generator(10)
    assert start <= d <= end
    naive_epoch = EPOCH.replace(tzinfo=None)
    assert naive_epoch + timedelta(milliseconds=to_millis(d)) == d


@given(
    st.datetimes(min_value=dt(1990, 1, 1),
                 max_value=dt(2030, 1, 1)),
    st.integers(min_value=1, max_value=2000),
)
def test_bounded_datetime_never_reproduces_input(start, offset_us):
    d = start + timedelta(microseconds=offset_us)
    candidates = datetime(start, start + timedelta(days=1)).shrink(d)
    assert d not in candidates
    assert all(start <= c < d for c in candidates)
