import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from fp256.division import naive_div
from fp256.limbs import LIMB_MASK, num_limbs, to_int

limb = st.integers(min_value=0, max_value=LIMB_MASK)
numerators = st.lists(limb, min_size=0, max_size=8)
divisors = st.lists(limb, min_size=1, max_size=4)


@given(numerators, divisors)
def test_division_identity(num, div):
    assume(any(div))
    rem, quo = naive_div(num, div)
    assert to_int(quo) * to_int(div) + to_int(rem) == to_int(num)


@given(numerators, divisors)
def test_remainder_below_divisor(num, div):
    assume(any(div))
    result = naive_div(num, div)
    assert to_int(result.remainder) < to_int(div)


@given(numerators, divisors)
def test_result_lengths(num, div):
    assume(any(div))
    result = naive_div(num, div)
    nl = num_limbs(num)
    dl = num_limbs(div)
    assert len(result.remainder) == dl
    assert len(result.quotient) == (nl + 1 - dl if nl >= dl else nl)


@given(divisors)
def test_divide_by_self(div):
    assume(any(div))
    result = naive_div(div, div)
    assert to_int(result.quotient) == 1
    assert to_int(result.remainder) == 0


def test_numerator_smaller_than_divisor():
    result = naive_div([5], [0, 1])
    assert result.remainder == [5, 0]
    assert result.quotient == [0]


def test_trailing_zero_limbs_are_ignored():
    result = naive_div([6, 0, 0], [3, 0])
    assert result.remainder == [0]
    assert result.quotient == [2]


def test_zero_divisor_raises():
    with pytest.raises(ZeroDivisionError):
        naive_div([1, 2], [0, 0])


def test_divisor_too_large_raises():
    with pytest.raises(ValueError):
        naive_div([1, 2, 3, 4, 5, 6], [1, 1, 1, 1, 1])


def test_padded_large_divisor_is_accepted():
    result = naive_div([9], [3, 0, 0, 0, 0, 0])
    assert to_int(result.quotient) * 3 + to_int(result.remainder) == 9
    assert len(result.remainder) == 1