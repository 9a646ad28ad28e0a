import pytest
from hypothesis import given
from hypothesis import strategies as st

from fp256 import arith
from fp256.limbs import from_int, to_int

MAX64 = (1 << 64) - 1
MAX256 = (1 << 256) - 1

u256_values = st.integers(min_value=0, max_value=MAX256)


def u256(value: int) -> list[int]:
    return from_int(value, 4)


def hex256(text: str) -> list[int]:
    return u256(int(text, 16))


SUB_VECTORS = [
    ("1", "3", "2"),
    (
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
        "1ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe",
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
    ),
    (
        "5555555555555555555555555555555555555555555555555555555555555554",
        "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa",
        "5555555555555555555555555555555555555555555555555555555555555556",
    ),
    (
        "11245e1f5dc3c612289f0f7f970bf09300a716f9a86ff",
        "1efe6ecdcf47dd34d3dc1ce3d8684196c6d128e3205a1",
        "dda10ae71841722ab3d0d64415c5103c62a11e977ea2",
    ),
    (
        "13bc48121e80e6b4e8844c209903b823c5bdfc2f898df3f4de6b63",
        "140fc7a87c80db0955ea8283565527ea874aa9d6d2ed0b9e1a62dc",
        "537f965dfff4546d663662bd516fc6c18cada7495f17a93bf779",
    ),
    (
        "1792d533cd1c26a3bf355fdb88850ed4ed1d5f6001b38844a711e30",
        "1792d533cd1c26a3bf355fdb88850edab8eb6e215376d7fe989f86e",
        "5cbce0ec151c34fb9f18da3e",
    ),
    (
        "c74ccc89b394db508f7c15f9c0125f8ccefb0533333d3346c68",
        "c74ccc89b394db508f7c15f9c0125f8ccefb0533333d3346c6d",
        "5",
    ),
    (
        "19615e9a40d02588d57e80f693cf",
        "19615e9a40d02588d57e80f693cf",
        "0",
    ),
    (
        "2b40b7a18fcee2fca775c41d17b5b4b8967f7cc141d90743e190290216a0ff8",
        "33f685dc1797e293b7f76fb33ea8d524685b9b24e6b3d60ce6dfea3c67c6094",
        "8b5ce3a87c8ff971081ab9626f3206bd1dc1e63a4dacec9054fc13a512509c",
    ),
    (
        "aaab76240a742ec9e53129661786f2699105a198b787e04dbc5ceab69939d",
        "aaabb66b72641a40eb8d04b80c13dc58c4ce39d0f27c8107dfc1d3a4c0b66",
        "404767efeb77065bdb51f48ce9ef33c898383af4a0ba2364e8ee277c9",
    ),
]


@pytest.mark.parametrize("r, a, b", SUB_VECTORS)
def test_u256_sub_vectors(r, a, b):
    result, borrow = arith.u256_sub(hex256(a), hex256(b))
    assert result == hex256(r)
    assert borrow == 0


def test_u256_sub_borrow():
    result, borrow = arith.u256_sub(u256(0), u256(1))
    assert result == [MAX64] * 4
    assert borrow == 1


def test_u256_add_carry():
    result, carry = arith.u256_add([MAX64] * 4, u256(1))
    assert result == [0, 0, 0, 0]
    assert carry == 1


def test_u256_add_small():
    result, carry = arith.u256_add(u256(3), u256(2))
    assert result == [5, 0, 0, 0]
    assert carry == 0


@given(u256_values, u256_values)
def test_add_then_sub_round_trip(a, b):
    total, _ = arith.u256_add(u256(a), u256(b))
    back, _ = arith.u256_sub(total, u256(b))
    assert back == u256(a)


def test_u256_mul_max():
    result = arith.u256_mul([MAX64] * 4, [MAX64] * 4)
    assert result == [1, 0, 0, 0, MAX64 - 1, MAX64, MAX64, MAX64]


def test_u256_mullo_max():
    assert arith.u256_mullo([MAX64] * 4, [MAX64] * 4) == [1, 0, 0, 0]


def test_u256_mul_cross_limb():
    assert arith.u256_mul([0, 1, 0, 0], [0, 0, 0, 1]) == [0, 0, 0, 0, 1, 0, 0, 0]


@given(u256_values)
def test_sqr_matches_mul(a):
    limbs = u256(a)
    assert arith.u256_sqr(limbs) == arith.u256_mul(limbs, limbs)
    assert arith.u256_sqrlo(limbs) == arith.u256_mullo(limbs, limbs)


@given(u256_values, u256_values)
def test_mullo_is_low_half_of_mul(a, b):
    full = arith.u256_mul(u256(a), u256(b))
    assert arith.u256_mullo(u256(a), u256(b)) == full[:4]
    assert to_int(full) == a * b


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        arith.u256_add([1, 2, 3], u256(0))


def test_limb_out_of_range_rejected():
    with pytest.raises(ValueError):
        arith.u256_mul([1 << 64, 0, 0, 0], u256(1))


M7 = u256(7)


def test_fmod_neg():
    assert arith.fmod_neg(u256(1), M7) == u256(6)
    assert arith.fmod_neg(u256(0), M7) == u256(0)


def test_fmod_double_and_triple():
    assert arith.fmod_double(u256(5), M7) == u256(3)
    assert arith.fmod_triple(u256(5), M7) == u256(1)


def test_fmod_div_by_2():
    assert arith.fmod_div_by_2(u256(3), M7) == u256(5)
    assert arith.fmod_div_by_2(u256(4), M7) == u256(2)


def test_fmod_div_by_2_even_modulus():
    with pytest.raises(ValueError):
        arith.fmod_div_by_2(u256(3), u256(8))


def test_fmod_add_and_sub():
    assert arith.fmod_add(u256(6), u256(5), M7) == u256(4)
    assert arith.fmod_sub(u256(2), u256(5), M7) == u256(4)


def test_fmod_limb_variants():
    assert arith.fmod_add_limb(u256(6), 3, M7) == u256(2)
    assert arith.fmod_sub_limb(u256(2), 5, M7) == u256(4)
    assert arith.fmod_add_limb(u256(0), MAX64, M7) == u256(MAX64 % 7)


def test_fmod_limb_out_of_range():
    with pytest.raises(ValueError):
        arith.fmod_add_limb(u256(0), 1 << 64, M7)


def test_fmod_unreduced_operand_rejected():
    with pytest.raises(ValueError):
        arith.fmod_add(u256(7), u256(0), M7)


def test_fmod_zero_modulus_rejected():
    with pytest.raises(ValueError):
        arith.fmod_neg(u256(0), u256(0))


odd_moduli = st.integers(min_value=3, max_value=MAX256).map(lambda v: v | 1)


@given(odd_moduli, st.data())
def test_fmod_halve_then_double(m, data):
    a = data.draw(st.integers(min_value=0, max_value=m - 1))
    half = arith.fmod_div_by_2(u256(a), u256(m))
    assert arith.fmod_double(half, u256(m)) == u256(a)


@given(odd_moduli, st.data())
def test_fmod_add_neg_is_zero(m, data):
    a = data.draw(st.integers(min_value=0, max_value=m - 1))
    neg = arith.fmod_neg(u256(a), u256(m))
    assert arith.fmod_add(u256(a), neg, u256(m)) == u256(0)
    assert arith.fmod_sub(u256(0), u256(a), u256(m)) == neg