"""Fixed-width 256-bit addition, subtraction, multiplication and fast modular helpers.

Operands are sequences of exactly four little-endian 64-bit limbs. The ``fmod_*``
helpers expect their operands to be already reduced below the modulus and
always return a reduced result.
"""

from __future__ import annotations

from collections.abc import Sequence

from .limbs import LIMB_MASK, from_int, to_int

__all__ = [
    "u256_add",
    "u256_sub",
    "u256_mul",
    "u256_mullo",
    "u256_sqr",
    "u256_sqrlo",
    "fmod_neg",
    "fmod_double",
    "fmod_triple",
    "fmod_div_by_2",
    "fmod_add",
    "fmod_add_limb",
    "fmod_sub",
    "fmod_sub_limb",
]

_U256_LIMBS = 4
_U256_BITS = 256
_U256_MASK = (1 << _U256_BITS) - 1


def _u256(limbs: Sequence[int], name: str) -> int:
    if len(limbs) != _U256_LIMBS:
        raise ValueError(f"{name} must hold exactly {_U256_LIMBS} limbs, got {len(limbs)}")
    return to_int(limbs)


def _limb(value: int, name: str) -> int:
    if not 0 <= value <= LIMB_MASK:
        raise ValueError(f"{name} must be a 64-bit value: {value!r}")
    return value


def _modulus(m: Sequence[int]) -> int:
    value = _u256(m, "modulus")
    if value == 0:
        raise ValueError("modulus must be non-zero")
    return value


def _reduced(limbs: Sequence[int], name: str, modulus: int) -> int:
    value = _u256(limbs, name)
    if value >= modulus:
        raise ValueError(f"{name} must be less than the modulus")
    return value


def _pack(value: int, size: int = _U256_LIMBS) -> list[int]:
    return from_int(value, size)


def u256_add(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], int]:
    """Return ``(a + b) mod 2**256`` as limbs, together with the carry (0 or 1)."""
    total = _u256(a, "a") + _u256(b, "b")
    return _pack(total & _U256_MASK), total >> _U256_BITS


def u256_sub(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], int]:
    """Return ``(a - b) mod 2**256`` as limbs, together with the borrow (0 or 1)."""
    diff = _u256(a, "a") - _u256(b, "b")
    return _pack(diff & _U256_MASK), int(diff < 0)


def u256_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the full 512-bit product ``a * b`` as 8 limbs."""
    return _pack(_u256(a, "a") * _u256(b, "b"), 2 * _U256_LIMBS)


def u256_mullo(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the lower 256 bits of ``a * b`` as 4 limbs."""
    return _pack((_u256(a, "a") * _u256(b, "b")) & _U256_MASK)


def u256_sqr(a: Sequence[int]) -> list[int]:
    """Return the full 512-bit square of ``a`` as 8 limbs."""
    value = _u256(a, "a")
    return _pack(value * value, 2 * _U256_LIMBS)


def u256_sqrlo(a: Sequence[int]) -> list[int]:
    """Return the lower 256 bits of ``a**2`` as 4 limbs."""
    value = _u256(a, "a")
    return _pack((value * value) & _U256_MASK)


def fmod_neg(a: Sequence[int], m: Sequence[int]) -> list[int]:
    """Return ``-a mod m``."""
    modulus = _modulus(m)
    return _pack(-_reduced(a, "a", modulus) % modulus)


def fmod_double(a: Sequence[int], m: Sequence[int]) -> list[int]:
    """Return ``2 * a mod m``."""
    modulus = _modulus(m)
    return _pack(2 * _reduced(a, "a", modulus) % modulus)


def fmod_triple(a: Sequence[int], m: Sequence[int]) -> list[int]:
    """Return ``3 * a mod m``."""
    modulus = _modulus(m)
    return _pack(3 * _reduced(a, "a", modulus) % modulus)


def fmod_div_by_2(a: Sequence[int], m: Sequence[int]) -> list[int]:
    """Return ``a / 2 mod m``; the modulus must be odd."""
    modulus = _modulus(m)
    if modulus % 2 == 0:
        raise ValueError("modulus must be odd to halve modulo it")
    value = _reduced(a, "a", modulus)
    if value & 1:
        value += modulus
    return _pack(value >> 1)


def fmod_add(a: Sequence[int], b: Sequence[int], m: Sequence[int]) -> list[int]:
    """Return ``(a + b) mod m``."""
    modulus = _modulus(m)
    total = _reduced(a, "a", modulus) + _reduced(b, "b", modulus)
    return _pack(total % modulus)


def fmod_add_limb(a: Sequence[int], b: int, m: Sequence[int]) -> list[int]:
    """Return ``(a + b) mod m`` for a 64-bit ``b``."""
    modulus = _modulus(m)
    total = _reduced(a, "a", modulus) + _limb(b, "b")
    return _pack(total % modulus)


def fmod_sub(a: Sequence[int], b: Sequence[int], m: Sequence[int]) -> list[int]:
    """Return ``(a - b) mod m``."""
    modulus = _modulus(m)
    diff = _reduced(a, "a", modulus) - _reduced(b, "b", modulus)
    return _pack(diff % modulus)


def fmod_sub_limb(a: Sequence[int], b: int, m: Sequence[int]) -> list[int]:
    """Return ``(a - b) mod m`` for a 64-bit ``b``."""
    modulus = _modulus(m)
    diff = _reduced(a, "a", modulus) - _limb(b, "b")
    return _pack(diff % modulus)