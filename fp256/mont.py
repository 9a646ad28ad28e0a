"""Montgomery multiplication, reduction and exponentiation modulo an odd 256-bit N.

Operands are sequences of exactly four little-endian 64-bit limbs and
``R = 2**256``. ``k0`` is ``-N**-1 mod 2**64``, as returned by
:func:`fp256.limbs.invert_limb` for the lowest limb of ``N``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .limbs import LIMB_BITS, LIMB_MASK, from_int, num_limbs, to_int

__all__ = ["mont_mul", "mont_sqr", "mont_reduce", "mont_exp"]

_U256_LIMBS = 4
_MAX_EXP_LIMBS = 4


def _u256(limbs: Sequence[int], name: str) -> int:
    if len(limbs) != _U256_LIMBS:
        raise ValueError(f"{name} must hold exactly {_U256_LIMBS} limbs, got {len(limbs)}")
    return to_int(limbs)


def _modulus(n: Sequence[int], k0: int) -> int:
    modulus = _u256(n, "modulus")
    if modulus % 2 == 0:
        raise ValueError("modulus must be odd")
    if not 0 <= k0 <= LIMB_MASK:
        raise ValueError(f"k0 must be a 64-bit value: {k0!r}")
    if (k0 * modulus) & LIMB_MASK != LIMB_MASK:
        raise ValueError("k0 is not -N**-1 mod 2**64 for this modulus")
    return modulus


def _redc(t: int, modulus: int, k0: int) -> int:
    """Return ``t * R**-1 mod modulus`` one limb at a time."""
    for _ in range(_U256_LIMBS):
        m = ((t & LIMB_MASK) * k0) & LIMB_MASK
        t = (t + m * modulus) >> LIMB_BITS
    return t % modulus


def _window_size(ebits: int) -> int:
    if ebits > 192:
        return 5
    if ebits > 64:
        return 4
    if ebits > 16:
        return 3
    return 2


def mont_mul(a: Sequence[int], b: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * b * R**-1 mod n``."""
    modulus = _modulus(n, k0)
    return from_int(_redc(_u256(a, "a") * _u256(b, "b"), modulus, k0), _U256_LIMBS)


def mont_sqr(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a**2 * R**-1 mod n``."""
    return mont_mul(a, a, n, k0)


def mont_reduce(a: Sequence[int], n: Sequence[int], k0: int) -> list[int]:
    """Return ``a * R**-1 mod n``, taking ``a`` out of Montgomery form."""
    modulus = _modulus(n, k0)
    return from_int(_redc(_u256(a, "a"), modulus, k0), _U256_LIMBS)


def mont_exp(
    a: Sequence[int], e: Sequence[int], rr: Sequence[int], n: Sequence[int], k0: int
) -> list[int]:
    """Raise ``a`` (in Montgomery form) to the power ``e``, staying in Montgomery form.

    ``rr`` is ``R**2 mod n``; ``e`` holds between one and four limbs. The
    exponent is scanned in fixed windows of bits from the most significant end.
    """
    modulus = _modulus(n, k0)
    base = _u256(a, "a")
    rr_value = _u256(rr, "rr")
    if not 0 < len(e) <= _MAX_EXP_LIMBS:
        raise ValueError(f"exponent must hold between 1 and {_MAX_EXP_LIMBS} limbs")
    exponent = to_int(e)

    ebits = len(e) * LIMB_BITS
    window = _window_size(ebits)

    def mul(x: int, y: int) -> int:
        return _redc(x * y, modulus, k0)

    table = [mul(1, rr_value)]
    for _ in range((1 << window) - 1):
        table.append(mul(table[-1], base))

    bits = format(exponent, f"0{ebits}b")
    pos = ebits % window
    acc = table[int(bits[:pos], 2)] if pos else table[0]
    while pos < ebits:
        for _ in range(window):
            acc = mul(acc, acc)
        acc = mul(acc, table[int(bits[pos : pos + window], 2)])
        pos += window

    return from_int(acc, _U256_LIMBS)


# Keep num_limbs reachable for callers that normalise exponents before use.
_ = num_limbs