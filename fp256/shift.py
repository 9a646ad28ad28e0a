"""Bit shifts of integers stored as little-endian 64-bit limb sequences."""

from __future__ import annotations

from collections.abc import Sequence

from .limbs import LIMB_BITS, from_int, to_int

__all__ = [
    "lshift",
    "rshift",
    "u256_lshift",
    "u256_rshift",
    "u512_lshift",
    "u512_rshift",
]


def _check_shift(n: int) -> None:
    if n < 0:
        raise ValueError(f"shift count must be non-negative: {n!r}")


def _check_fixed(limbs: Sequence[int], size: int, n: int) -> None:
    if len(limbs) != size:
        raise ValueError(f"expected exactly {size} limbs, got {len(limbs)}")
    if not 0 <= n < LIMB_BITS:
        raise ValueError(f"shift count must be in [0, {LIMB_BITS}): {n!r}")


def lshift(limbs: Sequence[int], n: int) -> list[int]:
    """Shift left by ``n`` bits.

    The result holds ``len(limbs) + n // 64 + 1`` limbs, so nothing is lost;
    its last element is the most significant limb. An empty input gives an
    empty result.
    """
    _check_shift(n)
    if not limbs:
        return []
    size = len(limbs) + n // LIMB_BITS + 1
    return from_int(to_int(limbs) << n, size)


def rshift(limbs: Sequence[int], n: int) -> list[int]:
    """Shift right by ``n`` bits, keeping the input's number of limbs."""
    _check_shift(n)
    if not limbs:
        return []
    return from_int(to_int(limbs) >> n, len(limbs))


def u256_lshift(limbs: Sequence[int], n: int) -> list[int]:
    """Shift a 4-limb value left by ``n < 64`` bits into 5 limbs."""
    _check_fixed(limbs, 4, n)
    return from_int(to_int(limbs) << n, 5)


def u256_rshift(limbs: Sequence[int], n: int) -> list[int]:
    """Shift a 4-limb value right by ``n < 64`` bits."""
    _check_fixed(limbs, 4, n)
    return from_int(to_int(limbs) >> n, 4)


def u512_lshift(limbs: Sequence[int], n: int) -> list[int]:
    """Shift an 8-limb value left by ``n < 64`` bits into 9 limbs."""
    _check_fixed(limbs, 8, n)
    return from_int(to_int(limbs) << n, 9)


def u512_rshift(limbs: Sequence[int], n: int) -> list[int]:
    """Shift an 8-limb value right by ``n < 64`` bits."""
    _check_fixed(limbs, 8, n)
    return from_int(to_int(limbs) >> n, 8)