"""Random limb sequences drawn from the operating system's secure generator."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .limbs import LIMB_BITS, LIMB_MASK, to_int

__all__ = [
    "RandomError",
    "rand_buf",
    "rand_bits",
    "rand_bytes",
    "rand_limbs",
    "rand_range",
]

# Number of candidates drawn by rand_range before giving up.
_RANGE_ATTEMPTS = 49


class RandomError(RuntimeError):
    """Raised when random data cannot be produced."""


def rand_buf(length: int) -> bytes:
    """Return ``length`` bytes from the system's secure random source."""
    if length < 0:
        raise ValueError(f"length must be non-negative: {length!r}")
    try:
        data = os.urandom(length)
    except OSError as exc:
        raise RandomError("system random source failed") from exc
    if len(data) != length:
        raise RandomError("system random source returned too few bytes")
    return data


def rand_bits(nbits: int) -> list[int]:
    """Return ``ceil(nbits / 64)`` random limbs holding a value below ``2**nbits``."""
    if nbits < 0:
        raise ValueError(f"nbits must be non-negative: {nbits!r}")
    if nbits == 0:
        return []
    count = (nbits - 1) // LIMB_BITS + 1
    data = rand_buf(8 * count)
    limbs = [int.from_bytes(data[i : i + 8], "little") for i in range(0, len(data), 8)]
    top_bits = nbits % LIMB_BITS
    mask = (1 << top_bits) - 1 if top_bits else LIMB_MASK
    limbs[-1] &= mask
    return limbs


def rand_bytes(nbytes: int) -> list[int]:
    """Return random limbs holding a value below ``2**(8 * nbytes)``."""
    return rand_bits(8 * nbytes)


def rand_limbs(nlimbs: int) -> list[int]:
    """Return ``nlimbs`` fully random limbs."""
    return rand_bits(LIMB_BITS * nlimbs)


def rand_range(upper: Sequence[int]) -> list[int]:
    """Return a random value in ``[0, upper)`` with as many limbs as ``upper``.

    Candidates with the bit length of ``upper`` are drawn until one falls
    below it; :class:`RandomError` is raised if none does within the allowed
    number of attempts.
    """
    if not upper:
        return []
    bound = to_int(upper)
    if bound == 0:
        raise ValueError("upper bound must be positive")
    size = len(upper)
    nbits = bound.bit_length()
    for _ in range(_RANGE_ATTEMPTS):
        candidate = rand_bits(nbits)
        if to_int(candidate) < bound:
            return candidate + [0] * (size - len(candidate))
    raise RandomError("no value below the bound was drawn")