"""Division of limb sequences by a divisor of at most 256 bits."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .limbs import from_int, num_limbs, to_int

__all__ = ["DivisionResult", "naive_div"]

_MAX_DIVISOR_LIMBS = 4


@dataclass(frozen=True)
class DivisionResult:
    """Remainder and quotient of a division, each as little-endian limbs.

    The remainder has as many limbs as the normalised divisor. The quotient
    has ``nl + 1 - dl`` limbs when the normalised numerator is at least as
    long as the divisor, and ``nl`` limbs otherwise.
    """

    remainder: list[int]
    quotient: list[int]

    def __iter__(self) -> Iterator[list[int]]:
        yield self.remainder
        yield self.quotient


def naive_div(num: Sequence[int], div: Sequence[int]) -> DivisionResult:
    """Divide ``num`` by ``div``; the divisor must be non-zero and below 2**256."""
    nl = num_limbs(num)
    dl = num_limbs(div)
    if dl == 0:
        raise ZeroDivisionError("division by zero")
    if dl > _MAX_DIVISOR_LIMBS:
        raise ValueError("divisor must be less than 2**256")

    quotient, remainder = divmod(to_int(num[:nl]), to_int(div[:dl]))
    quotient_size = nl + 1 - dl if nl >= dl else nl
    return DivisionResult(
        remainder=from_int(remainder, dl),
        quotient=from_int(quotient, quotient_size),
    )