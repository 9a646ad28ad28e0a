"""Utilities for integers stored as little-endian sequences of 64-bit limbs.

Limb sequences are plain lists (or any sequence) of ints, least significant
limb first, each in the range ``[0, 2**64)``.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1
_U32_MASK = (1 << 32) - 1
_HEX_DIGITS = frozenset(string.hexdigits)

__all__ = [
    "LIMB_BITS",
    "LIMB_MASK",
    "num_limbs",
    "num_bits",
    "leading_zeros",
    "bswap4",
    "bswap8",
    "select",
    "cmp_limbs",
    "is_zero",
    "test_bit",
    "set_bit",
    "clear_set_bit",
    "to_int",
    "from_int",
    "from_hex",
    "to_hex",
    "from_bytes",
    "to_bytes",
    "invert_limb",
    "print_limbs_hex",
    "print_hex",
]


def _check_limb(value: int) -> int:
    if not 0 <= value <= LIMB_MASK:
        raise ValueError(f"limb out of range: {value!r}")
    return value


def _check_limbs(limbs: Iterable[int]) -> list[int]:
    return [_check_limb(limb) for limb in limbs]


def _check_index(idx: int) -> None:
    if idx < 0:
        raise ValueError(f"bit index must be non-negative: {idx!r}")


def num_limbs(limbs: Sequence[int]) -> int:
    """Return the number of limbs up to and including the highest non-zero one."""
    n = len(limbs)
    while n and limbs[n - 1] == 0:
        n -= 1
    return n


def num_bits(a: int) -> int:
    """Return the number of significant bits of a 64-bit value."""
    return _check_limb(a).bit_length()


def leading_zeros(a: int) -> int:
    """Return the number of leading zero bits of a 64-bit value."""
    return LIMB_BITS - num_bits(a)


def bswap4(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    if not 0 <= value <= _U32_MASK:
        raise ValueError(f"32-bit value out of range: {value!r}")
    return int.from_bytes(value.to_bytes(4, "little"), "big")


def bswap8(value: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    return int.from_bytes(_check_limb(value).to_bytes(8, "little"), "big")


def select(table: Iterable[Sequence[int]], index: int) -> list[int]:
    """Return the 4-limb entry at ``index`` by scanning the whole table.

    Every entry is touched regardless of ``index``; an index that matches no
    entry yields four zero limbs.
    """
    result = [0, 0, 0, 0]
    for i, entry in enumerate(table):
        if len(entry) != 4:
            raise ValueError("table entries must hold exactly 4 limbs")
        mask = LIMB_MASK if i == index else 0
        result = [r | (e & mask) for r, e in zip(result, entry)]
    return result


def cmp_limbs(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two limb sequences, returning 1, 0 or -1.

    As with normalised limb arrays, the longer sequence compares greater;
    equal lengths are compared from the most significant limb down.
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x > y else -1
    return 0


def is_zero(limbs: Iterable[int]) -> bool:
    """Return True if every limb is zero."""
    return not any(limbs)


def test_bit(limbs: Sequence[int], idx: int) -> int:
    """Return bit ``idx`` (0 or 1) of the integer held in ``limbs``."""
    _check_index(idx)
    return (limbs[idx >> 6] >> (idx & 0x3F)) & 1


def set_bit(limbs: Sequence[int], idx: int) -> list[int]:
    """Return a copy of ``limbs`` with bit ``idx`` set."""
    _check_index(idx)
    result = list(limbs)
    result[idx >> 6] |= 1 << (idx & 0x3F)
    return result


def clear_set_bit(idx: int, size: int) -> list[int]:
    """Return ``size`` limbs holding ``2**idx``."""
    _check_index(idx)
    if idx >= LIMB_BITS * size:
        raise ValueError(f"bit {idx} does not fit in {size} limbs")
    result = [0] * size
    result[idx >> 6] = 1 << (idx & 0x3F)
    return result


def to_int(limbs: Iterable[int]) -> int:
    """Return the integer held in a limb sequence."""
    value = 0
    for limb in reversed(_check_limbs(limbs)):
        value = (value << LIMB_BITS) | limb
    return value


def from_int(value: int, size: int | None = None) -> list[int]:
    """Split a non-negative integer into limbs.

    With ``size`` omitted, the fewest limbs that hold the value are used.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    needed = (value.bit_length() + LIMB_BITS - 1) // LIMB_BITS
    if size is None:
        size = needed
    elif needed > size:
        raise ValueError(f"value does not fit in {size} limbs")
    return [(value >> (LIMB_BITS * i)) & LIMB_MASK for i in range(size)]


def _chunks_from_end(data, width: int):
    """Yield slices of ``width`` items taken from the end of ``data``."""
    end = len(data)
    while end > 0:
        start = max(0, end - width)
        yield data[start:end]
        end = start


def from_hex(text: str | bytes) -> list[int]:
    """Parse big-endian hexadecimal digits into normalised limbs."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("ascii", errors="replace")
    if not all(ch in _HEX_DIGITS for ch in text):
        raise ValueError(f"invalid hex string: {text!r}")
    limbs = [int(chunk, 16) for chunk in _chunks_from_end(text, 16)]
    return limbs[: num_limbs(limbs)]


def to_hex(limbs: Sequence[int]) -> str:
    """Format limbs as big-endian lowercase hex, 16 digits per limb."""
    return "".join(f"{limb:016x}" for limb in reversed(_check_limbs(limbs)))


def from_bytes(data: bytes) -> list[int]:
    """Parse big-endian bytes into normalised limbs."""
    limbs = [int.from_bytes(chunk, "big") for chunk in _chunks_from_end(bytes(data), 8)]
    return limbs[: num_limbs(limbs)]


def to_bytes(limbs: Sequence[int]) -> bytes:
    """Serialise limbs as big-endian bytes, 8 bytes per limb."""
    return b"".join(limb.to_bytes(8, "big") for limb in reversed(_check_limbs(limbs)))


def invert_limb(a: int) -> int:
    """Return ``-a**-1 mod 2**64`` for an odd 64-bit ``a``.

    This is the Montgomery constant ``k0`` for a modulus whose lowest limb is ``a``.
    """
    _check_limb(a)
    inv = ((((a + 2) & 4) << 1) + a) & LIMB_MASK
    for _ in range(4):
        inv = (inv * (2 - inv * a)) & LIMB_MASK
    return (-inv) & LIMB_MASK


def print_limbs_hex(limbs: Sequence[int]) -> None:
    """Print limbs to standard output as hex followed by a newline."""
    print(to_hex(limbs))


def print_hex(label: str, data: bytes) -> None:
    """Print ``label`` immediately followed by the hex form of ``data``."""
    print(f"{label}{bytes(data).hex()}")