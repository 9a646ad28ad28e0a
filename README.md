# fp256

Low-level arithmetic on unsigned integers stored as little-endian lists of
64-bit limbs (least significant limb first, each in `[0, 2**64)`), tuned for
256-bit operands. The package has no dependencies outside the standard
library; the `test` extra pulls in pytest and hypothesis for the test suite.

## Modules

- `fp256.limbs`: limb utilities. `num_limbs`, `num_bits`, `leading_zeros`,
  `cmp_limbs`, `is_zero`, `test_bit`, `set_bit` (returns a copy),
  `clear_set_bit(idx, size)` (the value `2**idx` in `size` limbs), byte swaps
  `bswap4` and `bswap8`, the constant-time table lookup `select`, conversions
  `to_int`, `from_int(value, size=None)`, `from_hex`, `to_hex`, `from_bytes`,
  `to_bytes`, and `invert_limb(a)`, which returns `-a**-1 mod 2**64` for an odd
  limb (the Montgomery constant `k0`). `print_limbs_hex` and `print_hex`
  write hex to standard output. `from_hex` and `from_bytes` return normalised
  lists (no high zero limbs); `to_hex` and `to_bytes` write 16 digits or 8
  bytes per limb.
- `fp256.shift`: `lshift(limbs, n)` and `rshift(limbs, n)` for any
  non-negative `n`; `lshift` returns `len(limbs) + n // 64 + 1` limbs and
  `rshift` keeps the input length. The fixed-width helpers `u256_lshift`,
  `u256_rshift`, `u512_lshift` and `u512_rshift` take exactly 4 or 8 limbs and
  a shift below 64.
- `fp256.division`: `naive_div(num, div)` returns a `DivisionResult` with
  `remainder` and `quotient` lists; it can also be unpacked as
  `remainder, quotient = naive_div(...)`. A zero divisor raises
  `ZeroDivisionError`; a divisor of 2^256 or more raises `ValueError`.
- `fp256.arith`: on exactly four limbs, `u256_add` and `u256_sub` return the
  result together with the carry or borrow; `u256_mul` and `u256_sqr` return
  8 limbs, `u256_mullo` and `u256_sqrlo` the low 4. The `fmod_*` helpers
  (`fmod_add`, `fmod_sub`, `fmod_neg`, `fmod_double`, `fmod_triple`,
  `fmod_div_by_2`, `fmod_add_limb`, `fmod_sub_limb`) require operands already
  below the modulus and raise `ValueError` otherwise; `fmod_div_by_2` needs
  an odd modulus.
- `fp256.mont`: Montgomery arithmetic with R = 2^256 on four-limb operands:
  `mont_mul`, `mont_sqr`, `mont_reduce` (leaves Montgomery form) and
  `mont_exp(a, e, rr, n, k0)`, a fixed-window exponentiation where `rr` is
  `R**2 mod n` and `e` holds one to four limbs. The modulus must be odd and
  `k0` must match it, or `ValueError` is raised.
- `fp256.rand`: `rand_buf(length)` returns bytes from `os.urandom`;
  `rand_bits`, `rand_bytes` and `rand_limbs` return random limb lists below
  the given bound; `rand_range(upper)` returns a value below `upper` with as
  many limbs as `upper`, drawing at most 49 candidates. Failures raise
  `RandomError`.

The fixed-width functions need exactly four limbs, so pad normalised values
with `from_int(to_int(x), 4)`.

## Example

```python
from fp256 import limbs, mont

n = limbs.from_hex("ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff")
k0 = limbs.invert_limb(n[0])
a = limbs.from_hex("fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe")
r = mont.mont_mul(a, a, n, k0)
print(limbs.to_hex(r))  # ...0001
```

## What it does not do

The package offers limb-level routines only. It has no integer type of its
own, no modular inverse, gcd or general modular exponentiation beyond
`mont_exp`, no CPU feature detection, and no command-line program.