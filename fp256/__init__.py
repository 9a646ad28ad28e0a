"""Limb-level arithmetic on 256-bit unsigned integers stored as 64-bit limb lists."""

__version__ = "0.1.0"
__all__ = ["limbs", "shift", "division", "arith", "mont", "rand"]