"""Bit-level helpers for tooling and tests. Kernel modules do not import this."""

from __future__ import annotations

import struct

MASK64 = 0xFFFFFFFFFFFFFFFF
SIGN_BIT = 1 << 63


def f2u(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def u2f(u: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", u & MASK64))[0]


def is_nan_bits(u: int) -> bool:
    exp = (u >> 52) & 0x7FF
    frac = u & ((1 << 52) - 1)
    return exp == 0x7FF and frac != 0


def _ordinal(x: float) -> int:
    # integers ordered like the floats, with -0.0 and +0.0 both at 0
    u = f2u(x)
    if u & SIGN_BIT:
        return -(u & ~SIGN_BIT & MASK64)
    return u


def ulp_distance(a: float, b: float) -> int:
    """Number of representable doubles between a and b.

    Two NaNs are 0 apart; a NaN and a number are 2**64 apart.
    """
    if a != a or b != b:
        return 0 if (a != a and b != b) else 1 << 64
    return abs(_ordinal(a) - _ordinal(b))


def same_bits(a: float, b: float) -> bool:
    """Bitwise equality that treats every NaN as equal."""
    ua = f2u(a)
    ub = f2u(b)
    if is_nan_bits(ua) and is_nan_bits(ub):
        return True
    return ua == ub
