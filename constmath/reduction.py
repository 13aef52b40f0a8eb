"""Range reduction modulo pi/2 and ln2.

Both moduli are stored as several doubles ("limbs") so that k*M is carried
with more precision than one multiplication by a rounded constant gives.
Trig arguments too large for the limbs are multiplied against a table of the
bits of 2/pi instead, keeping only the bits that matter modulo 4.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Tuple

from .primitives import fabs, floor, frexp1, pow2, two_prod, two_sum

logger = logging.getLogger(__name__)

PI = 3.14159265358979311600e00
TWO_PI = 6.28318530717958623200e00
HALF_PI = 1.57079632679489655800e00
QUARTER_PI = 7.85398163397448278999e-01
# pi/2 - HALF_PI
PIO2_LO = 6.12323399573676603587e-17

# 1.5 * 2**52: (v + TOINT) - TOINT rounds v to the nearest integer
TOINT = 6755399441055744.0

INV_PIO2 = 6.36619772367581382433e-01
# pi/2 in three 33-bit limbs, each with the tail left over after it
PIO2_1 = 1.57079632673412561417e00
PIO2_1T = 6.07710050650619224932e-11
PIO2_2 = 6.07710050630396597660e-11
PIO2_2T = 2.02226624879595063154e-21
PIO2_3 = 2.02226624871116645580e-21
PIO2_3T = 8.47842766036889956997e-32

# below 2**20 * pi/2 the quotient has at most 20 bits and k * PIO2_1 is exact
REDUCTION_CEILING = 1048576.0 * HALF_PI

TWO23 = 8388608.0
TWO24 = 16777216.0
TWOM24 = 5.9604644775390625e-08

# 2/pi in 24-bit chunks, most significant first: sum(c * 2**(-24*(i+1)))
IPIO2 = (
    0xA2F983, 0x6E4E44, 0x1529FC, 0x2757D1, 0xF534DD, 0xC0DB62,
    0x95993C, 0x439041, 0xFE5163, 0xABDEBB, 0xC561B7, 0x246E3A,
    0x424DD2, 0xE00649, 0x2EEA09, 0xD1921C, 0xFE1DEB, 0x1CB129,
    0xA73EE8, 0x8235F5, 0x2EBB44, 0x84E99C, 0x7026B4, 0x5F7E41,
    0x3991D6, 0x398353, 0x39F49C, 0x845F8B, 0xBDF928, 0x3B1FF8,
    0x97FFDE, 0x05980F, 0xEF2F11, 0x8B5A0A, 0x6D1F6D, 0x367ECF,
    0x27CB09, 0xB74F46, 0x3F669E, 0x5FEA2D, 0x7527BA, 0xC7EBE5,
    0xF17B3D, 0x0739F7, 0x8A5292, 0xEA6BFB, 0x5FB11F, 0x8D5D08,
    0x560330, 0x46FC7B, 0x6BABF0, 0xCFBC20, 0x9AF436, 0x1DA9E3,
)
# 24-bit fraction digits of x*2/pi kept by the table path. Seven digits
# leave about 2**-140 of absolute error, far below the closest approach of
# any double to a multiple of pi/2 (about 2**-61).
FRACTION_DIGITS = 7
# 2**(-24*i) for i = 0..FRACTION_DIGITS
_DIGIT_SCALE = tuple(pow2(-24 * i) for i in range(FRACTION_DIGITS + 1))

INV_LN2 = 1.44269504088896338700e00
LN2_HI = 6.93147180369123816490e-01
LN2_LO = 1.90821492927058770002e-10


class ReducedArgument(NamedTuple):
    quadrant: int
    hi: float
    lo: float
    degraded: bool = False


class ExpReduction(NamedTuple):
    k: int
    hi: float
    lo: float


def rem_pio2(x: float) -> ReducedArgument:
    """Return x - k*pi/2 as hi + lo with |hi| <= pi/4, and k mod 4.

    Finite x only. Inputs at or above REDUCTION_CEILING go through the 2/pi
    table and are flagged as degraded: their remainder has a fixed absolute
    precision rather than a relative one.
    """
    if -REDUCTION_CEILING < x < REDUCTION_CEILING:
        n, hi, lo = _reduce_limbs(x)
        return ReducedArgument(n & 3, hi, lo)

    logger.debug("rem_pio2: |x| = %r is above the reduction ceiling, reducing against the 2/pi table", fabs(x))
    n, hi, lo = _reduce_table(fabs(x))
    if x < 0.0:
        n, hi, lo = -n, -hi, -lo
    return ReducedArgument(n & 3, hi, lo, True)


def _reduce_limbs(x: float) -> Tuple[int, float, float]:
    fn = (x * INV_PIO2 + TOINT) - TOINT

    # fn times each limb is exact and so is the first difference; the later
    # differences keep their rounding errors in e2 and e3
    r = x - fn * PIO2_1
    r, e2 = two_sum(r, -(fn * PIO2_2))
    r, e3 = two_sum(r, -(fn * PIO2_3))
    w = fn * PIO2_3T - (e2 + e3)

    hi = r - w
    lo = (r - hi) - w
    return int(fn), hi, lo


def _reduce_table(ax: float) -> Tuple[int, float, float]:
    """Reduce a large positive finite ax using the bits of 2/pi."""
    m, e = frexp1(ax)
    # ax == sum(xs[i] * 2**(shift - 24*i)) with 24-bit integer chunks, shift
    # a multiple of 24 so the products below line up with the binary point
    shift = 24 * -((23 - e) // 24)
    t = m * pow2(e - shift)
    xs = []
    for _ in range(3):
        d = floor(t)
        xs.append(d)
        t = (t - d) * TWO24
    xs.append(t)

    # q[k] is the coefficient of 2**(-24*k) in x*2/pi; earlier products are
    # multiples of 2**24 and vanish modulo 4. Each q[k] is an exact integer.
    first = shift // 24 - 1
    q = []
    for k in range(FRACTION_DIGITS + 1):
        s = 0.0
        for i in range(4):
            j = first + k - i
            if 0 <= j < len(IPIO2):
                s += xs[i] * IPIO2[j]
        q.append(s)

    # carry into base-2**24 digits
    digits = [0.0] * (FRACTION_DIGITS + 1)
    carry = 0.0
    for k in range(FRACTION_DIGITS, 0, -1):
        v = q[k] + carry
        carry = floor(v * TWOM24)
        digits[k] = v - carry * TWO24
    whole = q[0] + carry
    n = whole - floor(whole * 0.25) * 4.0

    # round to the nearest quadrant; past one half take the digits of 1 - f
    sign = 1.0
    if digits[1] >= TWO23:
        n += 1.0
        sign = -1.0
        borrow = 0.0
        for k in range(FRACTION_DIGITS, 0, -1):
            v = -digits[k] - borrow
            if v < 0.0:
                v += TWO24
                borrow = 1.0
            else:
                borrow = 0.0
            digits[k] = v

    # fraction as hi + lo, summing small digits first
    hi = 0.0
    for k in range(FRACTION_DIGITS, 0, -1):
        hi += digits[k] * _DIGIT_SCALE[k]
    lo = digits[1] * _DIGIT_SCALE[1] - hi
    for k in range(2, FRACTION_DIGITS + 1):
        lo += digits[k] * _DIGIT_SCALE[k]
    f = hi + lo
    lo -= f - hi

    p, pe = two_prod(f, HALF_PI)
    pe += f * PIO2_LO + lo * HALF_PI
    y0 = p + pe
    y1 = pe - (y0 - p)
    return int(n), sign * y0, sign * y1


def rem_ln2(x: float) -> ExpReduction:
    """Return k and x - k*ln2 as hi - lo; hi is exact since LN2_HI has 32 bits."""
    kf = (x * INV_LN2 + TOINT) - TOINT
    return ExpReduction(int(kf), x - kf * LN2_HI, kf * LN2_LO)
