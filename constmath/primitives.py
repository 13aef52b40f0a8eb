"""Float primitives built from add, subtract, multiply, divide and compare.

Nothing here reads the bit pattern of a float. Exponents are found with
comparison ladders over powers of two, integers with the 2**52 rounding band.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Tuple

NAN = float("nan")
INF = float("inf")
MAX_FLOAT = 1.7976931348623157e308
MIN_NORMAL = 2.2250738585072014e-308

TWO52 = 4503599627370496.0
TWO54 = 18014398509481984.0
# 2**27 + 1, Veltkamp splitter
SPLITTER = 134217729.0

SQRT_NEWTON_STEPS = 6


class FloatClass(Enum):
    NAN = "nan"
    POS_INF = "+inf"
    NEG_INF = "-inf"
    POS_ZERO = "+0"
    NEG_ZERO = "-0"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"

    @property
    def is_special(self) -> bool:
        """NaN or an infinity: kernels return a fixed value without reducing."""
        return self in (FloatClass.NAN, FloatClass.POS_INF, FloatClass.NEG_INF)

    @property
    def is_zero(self) -> bool:
        return self in (FloatClass.POS_ZERO, FloatClass.NEG_ZERO)


def is_nan(x: float) -> bool:
    return x != x


def is_inf(x: float) -> bool:
    return x > MAX_FLOAT or x < -MAX_FLOAT


def is_finite(x: float) -> bool:
    return -MAX_FLOAT <= x <= MAX_FLOAT


def is_sign_negative(x: float) -> bool:
    """True for negative numbers and -0.0, False for NaN."""
    if x < 0.0:
        return True
    if x == 0.0:
        # float division by zero raises, so the sign of a zero has no
        # arithmetic witness; copysign only moves the sign bit
        return math.copysign(1.0, x) < 0.0
    return False


def classify(x: float) -> FloatClass:
    if x != x:
        return FloatClass.NAN
    if x > MAX_FLOAT:
        return FloatClass.POS_INF
    if x < -MAX_FLOAT:
        return FloatClass.NEG_INF
    if x == 0.0:
        return FloatClass.NEG_ZERO if is_sign_negative(x) else FloatClass.POS_ZERO
    if -MIN_NORMAL < x < MIN_NORMAL:
        return FloatClass.SUBNORMAL
    return FloatClass.NORMAL


def fabs(x: float) -> float:
    if x < 0.0:
        return -x
    if x == 0.0:
        return 0.0
    return x


def copysign(x: float, y: float) -> float:
    ax = fabs(x)
    return -ax if is_sign_negative(y) else ax


def div(a: float, b: float) -> float:
    """IEEE-754 quotient: a zero divisor gives a signed infinity or NaN."""
    if b == 0.0:
        if a != a or a == 0.0:
            return NAN
        if is_sign_negative(a) != is_sign_negative(b):
            return -INF
        return INF
    return a / b


def floor(x: float) -> float:
    if x != x or x == 0.0 or not -TWO52 < x < TWO52:
        return x
    # adding then removing 2**52 leaves the nearest integer
    if x > 0.0:
        t = (x + TWO52) - TWO52
    else:
        t = (x - TWO52) + TWO52
    if t > x:
        t -= 1.0
    return t


def pow2(n: int) -> float:
    """Exact 2.0**n for -1022 <= n <= 1023."""
    neg = n < 0
    if neg:
        n = -n
    out = 1.0
    base = 2.0
    for _ in range(11):
        if n & 1:
            out *= base
        base *= base
        n >>= 1
    return 1.0 / out if neg else out


TWO1023 = pow2(1023)
# 2**-1022 * 2**53: scaling by it never produces a subnormal
TWOM969 = pow2(-969)

# (step, 2**step, 2**-step, 2**(1 - step)) for the exponent ladder
_LADDER = tuple((s, pow2(s), pow2(-s), pow2(1 - s)) for s in (512, 256, 128, 64, 32, 16, 8, 4, 2, 1))


def scalbn(x: float, n: int) -> float:
    """x * 2**n with a single rounding, overflowing to inf and underflowing to 0."""
    if n > 1023:
        x *= TWO1023
        n -= 1023
        if n > 1023:
            x *= TWO1023
            n -= 1023
            if n > 1023:
                n = 1023
    elif n < -1022:
        x *= TWOM969
        n += 969
        if n < -1022:
            x *= TWOM969
            n += 969
            if n < -1022:
                n = -1022
    return x * pow2(n)


def frexp1(x: float) -> Tuple[float, int]:
    """Split finite non-zero x into (m, e) with 1 <= |m| < 2 and x == m * 2**e."""
    m = fabs(x)
    e = 0
    if m < MIN_NORMAL:
        m *= TWO54
        e = -54
    for step, up, down, low in _LADDER:
        if m >= up:
            m *= down
            e += step
    for step, up, down, low in _LADDER:
        if m < low:
            m *= up
            e -= step
    return (-m if x < 0.0 else m), e


def split(a: float) -> Tuple[float, float]:
    c = SPLITTER * a
    hi = c - (c - a)
    return hi, a - hi


def two_sum(a: float, b: float) -> Tuple[float, float]:
    """Knuth sum: s + err == a + b exactly, whatever the magnitudes."""
    s = a + b
    bv = s - a
    err = (a - (s - bv)) + (b - bv)
    return s, err


def two_prod(a: float, b: float) -> Tuple[float, float]:
    """Dekker product: p + err == a * b exactly."""
    p = a * b
    ah, al = split(a)
    bh, bl = split(b)
    err = ((ah * bh - p) + ah * bl + al * bh) + al * bl
    return p, err


def sqrt(x: float) -> float:
    c = classify(x)
    if c is FloatClass.NAN or c.is_zero or c is FloatClass.POS_INF:
        return x
    if x < 0.0:
        return NAN

    m, e = frexp1(x)
    if e & 1:
        m *= 2.0
        e -= 1
    # m in [1, 4); chord of sqrt shifted to halve its error, about 3%
    y = m / 3.0 + 0.7083333333333334
    for _ in range(SQRT_NEWTON_STEPS):
        y = 0.5 * (y + m / y)

    # one correction from the exact residual m - y*y
    p, err = two_prod(y, y)
    y += ((m - p) - err) / (y + y)
    return scalbn(y, e // 2)


def expi(x: float, n: int) -> float:
    """x**n for integer n by repeated squaring."""
    neg = n < 0
    if neg:
        n = -n
    out = 1.0
    base = x
    while n:
        if n & 1:
            out *= base
        base *= base
        n >>= 1
    return div(1.0, out) if neg else out


def factorial(x: float) -> float:
    if x != x or x < 0.0 or floor(x) != x:
        return NAN
    if x > 170.0:
        return INF
    out = 1.0
    while x > 1.0:
        out *= x
        x -= 1.0
    return out
