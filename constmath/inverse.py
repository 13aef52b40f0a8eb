"""atan, atan2, asin and acos.

atan reduces |x| to one of five intervals by the addition formula
atan(x) = atan(c) + atan((x - c) / (1 + c*x)) with c in {0, 1/2, 1, 3/2, inf}.
asin and acos are expressed through atan2 so that no square root of a
difference close to zero is ever taken.
"""

from __future__ import annotations

from .polynomial import horner
from .primitives import NAN, fabs, is_inf, is_sign_negative, sqrt
from .reduction import HALF_PI, PI, QUARTER_PI

# atan(c) for c = 1/2, 1, 3/2, inf as hi + lo
ATAN_HI = (
    4.63647609000806093515e-01,
    7.85398163397448278999e-01,
    9.82793723247329054082e-01,
    1.57079632679489655800e00,
)
ATAN_LO = (
    2.26987774529616870924e-17,
    3.06161699786838301793e-17,
    1.39033110312309984516e-17,
    6.12323399573676603587e-17,
)

# aT10, aT8, ..., aT0 and aT9, aT7, ..., aT1, both in w = x**4
AT_EVEN = (
    1.62858201153657823623e-02,
    4.97687799461593236017e-02,
    6.66107313738753120669e-02,
    9.09088713343650656196e-02,
    1.42857142725034663711e-01,
    3.33333333333329318027e-01,
)
AT_ODD = (
    -3.65315727442169155270e-02,
    -5.83357013379057348645e-02,
    -7.69187620504482999495e-02,
    -1.11111104054623557880e-01,
    -1.99999999998764832476e-01,
)

PI_LO = 1.2246467991473531772e-16
THREE_QUARTER_PI = 2.35619449019234483700e00

TWO66 = 7.378697629483821e19
TWO60 = 1.152921504606847e18
TWOM27 = 7.450580596923828e-09


def atan(x: float) -> float:
    if x != x:
        return x
    ax = fabs(x)
    if ax >= TWO66:
        z = ATAN_HI[3] + ATAN_LO[3]
        return -z if x < 0.0 else z

    if ax < 0.4375:
        if ax < TWOM27:
            return x
        idx = -1
        t = x
    elif ax < 0.6875:
        idx = 0
        t = (2.0 * ax - 1.0) / (2.0 + ax)
    elif ax < 1.1875:
        idx = 1
        t = (ax - 1.0) / (ax + 1.0)
    elif ax < 2.4375:
        idx = 2
        t = (ax - 1.5) / (1.0 + 1.5 * ax)
    else:
        idx = 3
        t = -1.0 / ax

    z = t * t
    w = z * z
    s1 = z * horner(w, AT_EVEN)
    s2 = w * horner(w, AT_ODD)
    if idx < 0:
        return t - t * (s1 + s2)
    z = ATAN_HI[idx] - ((t * (s1 + s2) - ATAN_LO[idx]) - t)
    return -z if x < 0.0 else z


def atan2(y: float, x: float) -> float:
    """Angle of the point (x, y), in [-pi, pi].

    atan2(+-0, +0) is +-0 and atan2(+-0, -0) is +-pi.
    """
    if x != x or y != y:
        return NAN
    if x == 1.0:
        return atan(y)

    # bit 0: sign of y, bit 1: sign of x
    m = (2 if is_sign_negative(x) else 0) + (1 if is_sign_negative(y) else 0)

    if y == 0.0:
        if m < 2:
            return y
        return PI if m == 2 else -PI
    if x == 0.0:
        return -HALF_PI if y < 0.0 else HALF_PI

    if is_inf(x):
        if is_inf(y):
            return (QUARTER_PI, -QUARTER_PI, THREE_QUARTER_PI, -THREE_QUARTER_PI)[m]
        return (0.0, -0.0, PI, -PI)[m]
    if is_inf(y):
        return -HALF_PI if y < 0.0 else HALF_PI

    ay = fabs(y)
    ax = fabs(x)
    if ay > ax * TWO60:
        z = HALF_PI + 0.5 * PI_LO
        m &= 1
    elif m > 1 and ay * TWO60 < ax:
        z = 0.0
    else:
        z = atan(ay / ax)

    if m == 0:
        return z
    if m == 1:
        return -z
    if m == 2:
        return PI - (z - PI_LO)
    return (z - PI_LO) - PI


def asin(x: float) -> float:
    if x != x:
        return x
    if x > 1.0 or x < -1.0:
        return NAN
    if x == 0.0:
        return x
    # (1-x)*(1+x) is 1 - x*x without cancellation near |x| = 1
    return atan2(x, sqrt((1.0 - x) * (1.0 + x)))


def acos(x: float) -> float:
    if x != x:
        return x
    if x > 1.0 or x < -1.0:
        return NAN
    return atan2(sqrt((1.0 - x) * (1.0 + x)), x)
