"""sin, cos, tan and their reciprocals.

Let S, C and T be sin, cos and tan on [-pi/4, pi/4]. With x reduced to
r = x - k*pi/2 and n = k mod 4:

    n    sin(x)   cos(x)   tan(x)
    0      S        C        T
    1      C       -S      -1/T
    2     -S       -C        T
    3     -C        S      -1/T
"""

from __future__ import annotations

from typing import Tuple

from .polynomial import horner
from .primitives import NAN, classify, div, fabs, split
from .reduction import QUARTER_PI, rem_pio2

TWOM26 = 1.4901161193847656e-08
TWOM27 = 7.450580596923828e-09
TWOM28 = 3.725290298461914e-09

# fdlibm kernel_sin coefficients, S6 first
SIN_COEFFS = (
    1.58969099521155010221e-10,
    -2.50507602534068634195e-08,
    2.75573137070700676789e-06,
    -1.98412698298579493134e-04,
    8.33333333332248946124e-03,
)
S1 = -1.66666666666666324348e-01

# fdlibm kernel_cos coefficients, C6 first
COS_COEFFS = (
    -1.13596475577881948265e-11,
    2.08757232129817482790e-09,
    -2.75573143513906633035e-07,
    2.48015872894767294178e-05,
    -1.38888888888741095749e-03,
    4.16666666666666019037e-02,
)

# fdlibm kernel_tan: T0, then T11, T9, ..., T1 and T12, T10, ..., T2 in w = x**4
T0 = 3.33333333333334091986e-01
TAN_ODD = (
    -1.85586374855275456654e-05,
    7.81794442939557092300e-05,
    5.88041240820264096874e-04,
    3.59207910759131235356e-03,
    2.18694882948595424599e-02,
    1.33333333333201242699e-01,
)
TAN_EVEN = (
    2.59073051863633712884e-05,
    7.14072491382608190305e-05,
    2.46463134818469906812e-04,
    1.45620945432529025516e-03,
    8.86323982359930005737e-03,
    5.39682539762260521377e-02,
)
PIO4_LO = 3.06161699786838301793e-17
TAN_BIG = 0.6744


def k_sin(x: float, y: float, iy: int) -> float:
    """sin(x + y) on [-pi/4, pi/4]; y is ignored when iy == 0."""
    z = x * x
    v = z * x
    r = horner(z, SIN_COEFFS)
    if iy == 0:
        return x + v * (S1 + z * r)
    return x - ((z * (0.5 * y - v * r) - y) - v * S1)


def k_cos(x: float, y: float) -> float:
    """cos(x + y) on [-pi/4, pi/4]."""
    z = x * x
    r = z * horner(z, COS_COEFFS)
    hz = 0.5 * z
    w = 1.0 - hz
    return w + (((1.0 - w) - hz) + (z * r - x * y))


def k_tan(x: float, y: float, iy: int) -> float:
    """tan(x + y) when iy == 1, -1/tan(x + y) when iy == -1."""
    negative = x < 0.0
    big = fabs(x) >= TAN_BIG
    if big:
        # tan(pi/4 - x) has a better behaved series near pi/4
        if negative:
            x = -x
            y = -y
        x = (QUARTER_PI - x) + (PIO4_LO - y)
        y = 0.0

    z = x * x
    w = z * z
    r = horner(w, TAN_ODD)
    v = z * horner(w, TAN_EVEN)
    s = z * x
    r = y + z * (s * (r + v) + y)
    r += T0 * s
    w = x + r

    if big:
        v = float(iy)
        out = v - 2.0 * (x - (w * w / (w + v) - r))
        return -out if negative else out
    if iy == 1:
        return w

    # -1/(x + r) without losing the low part of r
    z, _ = split(w)
    v = r - (z - x)
    a = div(-1.0, w)
    t, _ = split(a)
    s = 1.0 + t * z
    return t + a * (s + t * v)


def sin(x: float) -> float:
    c = classify(x)
    if c.is_special:
        return NAN
    if fabs(x) <= QUARTER_PI:
        if fabs(x) < TWOM26:
            return x
        return k_sin(x, 0.0, 0)

    n, y0, y1, _ = rem_pio2(x)
    if n == 0:
        return k_sin(y0, y1, 1)
    if n == 1:
        return k_cos(y0, y1)
    if n == 2:
        return -k_sin(y0, y1, 1)
    return -k_cos(y0, y1)


def cos(x: float) -> float:
    c = classify(x)
    if c.is_special:
        return NAN
    if fabs(x) <= QUARTER_PI:
        if fabs(x) < TWOM27:
            return 1.0
        return k_cos(x, 0.0)

    n, y0, y1, _ = rem_pio2(x)
    if n == 0:
        return k_cos(y0, y1)
    if n == 1:
        return -k_sin(y0, y1, 1)
    if n == 2:
        return -k_cos(y0, y1)
    return k_sin(y0, y1, 1)


def sincos(x: float) -> Tuple[float, float]:
    """Return (sin(x), cos(x)) from a single reduction."""
    c = classify(x)
    if c.is_special:
        return NAN, NAN
    if fabs(x) <= QUARTER_PI:
        if fabs(x) < TWOM27:
            return x, 1.0
        return k_sin(x, 0.0, 0), k_cos(x, 0.0)

    n, y0, y1, _ = rem_pio2(x)
    s = k_sin(y0, y1, 1)
    co = k_cos(y0, y1)
    if n == 0:
        return s, co
    if n == 1:
        return co, -s
    if n == 2:
        return -s, -co
    return -co, s


def tan(x: float) -> float:
    c = classify(x)
    if c.is_special:
        return NAN
    if fabs(x) <= QUARTER_PI:
        if fabs(x) < TWOM28:
            return x
        return k_tan(x, 0.0, 1)

    n, y0, y1, _ = rem_pio2(x)
    return k_tan(y0, y1, 1 - ((n & 1) << 1))


def cot(x: float) -> float:
    """Cotangent; cot(+-0) is +-inf."""
    c = classify(x)
    if c.is_special:
        return NAN
    if fabs(x) < TWOM28:
        # 1/x - x/3 rounds to 1/x; also gives the signed infinity at zero
        return div(1.0, x)
    if fabs(x) <= QUARTER_PI:
        return -k_tan(x, 0.0, -1)

    n, y0, y1, _ = rem_pio2(x)
    # cot is the tan kernel with the quadrant parity flipped
    return -k_tan(y0, y1, ((n & 1) << 1) - 1)


def csc(x: float) -> float:
    return div(1.0, sin(x))


def sec(x: float) -> float:
    return div(1.0, cos(x))
