from __future__ import annotations

from .explog import O_THRESHOLD, exp, expm1, ln, log1p
from .primitives import INF, NAN, fabs, is_inf, sqrt

LN2 = 6.93147180559945286227e-01
HALF_LN2 = 3.46573590279972654709e-01
# ln(2 * MAX_FLOAT): sinh and cosh overflow above this
OVERFLOW = 7.10475860073943863426e02

TWO26 = 67108864.0
TWOM26 = 1.4901161193847656e-08
TWOM28 = 3.725290298461914e-09
TWOM55 = 2.7755575615628914e-17
# largest double below 1: tanh of a finite argument never reaches +-1
BELOW_ONE = 0.99999999999999988898


def sinh(x: float) -> float:
    if x != x or is_inf(x):
        return x
    h = -0.5 if x < 0.0 else 0.5
    ax = fabs(x)

    if ax < 22.0:
        if ax < TWOM28:
            return x
        t = expm1(ax)
        if ax < 1.0:
            return h * (2.0 * t - t * t / (t + 1.0))
        return h * (t + t / (t + 1.0))

    if ax < O_THRESHOLD:
        return h * exp(ax)
    if ax <= OVERFLOW:
        # exp(ax) alone would overflow before the halving
        w = exp(0.5 * ax)
        return (h * w) * w
    return -INF if x < 0.0 else INF


def cosh(x: float) -> float:
    if x != x:
        return x
    if is_inf(x):
        return INF
    ax = fabs(x)

    if ax < HALF_LN2:
        t = expm1(ax)
        w = 1.0 + t
        if ax < TWOM55:
            return w
        return 1.0 + (t * t) / (w + w)
    if ax < 22.0:
        t = exp(ax)
        return 0.5 * t + 0.5 / t
    if ax < O_THRESHOLD:
        return 0.5 * exp(ax)
    if ax <= OVERFLOW:
        w = exp(0.5 * ax)
        t = 0.5 * w
        return t * w
    return INF


def tanh(x: float) -> float:
    """Hyperbolic tangent; finite arguments stay strictly inside (-1, 1)."""
    if x != x:
        return x
    if is_inf(x):
        return -1.0 if x < 0.0 else 1.0
    ax = fabs(x)

    if ax < 22.0:
        if ax < TWOM55:
            return x
        if ax >= 1.0:
            t = expm1(ax + ax)
            z = 1.0 - 2.0 / (t + 2.0)
            if z >= 1.0:
                z = BELOW_ONE
        else:
            t = expm1(-(ax + ax))
            z = -t / (t + 2.0)
    else:
        z = BELOW_ONE
    return -z if x < 0.0 else z


def asinh(x: float) -> float:
    if x != x or is_inf(x):
        return x
    ax = fabs(x)

    if ax >= TWO26:
        w = ln(ax) + LN2
    elif ax >= 2.0:
        w = ln(2.0 * ax + 1.0 / (sqrt(x * x + 1.0) + ax))
    elif ax >= TWOM26:
        t = x * x
        w = log1p(ax + t / (1.0 + sqrt(1.0 + t)))
    else:
        return x
    return -w if x < 0.0 else w


def acosh(x: float) -> float:
    if x != x:
        return x
    if x < 1.0:
        return NAN
    if is_inf(x):
        return x
    if x == 1.0:
        return 0.0

    if x >= TWO26:
        return ln(x) + LN2
    if x > 2.0:
        return ln(2.0 * x - 1.0 / (x + sqrt(x * x - 1.0)))
    t = x - 1.0
    return log1p(t + sqrt(2.0 * t + t * t))


def atanh(x: float) -> float:
    """Inverse hyperbolic tangent; NaN for |x| >= 1."""
    if x != x:
        return x
    ax = fabs(x)
    if ax >= 1.0:
        return NAN
    if ax < TWOM28:
        return x

    if ax < 0.5:
        t = ax + ax
        t = 0.5 * log1p(t + t * ax / (1.0 - ax))
    else:
        t = 0.5 * log1p((ax + ax) / (1.0 - ax))
    return -t if x < 0.0 else t
