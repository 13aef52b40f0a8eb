"""exp, ln, expm1, log1p and pow."""

from __future__ import annotations

from .polynomial import horner
from .primitives import (
    INF,
    MAX_FLOAT,
    NAN,
    FloatClass,
    classify,
    div,
    fabs,
    floor,
    frexp1,
    scalbn,
    two_prod,
    two_sum,
)
from .reduction import LN2_HI, LN2_LO, rem_ln2

O_THRESHOLD = 7.09782712893383973096e02
U_THRESHOLD = -7.45133219101941108420e02
HALF_LN2 = 3.46573590279972654709e-01
SQRT2 = 1.41421356237309514547e00

TWOM28 = 3.725290298461914e-09
TWOM54 = 5.551115123125783e-17
TWO64 = 18446744073709551616.0
# integral exponents up to this size are raised by squaring in double-double
POW_INT_LIMIT = 1024.0

# exp(r) = 1 + r + r*c/(2 - c), c = r - r**2 * P(r**2); P5 first
EXP_COEFFS = (
    4.13813679705723846039e-08,
    -1.65339022054652515390e-06,
    6.61375632143793436117e-05,
    -2.77777777770155933842e-03,
    1.66666666666666019037e-01,
)

# ln(1+f) = 2s + s*R(s*s): Lg2, Lg4, Lg6 in w = s**4, then Lg1, Lg3, Lg5, Lg7
LG_EVEN = (
    1.531383769920937332e-01,
    2.222219843214978396e-01,
    3.999999999940941908e-01,
)
LG_ODD = (
    1.479819860511658591e-01,
    1.818357216161805012e-01,
    2.857142874366239149e-01,
    6.666666666666735130e-01,
)

# 2/3 as hi + lo (lo is 2**-53 / 3)
TWO_THIRDS = 6.66666666666666629659e-01
TWO_THIRDS_LO = 3.70074341541718846808e-17
# 2/(2k+1) for k = 13 down to 2: the atanh series past its cubic term, in s*s
ATANH_TAIL = tuple(2.0 / (2 * k + 1) for k in range(13, 1, -1))


def exp(x: float) -> float:
    if x != x:
        return x
    if x > O_THRESHOLD:
        return INF
    if x < U_THRESHOLD:
        return 0.0

    ax = fabs(x)
    if ax < TWOM28:
        return 1.0 + x
    if ax > HALF_LN2:
        k, hi, lo = rem_ln2(x)
    else:
        k, hi, lo = 0, x, 0.0

    r = hi - lo
    z = r * r
    c = r - z * horner(z, EXP_COEFFS)
    y = 1.0 - ((lo - (r * c) / (2.0 - c)) - hi)
    if k == 0:
        return y
    return scalbn(y, k)


def ln(x: float) -> float:
    """Natural logarithm."""
    if x != x:
        return x
    if x == 0.0:
        return -INF
    if x < 0.0:
        return NAN
    if x > MAX_FLOAT:
        return x
    if x == 1.0:
        return 0.0

    m, k = frexp1(x)
    if m > SQRT2:
        m *= 0.5
        k += 1
    f = m - 1.0
    dk = float(k)

    s = f / (2.0 + f)
    z = s * s
    w = z * z
    t1 = w * horner(w, LG_EVEN)
    t2 = z * horner(w, LG_ODD)
    r = t2 + t1
    hfsq = 0.5 * f * f
    return dk * LN2_HI - ((hfsq - (s * (hfsq + r) + dk * LN2_LO)) - f)


def expm1(x: float) -> float:
    """exp(x) - 1 without cancellation near zero.

    For |x| < 1 the rounded u = exp(x) is kept and (u - 1) is rescaled by
    x / ln(u), which cancels the rounding error of u to first order (Kahan).
    """
    if x != x:
        return x
    if x > O_THRESHOLD:
        return INF
    if x < -40.0:
        return -1.0
    if fabs(x) < TWOM54:
        return x

    u = exp(x)
    if u == 1.0:
        return x
    um1 = u - 1.0
    if fabs(x) < 1.0:
        return um1 * (x / ln(u))
    return um1


def log1p(x: float) -> float:
    """ln(1 + x) without cancellation near zero."""
    if x != x:
        return x
    if x < -1.0:
        return NAN
    if x == -1.0:
        return -INF
    if x > MAX_FLOAT:
        return x
    if fabs(x) < TWOM54:
        return x

    u = 1.0 + x
    if u == 1.0:
        return x
    # u - 1 is exact, so x / (u - 1) carries the rounding error of 1 + x
    return ln(u) * (x / (u - 1.0))


def _is_integral(y: float) -> bool:
    return floor(y) == y


def _is_odd_integral(y: float) -> bool:
    if not _is_integral(y):
        return False
    h = 0.5 * y
    return floor(h) != h


def _mul_dd(ah: float, al: float, bh: float, bl: float):
    p, pe = two_prod(ah, bh)
    pe += ah * bl + al * bh
    hi = p + pe
    return hi, pe - (hi - p)


def _powi(ax: float, n: int) -> float:
    """ax**n for finite ax > 0 and |n| <= POW_INT_LIMIT.

    Squares in double-double on a mantissa kept in [1, 2), carrying the binary
    exponent as an integer, so intermediates never overflow and a result that
    is representable comes out exact.
    """
    neg = n < 0
    if neg:
        n = -n
    bh, be = frexp1(ax)
    bl = 0.0
    oh, ol, oe = 1.0, 0.0, 0
    for _ in range(11):
        if n & 1:
            oh, ol = _mul_dd(oh, ol, bh, bl)
            oe += be
            if oh >= 2.0:
                oh *= 0.5
                ol *= 0.5
                oe += 1
        bh, bl = _mul_dd(bh, bl, bh, bl)
        be += be
        if bh >= 2.0:
            bh *= 0.5
            bl *= 0.5
            be += 1
        n >>= 1

    if not neg:
        return scalbn(oh + ol, oe)
    q = 1.0 / oh
    p, pe = two_prod(q, oh)
    r = ((1.0 - p) - pe) - q * ol
    return scalbn(q + q * r, -oe)


def _ln_dd(x: float):
    """ln(x) for finite x > 0 as hi + lo, good to about 2**-63 relative.

    Same reduction as ln, but ln(1+f) = 2s + 2s**3/3 + s**5*T(s*s) is summed
    with the first two terms in double-double.
    """
    m, k = frexp1(x)
    if m > SQRT2:
        m *= 0.5
        k += 1
    f = m - 1.0
    u = 2.0 + f
    ul = f - (u - 2.0)

    s = f / u
    p, pe = two_prod(s, u)
    sl = (((f - p) - pe) - s * ul) / u

    z, zl = two_prod(s, s)
    zl += 2.0 * s * sl
    c, cl = two_prod(s, z)
    cl += s * zl + sl * z
    d, dl = two_prod(c, TWO_THIRDS)
    dl += c * TWO_THIRDS_LO + cl * TWO_THIRDS
    tail = c * z * horner(z, ATANH_TAIL)

    a, lo = two_sum(s + s, d)
    lo += (sl + sl) + dl + tail
    dk = float(k)
    b, be = two_sum(dk * LN2_HI, a)
    lo += be + dk * LN2_LO
    hi = b + lo
    return hi, lo - (hi - b)


def _pow_log(ax: float, y: float) -> float:
    """exp(y * ln(ax)) with the product carried in double-double."""
    if fabs(y) > TWO64:
        # |y * ln(ax)| > 2**11 for every ax != 1
        return INF if (ax > 1.0) == (y > 0.0) else 0.0
    lh, ll = _ln_dd(ax)
    zh, ze = two_prod(y, lh)
    ze += y * ll
    z = zh + ze
    zl = ze - (z - zh)
    if z > O_THRESHOLD:
        return INF
    if z < U_THRESHOLD:
        return 0.0
    out = exp(z)
    return out + out * zl


def pow(x: float, y: float) -> float:
    """x**y with the C99 special values; never raises."""
    cy = classify(y)
    if cy.is_zero:
        return 1.0
    if x == 1.0:
        return 1.0
    if x != x or y != y:
        return NAN

    cx = classify(x)
    ax = fabs(x)
    if cy is FloatClass.POS_INF or cy is FloatClass.NEG_INF:
        if ax == 1.0:
            return 1.0
        if (ax < 1.0) == (cy is FloatClass.POS_INF):
            return 0.0
        return INF

    odd = _is_odd_integral(y)
    if cx is FloatClass.POS_INF:
        return INF if y > 0.0 else 0.0
    if cx is FloatClass.NEG_INF:
        if y > 0.0:
            return -INF if odd else INF
        return -0.0 if odd else 0.0
    if cx.is_zero:
        if y > 0.0:
            return x if odd else 0.0
        # odd negative powers keep the sign of the zero
        return div(1.0, x) if odd else INF

    integral = _is_integral(y)
    if x < 0.0 and not integral:
        return NAN
    if ax == 1.0:
        return -1.0 if odd else 1.0

    if integral and fabs(y) <= POW_INT_LIMIT:
        out = _powi(ax, int(y))
    else:
        out = _pow_log(ax, y)
    return -out if x < 0.0 and odd else out
