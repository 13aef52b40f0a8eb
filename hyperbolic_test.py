#!/usr/bin/env python3

from __future__ import annotations

import math
import random

from constmath.hyperbolic import acosh, asinh, atanh, cosh, sinh, tanh
from constmath.primitives import INF, NAN
from constmath.utils import f2u, ulp_distance

BUDGET = 8


def check_ulp(name: str, core, ref, xs) -> None:
    for x in xs:
        got = core(x)
        want = ref(x)
        d = ulp_distance(got, want)
        if d > BUDGET:
            raise AssertionError(f"{name} ulp error {d} at x={x!r}: got={got!r} want={want!r}")


def small(n: int) -> list:
    return [math.ldexp(random.uniform(-1.0, 1.0), random.randint(-60, 0)) for _ in range(n)]


def test_sinh_cosh_tanh_ulp() -> None:
    random.seed(42)
    xs = [random.uniform(-709.0, 709.0) for _ in range(2000)]
    xs += [random.uniform(-25.0, 25.0) for _ in range(2000)]
    xs += small(1000)
    xs += [22.0, -22.0, 21.999, 0.3465, 0.3466, 1.0, -1.0, 709.78, 710.0, -710.4]
    check_ulp("sinh", sinh, math.sinh, xs)
    check_ulp("cosh", cosh, math.cosh, xs)
    check_ulp("tanh", tanh, math.tanh, xs)


def test_inverse_hyperbolic_ulp() -> None:
    random.seed(42)
    xs = [random.uniform(-1e6, 1e6) for _ in range(1000)]
    xs += [random.uniform(-3.0, 3.0) for _ in range(2000)]
    xs += small(1000)
    xs += [math.ldexp(random.uniform(1.0, 2.0), random.randint(20, 1000)) for _ in range(500)]
    xs += [2.0, -2.0, 67108864.0, 1.5e-8, -1e300]
    check_ulp("asinh", asinh, math.asinh, xs)

    ys = [random.uniform(1.0, 3.0) for _ in range(2000)]
    ys += [random.uniform(1.0, 1e6) for _ in range(1000)]
    ys += [1.0 + abs(v) for v in small(500)]
    ys += [math.ldexp(random.uniform(1.0, 2.0), random.randint(20, 1000)) for _ in range(500)]
    ys += [1.0, 2.0, math.nextafter(1.0, 2.0), 67108864.0, 1.7976931348623157e308]
    check_ulp("acosh", acosh, math.acosh, ys)

    zs = [random.uniform(-1.0, 1.0) for _ in range(3000)]
    zs += small(1000)
    zs += [0.5, -0.5, 0.4999, math.nextafter(1.0, 0.0), math.nextafter(-1.0, 0.0), 1e-300]
    zs = [z for z in zs if abs(z) < 1.0]
    check_ulp("atanh", atanh, math.atanh, zs)


def test_special_values() -> None:
    assert f2u(tanh(0.0)) == f2u(0.0)
    assert f2u(tanh(-0.0)) == f2u(-0.0)
    assert f2u(sinh(-0.0)) == f2u(-0.0)
    assert cosh(0.0) == 1.0
    assert acosh(1.0) == 0.0
    assert f2u(asinh(-0.0)) == f2u(-0.0)
    assert f2u(atanh(-0.0)) == f2u(-0.0)

    assert sinh(INF) == INF
    assert sinh(-INF) == -INF
    assert cosh(-INF) == INF
    assert tanh(INF) == 1.0
    assert tanh(-INF) == -1.0
    assert asinh(-INF) == -INF
    assert acosh(INF) == INF
    assert sinh(711.0) == INF
    assert sinh(-711.0) == -INF
    assert cosh(-711.0) == INF
    assert math.isfinite(sinh(710.0))

    for f in (sinh, cosh, tanh, asinh, acosh, atanh):
        assert math.isnan(f(NAN))
    assert math.isnan(acosh(0.5))
    assert math.isnan(acosh(-INF))
    for x in (1.0, -1.0, 1.5, -2.0, INF):
        assert math.isnan(atanh(x)), f"atanh({x!r}) should be NaN"


def test_tanh_bounded() -> None:
    random.seed(42)
    for _ in range(3000):
        x = random.uniform(-40.0, 40.0)
        t = tanh(x)
        assert -1.0 < t < 1.0, f"tanh({x!r}) reached {t!r}"
    for x in (19.0, 20.5, 22.0, 100.0, 1e300, 1.7976931348623157e308):
        assert tanh(x) == 0.9999999999999999
        assert tanh(-x) == -0.9999999999999999
        assert ulp_distance(tanh(x), math.tanh(x)) <= 1
    assert tanh(1.0) < tanh(2.0) < tanh(3.0)


def main() -> None:
    test_sinh_cosh_tanh_ulp()
    test_inverse_hyperbolic_ulp()
    test_special_values()
    test_tanh_bounded()
    print("hyperbolic_test: PASS")


if __name__ == "__main__":
    main()
