#!/usr/bin/env python3

from __future__ import annotations

import math
import random

from constmath.inverse import acos, asin, atan, atan2
from constmath.primitives import INF, NAN
from constmath.trig import sin
from constmath.utils import f2u, ulp_distance

SPECIALS = [0.0, -0.0, 1.0, -1.0, 0.5, -2.0, INF, -INF, NAN, 1e-300, -1e-300, 1e300, -1e300, 5e-324]


def test_atan_ulp() -> None:
    random.seed(42)
    xs = [random.uniform(-3.0, 3.0) for _ in range(3000)]
    xs += [random.uniform(-1000.0, 1000.0) for _ in range(1000)]
    xs += [math.ldexp(random.uniform(1.0, 2.0), random.randint(-80, 80)) for _ in range(1000)]
    xs += [0.4375, 0.6875, 1.1875, 2.4375, 1e-9, 7e-9, 1e20, 1e30, -1e30, 5e-324]
    for x in xs:
        d = ulp_distance(atan(x), math.atan(x))
        assert d <= 2, f"atan ulp error {d} at x={x!r}"


def test_atan2_ulp() -> None:
    random.seed(42)
    for _ in range(3000):
        y = random.uniform(-10.0, 10.0)
        x = random.uniform(-10.0, 10.0)
        d = ulp_distance(atan2(y, x), math.atan2(y, x))
        assert d <= 3, f"atan2 ulp error {d} at ({y!r}, {x!r})"


def test_atan2_special_table() -> None:
    for y in SPECIALS:
        for x in SPECIALS:
            got = atan2(y, x)
            want = math.atan2(y, x)
            if math.isnan(want):
                assert math.isnan(got), f"atan2({y!r}, {x!r}) should be NaN"
                continue
            assert ulp_distance(got, want) <= 3, f"atan2({y!r}, {x!r}): got={got!r} want={want!r}"
            assert math.copysign(1.0, got) == math.copysign(1.0, want), f"atan2({y!r}, {x!r}) sign"


def test_atan2_exact_values() -> None:
    assert f2u(atan2(0.0, 0.0)) == f2u(0.0)
    assert f2u(atan2(-0.0, 0.0)) == f2u(-0.0)
    assert atan2(0.0, -0.0) == math.pi
    assert atan2(-0.0, -0.0) == -math.pi
    assert atan2(1.0, 0.0) == math.pi / 2.0
    assert atan2(-1.0, -0.0) == -math.pi / 2.0
    assert atan2(INF, INF) == math.pi / 4.0
    assert atan2(-INF, -INF) == -3.0 * math.pi / 4.0
    assert atan2(1.0, -INF) == math.pi
    assert f2u(atan2(-1.0, INF)) == f2u(-0.0)


def test_asin_acos_ulp() -> None:
    random.seed(42)
    xs = [random.uniform(-1.0, 1.0) for _ in range(3000)]
    xs += [math.ldexp(random.uniform(-1.0, 1.0), random.randint(-60, -1)) for _ in range(500)]
    xs += [1.0, -1.0, math.nextafter(1.0, 0.0), math.nextafter(-1.0, 0.0), 0.5, -0.5, 0.999, -0.999, 1e-300]
    for x in xs:
        d = ulp_distance(asin(x), math.asin(x))
        assert d <= 4, f"asin ulp error {d} at x={x!r}"
        d = ulp_distance(acos(x), math.acos(x))
        assert d <= 4, f"acos ulp error {d} at x={x!r}"


def test_asin_acos_edges() -> None:
    assert asin(1.0) == math.pi / 2.0
    assert asin(-1.0) == -math.pi / 2.0
    assert f2u(asin(-0.0)) == f2u(-0.0)
    assert acos(1.0) == 0.0
    assert acos(-1.0) == math.pi
    assert acos(0.0) == math.pi / 2.0
    for x in (1.0000000000000002, -1.0000000000000002, 2.0, -5.0, INF, -INF, NAN):
        assert math.isnan(asin(x))
        assert math.isnan(acos(x))
    assert math.isnan(atan(NAN))
    assert atan(INF) == math.pi / 2.0
    assert atan(-INF) == -math.pi / 2.0


def test_asin_of_sin_round_trip() -> None:
    random.seed(42)
    for _ in range(2000):
        x = random.uniform(-1.4, 1.4)
        assert abs(asin(sin(x)) - x) <= 1e-14, f"asin(sin(x)) at x={x!r}"


def main() -> None:
    test_atan_ulp()
    test_atan2_ulp()
    test_atan2_special_table()
    test_atan2_exact_values()
    test_asin_acos_ulp()
    test_asin_acos_edges()
    test_asin_of_sin_round_trip()
    print("inverse_test: PASS")


if __name__ == "__main__":
    main()
