#!/usr/bin/env python3

from __future__ import annotations

import math
import random

import pytest

from constmath import trig
from constmath.dispatch import BINARY, KERNELS, RUNTIME, RUNTIME_ULP_BUDGET, Dispatcher
from constmath.primitives import INF
from constmath.utils import f2u, ulp_distance

# moderate inputs on which the two paths are expected to agree
DOMAINS = {
    "sin": (-50.0, 50.0),
    "cos": (-50.0, 50.0),
    "tan": (-50.0, 50.0),
    "cot": (-50.0, 50.0),
    "csc": (-50.0, 50.0),
    "sec": (-50.0, 50.0),
    "asin": (-1.0, 1.0),
    "acos": (-1.0, 1.0),
    "atan": (-100.0, 100.0),
    "sinh": (-700.0, 700.0),
    "cosh": (-700.0, 700.0),
    "tanh": (-30.0, 30.0),
    "asinh": (-1e4, 1e4),
    "acosh": (1.0, 1e4),
    "atanh": (-0.999, 0.999),
    "exp": (-700.0, 700.0),
    "expm1": (-30.0, 30.0),
    "ln": (1e-10, 1e10),
    "log1p": (-0.9, 100.0),
    "sqrt": (0.0, 1e10),
    "floor": (-1e6, 1e6),
    "fabs": (-1e6, 1e6),
    "factorial": (0.0, 20.0),
}


def test_tables_cover_the_same_names() -> None:
    assert set(KERNELS) == set(RUNTIME)
    assert BINARY <= set(KERNELS)
    assert set(DOMAINS) | BINARY == set(KERNELS)


def test_resolve_selects_path() -> None:
    core = Dispatcher()
    fast = Dispatcher(accelerated=True)
    assert core.resolve("sin") is trig.sin
    assert fast.resolve("sin") is RUNTIME["sin"]
    assert core("cos", 0.0) == 1.0
    assert fast("atan2", 1.0, 1.0) == math.atan2(1.0, 1.0)
    assert repr(fast) == "Dispatcher(accelerated=True)"


def test_unknown_name_raises_key_error() -> None:
    for d in (Dispatcher(), Dispatcher(accelerated=True)):
        with pytest.raises(KeyError):
            d.resolve("log10")
        with pytest.raises(KeyError):
            d("nope", 1.0)


def test_runtime_path_never_raises() -> None:
    fast = Dispatcher(accelerated=True)
    assert math.isnan(fast("sqrt", -1.0))
    assert math.isnan(fast("ln", -1.0))
    assert fast("ln", 0.0) == -INF
    assert fast("exp", 1000.0) == INF
    assert fast("sinh", -1000.0) == -INF
    assert math.isnan(fast("sin", INF))
    assert math.isnan(fast("atanh", 1.0))
    assert fast("cot", -0.0) == -INF
    assert fast("pow", 0.0, -1.0) == INF
    assert fast("factorial", 171.0) == INF
    assert fast("factorial", 1e300) == INF
    assert math.isnan(fast("factorial", 2.5))
    assert math.isnan(fast("factorial", -1.0))


def test_runtime_floor_keeps_float_and_sign() -> None:
    fast = Dispatcher(accelerated=True)
    for x in (-0.0, 0.0, -0.5, 0.5, 2.5, -2.5, 1e300, INF, -INF):
        got = fast("floor", x)
        assert isinstance(got, float)
        assert f2u(got) == f2u(KERNELS["floor"](x))
    assert math.isnan(fast("floor", float("nan")))


def test_paths_agree_within_budget() -> None:
    random.seed(42)
    core = Dispatcher()
    fast = Dispatcher(accelerated=True)
    for name, (lo, hi) in DOMAINS.items():
        for _ in range(300):
            x = random.uniform(lo, hi)
            if name == "factorial":
                x = float(round(x))
            d = ulp_distance(core(name, x), fast(name, x))
            assert d <= RUNTIME_ULP_BUDGET, f"{name}({x!r}) paths differ by {d} ulp"

    for _ in range(300):
        y = random.uniform(-10.0, 10.0)
        x = random.uniform(-10.0, 10.0)
        assert ulp_distance(core("atan2", y, x), fast("atan2", y, x)) <= RUNTIME_ULP_BUDGET
        assert ulp_distance(core("copysign", y, x), fast("copysign", y, x)) == 0
        b = random.uniform(0.5, 2.0)
        e = random.uniform(-3.0, 3.0)
        assert ulp_distance(core("pow", b, e), fast("pow", b, e)) <= RUNTIME_ULP_BUDGET


def main() -> None:
    test_tables_cover_the_same_names()
    test_resolve_selects_path()
    test_unknown_name_raises_key_error()
    test_runtime_path_never_raises()
    test_runtime_floor_keeps_float_and_sign()
    test_paths_agree_within_budget()
    print("dispatch_test: PASS")


if __name__ == "__main__":
    main()
