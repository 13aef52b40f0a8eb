#!/usr/bin/env python3
"""Command-line front end: evaluate, compare against math, derive coefficients."""

from __future__ import annotations

import argparse
import logging
import math
import random
from typing import Callable, Dict, List, NamedTuple, Sequence, Tuple

from .dispatch import BINARY, KERNELS, RUNTIME, RUNTIME_ULP_BUDGET, Dispatcher
from .minimax import remez_odd, report_lines
from .utils import same_bits, ulp_distance

Sampler = Callable[[random.Random], Tuple[float, ...]]


def _uniform(lo: float, hi: float) -> Sampler:
    return lambda rng: (rng.uniform(lo, hi),)


def _wide(lo_exp: int, hi_exp: int) -> Sampler:
    # positive values spread evenly over binary exponents
    return lambda rng: (math.ldexp(rng.uniform(1.0, 2.0), rng.randint(lo_exp, hi_exp)),)


def _pair(xs: Tuple[float, float], ys: Tuple[float, float]) -> Sampler:
    return lambda rng: (rng.uniform(*xs), rng.uniform(*ys))


SAMPLERS: Dict[str, Sampler] = {
    "sin": _uniform(-100.0, 100.0),
    "cos": _uniform(-100.0, 100.0),
    "tan": _uniform(-100.0, 100.0),
    "cot": _uniform(-100.0, 100.0),
    "csc": _uniform(-100.0, 100.0),
    "sec": _uniform(-100.0, 100.0),
    "asin": _uniform(-1.0, 1.0),
    "acos": _uniform(-1.0, 1.0),
    "atan": _uniform(-1000.0, 1000.0),
    "atan2": _pair((-10.0, 10.0), (-10.0, 10.0)),
    "sinh": _uniform(-710.0, 710.0),
    "cosh": _uniform(-710.0, 710.0),
    "tanh": _uniform(-30.0, 30.0),
    "asinh": _uniform(-1000.0, 1000.0),
    "acosh": _uniform(1.0, 1000.0),
    "atanh": _uniform(-1.0, 1.0),
    "exp": _uniform(-745.0, 709.0),
    "expm1": _uniform(-50.0, 50.0),
    "ln": _wide(-1000, 1000),
    "log1p": _uniform(-1.0, 10.0),
    "pow": _pair((0.1, 10.0), (-20.0, 20.0)),
    "sqrt": _wide(-1000, 1000),
    "floor": _uniform(-1e6, 1e6),
    "fabs": _uniform(-1e6, 1e6),
    "copysign": _pair((-10.0, 10.0), (-10.0, 10.0)),
    "factorial": lambda rng: (float(rng.randint(0, 170)),),
}

HALF_PI = math.pi / 2.0


def boundary_args(name: str) -> List[Tuple[float, ...]]:
    """Edge inputs for one function: zeros, infinities, NaN and domain edges."""
    common = [0.0, -0.0, float("inf"), float("-inf"), float("nan"), 5e-324, -5e-324]
    if name in ("sin", "cos", "tan", "cot", "csc", "sec"):
        extra = [k * HALF_PI for k in range(1, 9)] + [-k * HALF_PI for k in range(1, 9)]
        extra += [math.nextafter(v, 0.0) for v in extra]
        extra += [1e-9, 1e6, 1e15]
    elif name in ("asin", "acos", "atanh"):
        extra = [1.0, -1.0, math.nextafter(1.0, 0.0), math.nextafter(-1.0, 0.0), 0.5, -0.5]
    elif name in ("exp", "expm1", "sinh", "cosh", "tanh"):
        extra = [709.78, -745.0, 22.0, -22.0, 1e-10, 0.34, 1.0, -1.0]
    elif name in ("ln", "log1p", "acosh", "sqrt"):
        extra = [1.0, math.nextafter(1.0, 2.0), math.nextafter(1.0, 0.0), 2.0, 1.7976931348623157e308, 2.2250738585072014e-308]
    else:
        extra = [0.5, -0.5, 1.0, -1.0, 1e300, -1e300]

    if name in BINARY:
        seeds = [0.0, -0.0, 1.0, -1.0, float("inf"), float("-inf"), 0.5, 2.0]
        return [(a, b) for a in seeds for b in seeds] + [(float("nan"), 1.0), (1.0, float("nan"))]
    return [(v,) for v in common + extra]


class CompareRow(NamedTuple):
    name: str
    total: int
    diff_count: int
    max_ulp: int
    max_diff: float


def compare_function(name: str, samples: int, rng: random.Random) -> CompareRow:
    core = KERNELS[name]
    ref = RUNTIME[name]
    draw = SAMPLERS[name]
    cases = boundary_args(name) + [draw(rng) for _ in range(samples)]

    diff_count = 0
    max_ulp = 0
    max_diff = 0.0
    for args in cases:
        got = core(*args)
        want = ref(*args)
        if same_bits(got, want):
            continue
        diff_count += 1
        max_ulp = max(max_ulp, ulp_distance(got, want))
        if math.isfinite(got) and math.isfinite(want):
            max_diff = max(max_diff, abs(got - want))
        elif got != want and not (got != got and want != want):
            max_diff = float("inf")
    return CompareRow(name, len(cases), diff_count, max_ulp, max_diff)


def cmd_eval(name: str, args: Sequence[float], check: bool, runtime: bool) -> None:
    dispatcher = Dispatcher(accelerated=runtime)
    value = dispatcher(name, *args)
    shown = ", ".join(repr(a) for a in args)
    path = "runtime" if runtime else "core"
    print(f"{name}({shown}) = {value!r} [{path}]")
    if check:
        want = RUNTIME[name](*args)
        print(f"math = {want!r} | ulp = {ulp_distance(value, want)}")


def cmd_compare(names: Sequence[str], samples: int, seed: int) -> None:
    rng = random.Random(seed)
    print("Func | Total Tests | Diff Count | Max ULP | Max Diff")
    for name in names:
        row = compare_function(name, samples, rng)
        flag = "  <- above budget" if row.max_ulp > RUNTIME_ULP_BUDGET else ""
        print(f"{row.name} | {row.total} | {row.diff_count} | {row.max_ulp} | {row.max_diff:.3e}{flag}")


def cmd_minimax(degree_n: int, interval_a: float, max_iter: int, grid_n: int, tol: float) -> None:
    result = remez_odd(degree_n=degree_n, interval_a=interval_a, max_iter=max_iter, grid_n=grid_n, tol=tol)
    for line in report_lines(result, degree_n, interval_a):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="constmath", description="elementary functions from float arithmetic")
    parser.add_argument("--verbose", action="store_true", help="log debug records, e.g. degraded reductions")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_eval = sub.add_parser("eval", help="evaluate one function")
    p_eval.add_argument("func", choices=sorted(KERNELS))
    p_eval.add_argument("x", type=float)
    p_eval.add_argument("y", type=float, nargs="?", default=None)
    p_eval.add_argument("--check", action="store_true", help="also print the math module value and ULP distance")
    p_eval.add_argument("--runtime", action="store_true", help="evaluate through the math module path")

    p_cmp = sub.add_parser("compare", help="sweep random and edge inputs against math")
    p_cmp.add_argument("--func", action="append", default=None, help="function name, repeatable; default all")
    p_cmp.add_argument("--samples", type=int, default=2000)
    p_cmp.add_argument("--seed", type=int, default=42)

    p_mm = sub.add_parser("minimax", help="Remez exchange for an odd sin polynomial")
    p_mm.add_argument("--degree-n", type=int, default=6, help="n in odd polynomial up to x^(2n+1)")
    p_mm.add_argument("--interval-a", type=float, default=math.pi / 4.0, help="approximation interval is [-a, a]")
    p_mm.add_argument("--max-iter", type=int, default=20)
    p_mm.add_argument("--grid-n", type=int, default=20000)
    p_mm.add_argument("--tol", type=float, default=1e-15)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "eval":
        binary = args.func in BINARY
        if binary and args.y is None:
            parser.error(f"{args.func} takes two arguments")
        if not binary and args.y is not None:
            parser.error(f"{args.func} takes one argument")
        operands = (args.x, args.y) if binary else (args.x,)
        cmd_eval(args.func, operands, args.check, args.runtime)
    elif args.cmd == "compare":
        names = args.func or sorted(KERNELS)
        unknown = [n for n in names if n not in KERNELS]
        if unknown:
            parser.error(f"unknown function: {', '.join(unknown)}")
        cmd_compare(names, args.samples, args.seed)
    else:
        cmd_minimax(args.degree_n, args.interval_a, args.max_iter, args.grid_n, args.tol)


if __name__ == "__main__":
    main()
