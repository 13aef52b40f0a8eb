"""Remez exchange for odd polynomial approximations.

Derives c0*x + c1*x**3 + ... + cn*x**(2n+1) minimising the worst absolute
error against an odd target on [-a, a]. By symmetry only [0, a] is sampled.
This runs offline with the platform math library as the reference; the
kernels only ever see the resulting tables.
"""

from __future__ import annotations

import math
from typing import Callable, List, NamedTuple, Sequence, Tuple

from .polynomial import horner_odd


class RemezResult(NamedTuple):
    coeffs: List[float]
    # levelled error of the last reference, signed
    reference_error: float
    max_error: float
    max_error_at: float
    iterations: int


def solve_linear_system(a: List[List[float]], b: List[float]) -> List[float]:
    """Gauss-Jordan elimination with partial pivoting. Works in place."""
    n = len(a)
    for i in range(n):
        piv = max(range(i, n), key=lambda r: abs(a[r][i]))
        if a[piv][i] == 0.0:
            raise ValueError("singular matrix in Remez system")
        if piv != i:
            a[i], a[piv] = a[piv], a[i]
            b[i], b[piv] = b[piv], b[i]

        diag = a[i][i]
        row = a[i]
        for c in range(i, n):
            row[c] /= diag
        b[i] /= diag

        for r in range(n):
            f = a[r][i]
            if r == i or f == 0.0:
                continue
            for c in range(i, n):
                a[r][c] -= f * row[c]
            b[r] -= f * b[i]
    return b


def odd_eval(x: float, coeffs: Sequence[float]) -> float:
    """c0*x + c1*x**3 + ..., coefficients lowest degree first."""
    return horner_odd(x, tuple(reversed(coeffs)))


def initial_reference(a: float, m: int) -> List[float]:
    """m Chebyshev nodes on [0, a], both ends included."""
    return [0.5 * a * (1.0 - math.cos(math.pi * i / (m - 1))) for i in range(m)]


def extrema_candidates(xs: Sequence[float], es: Sequence[float]) -> List[Tuple[float, float]]:
    out = [(xs[0], es[0])]
    for i in range(1, len(xs) - 1):
        e0, e1, e2 = es[i - 1], es[i], es[i + 1]
        if (e1 >= e0 and e1 >= e2) or (e1 <= e0 and e1 <= e2):
            out.append((xs[i], e1))
    out.append((xs[-1], es[-1]))
    return out


def alternating_reference(cands: Sequence[Tuple[float, float]], m: int) -> List[float]:
    """Pick m points whose errors alternate in sign, largest errors preferred."""
    alt: List[Tuple[float, float]] = []
    for x, e in cands:
        if e == 0.0:
            continue
        if alt and (e > 0.0) == (alt[-1][1] > 0.0):
            # same sign run: keep the larger error
            if abs(e) > abs(alt[-1][1]):
                alt[-1] = (x, e)
        else:
            alt.append((x, e))

    if len(alt) < m:
        top = sorted(cands, key=lambda t: abs(t[1]), reverse=True)[:m]
        return sorted(x for x, _ in top)

    # window of m consecutive points with the largest smallest error
    start = max(range(len(alt) - m + 1), key=lambda i: min(abs(e) for _, e in alt[i : i + m]))
    return [x for x, _ in alt[start : start + m]]


def remez_step(points: Sequence[float], degree_n: int, target: Callable[[float], float]) -> Tuple[List[float], float]:
    """Solve p(x_i) + (-1)**i * E == f(x_i) for the coefficients and E."""
    a_mat: List[List[float]] = []
    b_vec: List[float] = []
    for i, x in enumerate(points):
        row = []
        xp = x
        for _ in range(degree_n + 1):
            row.append(xp)
            xp *= x * x
        row.append(1.0 if i % 2 == 0 else -1.0)
        a_mat.append(row)
        b_vec.append(target(x))

    sol = solve_linear_system(a_mat, b_vec)
    return sol[:-1], sol[-1]


def grid_errors(coeffs: Sequence[float], a: float, grid_n: int, target: Callable[[float], float]) -> Tuple[List[float], List[float]]:
    xs = [a * i / grid_n for i in range(grid_n + 1)]
    return xs, [odd_eval(x, coeffs) - target(x) for x in xs]


def remez_odd(
    degree_n: int = 6,
    interval_a: float = math.pi / 4.0,
    max_iter: int = 20,
    grid_n: int = 20000,
    tol: float = 1e-15,
    target: Callable[[float], float] = math.sin,
) -> RemezResult:
    """Minimax odd polynomial of degree 2*degree_n + 1 for target on [-a, a]."""
    m = degree_n + 2
    pts = initial_reference(interval_a, m)

    last_max = None
    # at least one exchange, so coeffs and the grid errors below always exist
    for it in range(1, max(max_iter, 1) + 1):
        coeffs, e_ref = remez_step(pts, degree_n, target)
        xs, es = grid_errors(coeffs, interval_a, grid_n, target)
        pts = alternating_reference(extrema_candidates(xs, es), m)

        max_abs = max(abs(e) for e in es)
        if last_max is not None and abs(max_abs - last_max) < tol:
            break
        last_max = max_abs

    worst = max(range(len(xs)), key=lambda i: abs(es[i]))
    return RemezResult(coeffs, e_ref, abs(es[worst]), xs[worst], it)


def taylor_sin_coeffs(degree_n: int) -> List[float]:
    """(-1)**i / (2i+1)! for i = 0..degree_n."""
    out = []
    term = 1.0
    for i in range(degree_n + 1):
        p = 2 * i + 1
        if i:
            term /= -float((p - 1) * p)
        out.append(term)
    return out


def report_lines(result: RemezResult, degree_n: int, interval_a: float) -> List[str]:
    """Coefficient table next to the Taylor series, as printable lines."""
    lines = [
        "Model:",
        "  sin(x) ~= c0*x + c1*x^3 + ... + cn*x^(2n+1)",
        f"degree_n = {degree_n} (highest power = x^{2 * degree_n + 1})",
        f"interval = [-{interval_a}, {interval_a}]",
        f"iterations = {result.iterations}",
        f"reference_error_E ~= {result.reference_error:+.18e}",
        f"max_abs_error_on_grid ~= {result.max_error:.18e} at x={result.max_error_at:.12f}",
        "",
        "  power | minimax | taylor | diff(%)",
    ]
    for i, (c, t) in enumerate(zip(result.coeffs, taylor_sin_coeffs(degree_n))):
        diff_pct = (c - t) / t * 100.0
        lines.append(f"  x^{2 * i + 1:<2d} | {c:+.18e} | {t:+.18e} | {diff_pct:+.9e}%")
    return lines
