from __future__ import annotations

from typing import Sequence


def horner(x: float, coeffs: Sequence[float]) -> float:
    """Evaluate coeffs[0]*x**n + ... + coeffs[n], highest degree first.

    Every step is a separate multiply then add, so results do not depend on
    whether the platform would fuse them.
    """
    out = coeffs[0]
    for c in coeffs[1:]:
        out = out * x + c
    return out


def horner_even(x: float, coeffs: Sequence[float]) -> float:
    return horner(x * x, coeffs)


def horner_odd(x: float, coeffs: Sequence[float]) -> float:
    return x * horner(x * x, coeffs)
