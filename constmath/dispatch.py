"""Choose between the arithmetic kernels and the platform math library.

The kernels never import this module. Callers that want speed at run time
build a Dispatcher(accelerated=True); everything else uses the kernels.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from . import explog, hyperbolic, inverse, primitives, trig

# largest divergence, in ULP, expected between the two paths
RUNTIME_ULP_BUDGET = 8

KERNELS: Dict[str, Callable[..., float]] = {
    "sin": trig.sin,
    "cos": trig.cos,
    "tan": trig.tan,
    "cot": trig.cot,
    "csc": trig.csc,
    "sec": trig.sec,
    "asin": inverse.asin,
    "acos": inverse.acos,
    "atan": inverse.atan,
    "atan2": inverse.atan2,
    "sinh": hyperbolic.sinh,
    "cosh": hyperbolic.cosh,
    "tanh": hyperbolic.tanh,
    "asinh": hyperbolic.asinh,
    "acosh": hyperbolic.acosh,
    "atanh": hyperbolic.atanh,
    "exp": explog.exp,
    "expm1": explog.expm1,
    "ln": explog.ln,
    "log1p": explog.log1p,
    "pow": explog.pow,
    "sqrt": primitives.sqrt,
    "floor": primitives.floor,
    "fabs": primitives.fabs,
    "copysign": primitives.copysign,
    "factorial": primitives.factorial,
}

# functions of two arguments; the rest take one
BINARY = frozenset(("atan2", "pow", "copysign"))


def _floor(x: float) -> float:
    if not math.isfinite(x):
        return x
    # math.floor returns an int, which loses -0.0
    return math.copysign(float(math.floor(x)), x)


def _factorial(x: float) -> float:
    if x != math.floor(x):
        raise ValueError("factorial() only accepts integral values")
    if x > 170.0:
        raise OverflowError("factorial() result out of range")
    return float(math.factorial(int(x)))


_FAST: Dict[str, Callable[..., float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "cot": lambda x: 1.0 / math.tan(x),
    "csc": lambda x: 1.0 / math.sin(x),
    "sec": lambda x: 1.0 / math.cos(x),
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "atan2": math.atan2,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "asinh": math.asinh,
    "acosh": math.acosh,
    "atanh": math.atanh,
    "exp": math.exp,
    "expm1": math.expm1,
    "ln": math.log,
    "log1p": math.log1p,
    "pow": math.pow,
    "sqrt": math.sqrt,
    "floor": _floor,
    "fabs": math.fabs,
    "copysign": math.copysign,
    "factorial": _factorial,
}


def _guarded(name: str) -> Callable[..., float]:
    fast = _FAST[name]
    core = KERNELS[name]

    def call(*args: float) -> float:
        # math signals domain errors and overflow by raising; the kernels
        # return the IEEE value instead
        try:
            return fast(*args)
        except (ValueError, OverflowError, ZeroDivisionError):
            return core(*args)

    call.__name__ = name
    call.__qualname__ = f"runtime_{name}"
    return call


RUNTIME: Dict[str, Callable[..., float]] = {name: _guarded(name) for name in KERNELS}


class Dispatcher:
    """Resolve function names to one evaluation path, fixed at construction."""

    def __init__(self, accelerated: bool = False) -> None:
        self.accelerated = accelerated
        self._table = RUNTIME if accelerated else KERNELS

    def resolve(self, name: str) -> Callable[..., float]:
        try:
            return self._table[name]
        except KeyError:
            raise KeyError(f"unknown function: {name}") from None

    def __call__(self, name: str, *args: float) -> float:
        return self.resolve(name)(*args)

    def __repr__(self) -> str:
        return f"Dispatcher(accelerated={self.accelerated})"
