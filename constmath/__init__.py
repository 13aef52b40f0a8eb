"""Elementary functions computed with float add, subtract, multiply, divide and compare."""

from .explog import exp, expm1, ln, log1p, pow
from .hyperbolic import acosh, asinh, atanh, cosh, sinh, tanh
from .inverse import acos, asin, atan, atan2
from .primitives import FloatClass, classify, copysign, expi, fabs, factorial, floor, sqrt
from .trig import cos, cot, csc, sec, sin, sincos, tan

__version__ = "0.1.0"

__all__ = [
    "sin",
    "cos",
    "tan",
    "cot",
    "csc",
    "sec",
    "sincos",
    "asin",
    "acos",
    "atan",
    "atan2",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    "exp",
    "expm1",
    "ln",
    "log1p",
    "pow",
    "sqrt",
    "floor",
    "fabs",
    "copysign",
    "expi",
    "factorial",
    "classify",
    "FloatClass",
]
