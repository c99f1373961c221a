"""
Single-operand scientific functions.

All functions take and return plain floats and never raise. Out-of-domain
input yields NaN or a documented fallback value; the engine maps non-finite
results to the "Error" display.
"""
from typing import Callable, Dict

import numpy as np

from backend.tokens import ScientificFunction


def _ieee(fn, *args) -> float:
    # numpy follows IEEE-754 here: NaN/inf instead of exceptions
    with np.errstate(all="ignore"):
        return float(fn(*args))


def sqrt(x: float) -> float:
    return _ieee(np.sqrt, x)


def square(x: float) -> float:
    return _ieee(np.square, x)


def inverse(x: float) -> float:
    if x == 0:
        return 0.0
    return _ieee(np.reciprocal, float(x))


def sin(degrees: float) -> float:
    return _ieee(np.sin, np.radians(degrees))


def cos(degrees: float) -> float:
    return _ieee(np.cos, np.radians(degrees))


def tan(degrees: float) -> float:
    return _ieee(np.tan, np.radians(degrees))


def log10(x: float) -> float:
    if not x > 0:
        return 0.0
    return _ieee(np.log10, x)


def ln(x: float) -> float:
    if not x > 0:
        return 0.0
    return _ieee(np.log, x)


def power(base: float, exponent: float) -> float:
    return _ieee(np.power, float(base), float(exponent))


FUNCTIONS: Dict[ScientificFunction, Callable[[float], float]] = {
    ScientificFunction.SQRT: sqrt,
    ScientificFunction.SQUARE: square,
    ScientificFunction.INVERSE: inverse,
    ScientificFunction.SIN: sin,
    ScientificFunction.COS: cos,
    ScientificFunction.TAN: tan,
    ScientificFunction.LOG: log10,
    ScientificFunction.LN: ln,
}


def apply(func: ScientificFunction, x: float) -> float:
    return FUNCTIONS[func](x)
