"""Element-level arithmetic shared by Vec2 and Vec3."""

from __future__ import annotations

import math

import numpy as np


def divide(a, b):
    """Divide two elements, giving inf/nan for float division by zero.

    Python floats raise on zero division, so float operands are retried through
    NumPy with IEEE semantics. Exact types (int, Fraction, Decimal) keep their
    own zero-division behavior.
    """
    try:
        return a / b
    except ZeroDivisionError:
        if not (isinstance(a, float) or isinstance(b, float)):
            raise
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(float(a), float(b)))


def sqrt(value):
    """Square root in the element's own type where the type provides one."""
    if isinstance(value, np.generic):
        return np.sqrt(value)
    if hasattr(value, "sqrt"):
        return value.sqrt()
    return math.sqrt(value)
