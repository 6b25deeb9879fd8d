"""
Closed-form solvers for linear and quadratic equations.

The linear solver is exact over Rational; the quadratic solver works on
floats and reports real roots only.
"""

from __future__ import annotations

import math

from ..core.errors import ZeroCoefficientError
from .rational import Rational
from .value import DISCRIMINANT_TOLERANCE, ToReal, to_real_value


def solve_linear(a: Rational, b: Rational) -> Rational:
    """
    Solve a*x + b = 0.

    Raises:
        ZeroCoefficientError: If a is zero

    Example:
        >>> solve_linear(Rational(2), Rational(3))
        Rational(-3, 2)
    """
    if a.numerator == 0:
        raise ZeroCoefficientError("a")
    return (-b).divide(a)


def solve_quadratic(
    a: float | ToReal, b: float | ToReal, c: float | ToReal
) -> list[float]:
    """
    Real roots of a*x^2 + b*x + c = 0.

    Returns:
        - [] when there is no real root, or when a == b == 0
        - [root] for a linear equation (a == 0) or a repeated root
        - [x1, x2] with x1 the (-b + sqrt(d)) / (2a) branch

    Example:
        >>> solve_quadratic(1, -3, 2)
        [2.0, 1.0]
    """
    a, b, c = to_real_value(a), to_real_value(b), to_real_value(c)

    if a == 0.0:
        if b == 0.0:
            return []
        return [-c / b]

    d = b * b - 4.0 * a * c
    if d < 0.0:
        return []
    if abs(d) < DISCRIMINANT_TOLERANCE:
        return [-b / (2.0 * a)]

    sqrt_d = math.sqrt(d)
    return [(-b + sqrt_d) / (2.0 * a), (-b - sqrt_d) / (2.0 * a)]
