"""
numkit - small exact-arithmetic numeric library.

Rational numbers, bounded and arbitrary-precision non-negative integers,
real-coefficient polynomials, and linear/quadratic equation solvers.
"""

from .core.errors import (
    DivisionByZeroError,
    InvalidFormatError,
    NegativeResultError,
    NegativeValueError,
    NumericError,
    NumericOverflowError,
    UnderflowError,
    ZeroCoefficientError,
)
from .math import (
    BigUnsignedInt,
    Polynomial,
    Rational,
    ToReal,
    UnsignedInt,
    solve_linear,
    solve_quadratic,
)

__version__ = "1.0.0"

__all__ = [
    "Rational",
    "UnsignedInt",
    "BigUnsignedInt",
    "Polynomial",
    "ToReal",
    "solve_linear",
    "solve_quadratic",
    "NumericError",
    "DivisionByZeroError",
    "NegativeValueError",
    "NegativeResultError",
    "UnderflowError",
    "NumericOverflowError",
    "InvalidFormatError",
    "ZeroCoefficientError",
]
