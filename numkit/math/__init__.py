"""
numkit.math - exact-arithmetic value types

- Rational: canonical fraction of bounded signed integers
- UnsignedInt / BigUnsignedInt: bounded and arbitrary-precision naturals
- Polynomial: single-variable polynomial over real coefficients
- solve_linear / solve_quadratic: closed-form equation solvers
"""

from .big_unsigned import BigUnsignedInt
from .equations import solve_linear, solve_quadratic
from .polynomial import Polynomial, trim
from .rational import Rational, gcd, reduce_fraction
from .unsigned import UnsignedInt
from .value import (
    COEFFICIENT_TOLERANCE,
    DISCRIMINANT_TOLERANCE,
    INT64_MAX,
    INT64_MIN,
    ToReal,
    to_real_value,
)

__all__ = [
    "ToReal",
    "to_real_value",
    "COEFFICIENT_TOLERANCE",
    "DISCRIMINANT_TOLERANCE",
    "INT64_MAX",
    "INT64_MIN",
    "Rational",
    "gcd",
    "reduce_fraction",
    "UnsignedInt",
    "BigUnsignedInt",
    "Polynomial",
    "trim",
    "solve_linear",
    "solve_quadratic",
]
