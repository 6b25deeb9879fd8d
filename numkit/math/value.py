"""
Shared numeric capability for the numkit value types.

Rational, UnsignedInt, BigUnsignedInt and Polynomial all convert to a
Python float. The capability is an abstract mixin rather than a common
value hierarchy: the types share nothing else, and only Polynomial's
conversion constructor consumes it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Final

# Trailing coefficients below this magnitude are trimmed from polynomials
# and skipped when rendering.
COEFFICIENT_TOLERANCE: Final[float] = 1e-12

# Discriminants below this magnitude count as a repeated root.
DISCRIMINANT_TOLERANCE: Final[float] = 1e-12

# Signed 64-bit register backing the bounded integer types.
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


class ToReal(ABC):
    """
    Values convertible to a real number.

    Note: Concrete subclasses inherit from both BaseModel and ToReal,
    e.g., `class Rational(BaseModel, ToReal):`.
    """

    @abstractmethod
    def to_real(self) -> float:
        """Convert to a Python float."""

    def __float__(self) -> float:
        """Convert to Python float (for float() builtin)."""
        return self.to_real()


def to_real_value(value: Any) -> float:
    """
    Convert a ToReal value or a plain Python number to float.

    Raises:
        TypeError: If value is neither ToReal nor a real number
    """
    if isinstance(value, ToReal):
        return value.to_real()
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a real number")
