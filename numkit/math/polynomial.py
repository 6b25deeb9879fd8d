"""
Single-variable polynomial with real coefficients.

Coefficients are stored lowest power first: ``coefficients[i]`` multiplies
``x**i``. Every constructing operation trims near-zero trailing
coefficients, so the stored sequence is always canonical; the zero
polynomial is ``(0.0,)``, never empty.

Two text forms exist:
- ``to_string()`` renders the algebraic form, highest power first
  (``"2x^2 - 3x + 1"``),
- ``to_line()`` / ``parse()`` handle the persisted coefficient line,
  lowest power first (``"1.0 -3.0 2.0"``).
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

import sympy as sp
from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import InvalidFormatError
from .value import COEFFICIENT_TOLERANCE, ToReal, to_real_value


def trim(coefficients: Sequence[float]) -> tuple[float, ...]:
    """
    Drop trailing coefficients whose magnitude is below the tolerance.

    The constant term is always kept, and an empty or all-near-zero input
    collapses to ``(0.0,)``.
    """
    if not coefficients:
        return (0.0,)
    last = len(coefficients) - 1
    while last > 0 and abs(coefficients[last]) < COEFFICIENT_TOLERANCE:
        last -= 1
    if last == 0 and abs(coefficients[0]) < COEFFICIENT_TOLERANCE:
        return (0.0,)
    return tuple(coefficients[:last + 1])


def _format_number(value: float) -> str:
    """Drop the fractional part of integral values."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e10:
        return str(int(value))
    return repr(value)


def _to_sympy_number(value: float) -> sp.Expr:
    if math.isfinite(value) and value == int(value):
        return sp.Integer(int(value))
    return sp.Float(value)


class Polynomial(BaseModel, ToReal):
    """
    Immutable polynomial over real coefficients.

    Examples:
        >>> p = Polynomial([1, -3, 2])
        >>> str(p)
        '2x^2 - 3x + 1'
        >>> p.derivative().coefficients
        (-3.0, 4.0)
        >>> p(2.0)
        3.0
    """

    model_config = ConfigDict(frozen=True)

    coefficients: tuple[float, ...] = Field(
        description="Coefficients from x^0 upward, trailing zeros trimmed"
    )

    def __init__(self, coefficients: Iterable[float | int | ToReal] = (0.0,)):
        """
        Create a polynomial.

        Args:
            coefficients: Coefficients from x^0 upward. Rational, UnsignedInt
                and BigUnsignedInt entries are converted with ``to_real()``.

        Raises:
            ValueError: If a coefficient is NaN or infinite
        """
        values = [to_real_value(c) for c in coefficients]
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Polynomial coefficients must be finite, got {values}")
        super().__init__(coefficients=trim(values))

    @classmethod
    def zero(cls) -> Polynomial:
        return cls((0.0,))

    @classmethod
    def parse(cls, text: str) -> Polynomial:
        """
        Parse a whitespace-separated coefficient line, x^0 first.

        A blank line is the zero polynomial.

        Raises:
            InvalidFormatError: If a token is not a finite decimal number
        """
        values = []
        for token in text.split():
            try:
                value = float(token)
            except ValueError:
                raise InvalidFormatError(text, "polynomial") from None
            if not math.isfinite(value):
                raise InvalidFormatError(text, "polynomial")
            values.append(value)
        return cls(values)

    def degree(self) -> int:
        """Highest power; 0 for constants, including the zero polynomial."""
        return len(self.coefficients) - 1

    def is_zero(self) -> bool:
        return self.coefficients == (0.0,)

    # Calculus

    def value_at(self, x: float) -> float:
        """Evaluate by accumulating c[i] * x^i with a running power of x."""
        result = 0.0
        power = 1.0
        for c in self.coefficients:
            result += c * power
            power *= x
        return result

    def derivative(self) -> Polynomial:
        if self.degree() == 0:
            return Polynomial.zero()
        return Polynomial(
            self.coefficients[i] * i for i in range(1, len(self.coefficients))
        )

    def integral(self) -> Polynomial:
        """Antiderivative with the constant of integration fixed at 0."""
        result = [0.0]
        result.extend(c / (i + 1) for i, c in enumerate(self.coefficients))
        return Polynomial(result)

    def definite_integral(self, a: float, b: float) -> float:
        antiderivative = self.integral()
        return antiderivative.value_at(b) - antiderivative.value_at(a)

    # Algebra

    def add(self, other: Polynomial) -> Polynomial:
        n = max(len(self.coefficients), len(other.coefficients))
        return Polynomial(a + b for a, b in zip(self._padded(n), other._padded(n)))

    def subtract(self, other: Polynomial) -> Polynomial:
        n = max(len(self.coefficients), len(other.coefficients))
        return Polynomial(a - b for a, b in zip(self._padded(n), other._padded(n)))

    def multiply(self, other: Polynomial) -> Polynomial:
        """Full convolution of the two coefficient sequences."""
        result = [0.0] * (len(self.coefficients) + len(other.coefficients) - 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                result[i + j] += a * b
        return Polynomial(result)

    def _padded(self, length: int) -> tuple[float, ...]:
        return self.coefficients + (0.0,) * (length - len(self.coefficients))

    def compare(self, other: Polynomial, tolerance: float = 1e-9) -> bool:
        """Coefficient-wise comparison within an absolute tolerance."""
        n = max(len(self.coefficients), len(other.coefficients))
        return all(
            abs(a - b) <= tolerance
            for a, b in zip(self._padded(n), other._padded(n))
        )

    # Conversions

    def to_real(self) -> float:
        """The value at x = 1 (the sum of the coefficients)."""
        return self.value_at(1.0)

    def to_line(self) -> str:
        """Coefficient line for persistence, x^0 first."""
        return " ".join(repr(float(c)) for c in self.coefficients)

    def to_string(self) -> str:
        """
        Render highest power first, e.g. ``"-x^3 + 2.5x - 4"``.

        Near-zero coefficients are skipped and a unit coefficient on x or a
        power of x is left implicit.
        """
        if len(self.coefficients) == 1 and abs(self.coefficients[0]) < COEFFICIENT_TOLERANCE:
            return "0"

        parts: list[str] = []
        for power in range(len(self.coefficients) - 1, -1, -1):
            c = self.coefficients[power]
            if abs(c) < COEFFICIENT_TOLERANCE:
                continue
            if parts:
                parts.append(" + " if c >= 0 else " - ")
                c = abs(c)
            elif c < 0:
                parts.append("-")
                c = -c

            if power == 0:
                parts.append(_format_number(c))
                continue
            if abs(c - 1.0) > COEFFICIENT_TOLERANCE:
                parts.append(_format_number(c))
            parts.append("x" if power == 1 else f"x^{power}")
        return "".join(parts)

    def to_sympy(self, variable: str = "x") -> sp.Expr:
        """Build the equivalent SymPy expression in the given variable."""
        x = sp.Symbol(variable)
        return sp.Add(*[
            _to_sympy_number(c) * x**i
            for i, c in enumerate(self.coefficients)
        ])

    def to_tex(self, variable: str = "x") -> str:
        """Convert to LaTeX representation."""
        return sp.latex(self.to_sympy(variable))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({list(self.coefficients)})"

    # Operators

    def __call__(self, x: float) -> float:
        return self.value_at(x)

    def __add__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Polynomial:
        return Polynomial(-c for c in self.coefficients)
