"""
Rational type for numkit.

Implements a Rational that stores numerator and denominator as bounded
signed integers, always kept in lowest terms with a positive denominator.
"""

from __future__ import annotations

import operator
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import DivisionByZeroError, InvalidFormatError, NumericOverflowError
from .value import INT64_MAX, INT64_MIN, ToReal

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def gcd(a: int, b: int) -> int:
    """
    Greatest Common Divisor.

    gcd(0, b) is |b|, so zero reduces to 0/1.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def reduce_fraction(num: int, den: int) -> tuple[int, int]:
    """
    Reduce fraction to lowest terms.

    Ensures denominator is positive.

    Raises:
        DivisionByZeroError: If den is zero
    """
    if den == 0:
        raise DivisionByZeroError("Denominator must not be zero", numerator=num)
    if den < 0:
        num, den = -num, -den
    g = gcd(num, den)
    return (num // g, den // g)


def _checked(num: int, den: int, operation: str) -> tuple[int, int]:
    """Reduce an exact result and verify it fits the 64-bit register."""
    num, den = reduce_fraction(num, den)
    if not (INT64_MIN <= num <= INT64_MAX and den <= INT64_MAX):
        raise NumericOverflowError(operation, INT64_MAX)
    return num, den


def _parse_int(text: str, original: str) -> int:
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidFormatError(original, "rational")
    return int(text)


class Rational(BaseModel, ToReal):
    """
    Rational represents a fraction as numerator/denominator in canonical form.

    Invariants: denominator > 0 and gcd(|numerator|, denominator) == 1.
    Instances are immutable; every operation returns a new Rational.

    Examples:
        >>> Rational(1, 2).add(Rational(3, 4))
        Rational(5, 4)
        >>> Rational(6, -8)
        Rational(-3, 4)
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(description="The numerator")
    denominator: int = Field(description="The denominator, always positive")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        """
        Create a Rational in lowest terms.

        Args:
            numerator: Numerator (or the whole value if denominator is 1)
            denominator: Denominator (default 1)

        Raises:
            DivisionByZeroError: If denominator is zero
            NumericOverflowError: If the reduced parts exceed the 64-bit register
        """
        num, den = _checked(
            operator.index(numerator), operator.index(denominator), "Rational"
        )
        super().__init__(numerator=num, denominator=den)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """
        Parse "n/d" or "n" (surrounding whitespace allowed).

        Raises:
            InvalidFormatError: If the segments are not base-10 integers
            DivisionByZeroError: If the denominator is zero
        """
        stripped = text.strip()
        if "/" in stripped:
            parts = stripped.split("/")
            if len(parts) != 2:
                raise InvalidFormatError(text, "rational")
            return cls(_parse_int(parts[0], text), _parse_int(parts[1], text))
        return cls(_parse_int(stripped, text))

    @staticmethod
    def _coerce(other: Any) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return None

    # Arithmetic

    def add(self, other: Rational) -> Rational:
        """a/b + c/d = (ad + cb)/(bd)"""
        n = self.numerator * other.denominator + other.numerator * self.denominator
        d = self.denominator * other.denominator
        return Rational(*_checked(n, d, "Rational.add"))

    def subtract(self, other: Rational) -> Rational:
        """a/b - c/d = (ad - cb)/(bd)"""
        n = self.numerator * other.denominator - other.numerator * self.denominator
        d = self.denominator * other.denominator
        return Rational(*_checked(n, d, "Rational.subtract"))

    def multiply(self, other: Rational) -> Rational:
        """(a/b) * (c/d) = (ac)/(bd)"""
        n = self.numerator * other.numerator
        d = self.denominator * other.denominator
        return Rational(*_checked(n, d, "Rational.multiply"))

    def divide(self, other: Rational) -> Rational:
        """
        (a/b) / (c/d) = (ad)/(bc)

        Raises:
            DivisionByZeroError: If other is zero
        """
        if other.numerator == 0:
            raise DivisionByZeroError(dividend=self.to_string())
        n = self.numerator * other.denominator
        d = self.denominator * other.numerator
        return Rational(*_checked(n, d, "Rational.divide"))

    # Conversions

    def to_real(self) -> float:
        """Convert to Python float."""
        return self.numerator / self.denominator

    def to_string(self) -> str:
        """"n" for whole numbers, otherwise "n/d"."""
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        """Developer representation showing constructor."""
        return f"Rational({self.numerator}, {self.denominator})"

    # Operators

    def __add__(self, other: Any) -> Rational:
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other: Any) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Rational:
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other: Any) -> Rational:
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other: Any) -> Rational:
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other: Any) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Rational:
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other: Any) -> Rational:
        other = self._coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __neg__(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational(abs(self.numerator), self.denominator)

    # Ordering (denominators are positive, so cross-multiplication keeps sign)

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.numerator * other.denominator < other.numerator * self.denominator

    def __le__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.numerator * other.denominator <= other.numerator * self.denominator

    def __gt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.numerator * other.denominator > other.numerator * self.denominator

    def __ge__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.numerator * other.denominator >= other.numerator * self.denominator
