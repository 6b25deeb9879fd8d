"""
Arbitrary-precision non-negative integer.

BigUnsignedInt has the same operation set as UnsignedInt, but its
magnitude grows as needed, so add and multiply never overflow.
"""

from __future__ import annotations

import operator
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import (
    DivisionByZeroError,
    InvalidFormatError,
    NegativeResultError,
    NegativeValueError,
)
from .value import ToReal

_SIGNED_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# int() and str() refuse very long decimal strings, so convert in chunks.
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _decimal_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_decimal(value: int) -> str:
    if value < _CHUNK_BASE:
        return str(value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, chunk = divmod(value, _CHUNK_BASE)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


class BigUnsignedInt(BaseModel, ToReal):
    """
    Non-negative integer of unbounded size.

    Accepts either a Python int or decimal text.

    Examples:
        >>> BigUnsignedInt("10000000000000000000").add(BigUnsignedInt(2))
        BigUnsignedInt(10000000000000000002)
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(description="The magnitude, value >= 0")

    def __init__(self, value: int | str = 0):
        """
        Args:
            value: Magnitude as int, or decimal text (see parse)

        Raises:
            NegativeValueError: If value is negative
            InvalidFormatError: If text is not a decimal integer
        """
        if isinstance(value, str):
            value = self._parse_magnitude(value)
        else:
            value = operator.index(value)
        if value < 0:
            raise NegativeValueError(value, "BigUnsignedInt")
        super().__init__(value=value)

    @staticmethod
    def _parse_magnitude(text: str) -> int:
        stripped = text.strip()
        if not _SIGNED_DECIMAL_RE.fullmatch(stripped):
            raise InvalidFormatError(text, "unsigned integer")
        magnitude = _decimal_to_int(stripped.lstrip("+-"))
        return -magnitude if stripped.startswith("-") else magnitude

    @classmethod
    def parse(cls, text: str) -> BigUnsignedInt:
        """Parse decimal text of any length, surrounding whitespace allowed."""
        return cls(cls._parse_magnitude(text))

    def add(self, other: BigUnsignedInt) -> BigUnsignedInt:
        return BigUnsignedInt(self.value + other.value)

    def subtract(self, other: BigUnsignedInt) -> BigUnsignedInt:
        result = self.value - other.value
        if result < 0:
            raise NegativeResultError(self.value, other.value)
        return BigUnsignedInt(result)

    def multiply(self, other: BigUnsignedInt) -> BigUnsignedInt:
        return BigUnsignedInt(self.value * other.value)

    def divide(self, other: BigUnsignedInt) -> BigUnsignedInt:
        """Truncating integer division."""
        if other.value == 0:
            raise DivisionByZeroError(dividend=self.value)
        return BigUnsignedInt(self.value // other.value)

    def to_real(self) -> float:
        """
        Convert to float.

        Raises:
            OverflowError: If the magnitude exceeds the float range
        """
        return float(self.value)

    def to_string(self) -> str:
        return _int_to_decimal(self.value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigUnsignedInt({self.to_string()})"

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Any) -> BigUnsignedInt:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> BigUnsignedInt:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> BigUnsignedInt:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: Any) -> BigUnsignedInt:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.divide(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, BigUnsignedInt):
            return NotImplemented
        return self.value >= other.value
