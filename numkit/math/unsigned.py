"""
Bounded non-negative integer.

UnsignedInt wraps the signed 64-bit register. The value is never negative,
and add/multiply check the exact result against the register limit instead
of letting it wrap around.
"""

from __future__ import annotations

import operator
import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import (
    DivisionByZeroError,
    InvalidFormatError,
    NegativeValueError,
    NumericOverflowError,
    UnderflowError,
)
from .value import INT64_MAX, ToReal

_SIGNED_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class UnsignedInt(BaseModel, ToReal):
    """
    Non-negative integer bounded by the 64-bit register.

    Examples:
        >>> UnsignedInt(10).subtract(UnsignedInt(3))
        UnsignedInt(7)
    """

    MAX_VALUE: ClassVar[int] = INT64_MAX

    model_config = ConfigDict(frozen=True)

    value: int = Field(description="The magnitude, 0 <= value <= MAX_VALUE")

    def __init__(self, value: int = 0):
        """
        Raises:
            NegativeValueError: If value is negative
            NumericOverflowError: If value exceeds MAX_VALUE
        """
        value = operator.index(value)
        if value < 0:
            raise NegativeValueError(value, "UnsignedInt")
        if value > self.MAX_VALUE:
            raise NumericOverflowError("UnsignedInt", self.MAX_VALUE)
        super().__init__(value=value)

    @classmethod
    def parse(cls, text: str) -> UnsignedInt:
        """
        Parse decimal text.

        A leading sign is accepted by the grammar only so that "-5" is
        reported as a negative value rather than a format error.
        """
        stripped = text.strip()
        if not _SIGNED_DECIMAL_RE.fullmatch(stripped):
            raise InvalidFormatError(text, "unsigned integer")
        return cls(int(stripped))

    def add(self, other: UnsignedInt) -> UnsignedInt:
        result = self.value + other.value
        if result > self.MAX_VALUE:
            raise NumericOverflowError("UnsignedInt.add", self.MAX_VALUE)
        return UnsignedInt(result)

    def subtract(self, other: UnsignedInt) -> UnsignedInt:
        result = self.value - other.value
        if result < 0:
            raise UnderflowError(self.value, other.value)
        return UnsignedInt(result)

    def multiply(self, other: UnsignedInt) -> UnsignedInt:
        result = self.value * other.value
        if result > self.MAX_VALUE:
            raise NumericOverflowError("UnsignedInt.multiply", self.MAX_VALUE)
        return UnsignedInt(result)

    def divide(self, other: UnsignedInt) -> UnsignedInt:
        """Truncating integer division."""
        if other.value == 0:
            raise DivisionByZeroError(dividend=self.value)
        return UnsignedInt(self.value // other.value)

    def to_real(self) -> float:
        return float(self.value)

    def to_string(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"UnsignedInt({self.value})"

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Any) -> UnsignedInt:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> UnsignedInt:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> UnsignedInt:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: Any) -> UnsignedInt:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.divide(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, UnsignedInt):
            return NotImplemented
        return self.value >= other.value
