"""
Numeric exceptions.

Every failure of a value-type operation is reported with one of the
exceptions below. Each kind also derives from the closest builtin
exception, so callers may catch either ``DivisionByZeroError`` or plain
``ZeroDivisionError``.
"""

from typing import Any, Dict, Optional


class NumericError(Exception):
    """Base exception for numkit errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DivisionByZeroError(NumericError, ZeroDivisionError):
    """Raised when a denominator or divisor is zero"""

    def __init__(self, message: str = "Division by zero", **details: Any):
        super().__init__(message, details)


class NegativeValueError(NumericError, ValueError):
    """Raised when an unsigned type is constructed from a negative value"""

    def __init__(self, value: Any, type_name: str):
        super().__init__(
            message=f"{type_name} value must be >= 0, got {value}",
            details={"value": value, "type": type_name}
        )


class NegativeResultError(NumericError, ArithmeticError):
    """Raised when an arbitrary-precision subtraction would go negative"""

    def __init__(self, minuend: Any, subtrahend: Any):
        super().__init__(
            message=f"Result of {minuend} - {subtrahend} is negative",
            details={"minuend": minuend, "subtrahend": subtrahend}
        )


class UnderflowError(NumericError, ArithmeticError):
    """Raised when a bounded unsigned subtraction would go below zero"""

    def __init__(self, minuend: Any, subtrahend: Any):
        super().__init__(
            message=f"Underflow in {minuend} - {subtrahend}",
            details={"minuend": minuend, "subtrahend": subtrahend}
        )


class NumericOverflowError(NumericError, OverflowError):
    """Raised when a result does not fit the bounded integer register"""

    def __init__(self, operation: str, limit: int):
        super().__init__(
            message=f"Overflow in {operation} (limit {limit})",
            details={"operation": operation, "limit": limit}
        )


class InvalidFormatError(NumericError, ValueError):
    """Raised when text does not match the expected grammar"""

    def __init__(self, text: str, expected: str):
        super().__init__(
            message=f"Invalid {expected} format: {text!r}",
            details={"text": text, "expected": expected}
        )


class ZeroCoefficientError(NumericError, ArithmeticError):
    """Raised when the leading coefficient of a linear equation is zero"""

    def __init__(self, name: str = "a"):
        super().__init__(
            message=f"Coefficient {name} must not be zero",
            details={"coefficient": name}
        )
