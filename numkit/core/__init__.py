"""Core utilities package"""

from .config import settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    NumericError,
    DivisionByZeroError,
    NegativeValueError,
    NegativeResultError,
    UnderflowError,
    NumericOverflowError,
    InvalidFormatError,
    ZeroCoefficientError,
)

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "NumericError",
    "DivisionByZeroError",
    "NegativeValueError",
    "NegativeResultError",
    "UnderflowError",
    "NumericOverflowError",
    "InvalidFormatError",
    "ZeroCoefficientError",
]
