"""
Shared pytest fixtures for the numkit value types.

This module provides:
- Serialization round-trip checking for the pydantic value models
- Coefficient-wise closeness checks for polynomials
"""

import pytest
from typing import Sequence, Type, TypeVar
from pydantic import BaseModel

from numkit.math import Polynomial


T = TypeVar('T', bound=BaseModel)


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and rebuilt."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model can be dumped to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump()

        reconstructed = model_class(**serialized)

        assert reconstructed == model
        assert reconstructed.model_dump() == serialized

        return reconstructed

    return _assert_serialization


@pytest.fixture
def assert_coefficients_close():
    """Helper to compare polynomial coefficients within a tolerance."""
    def _assert_close(
        p: Polynomial, expected: Sequence[float], tolerance: float = 1e-9
    ) -> None:
        assert len(p.coefficients) == len(expected), (
            f"Coefficient count differs:\n{p.coefficients}\n!=\n{tuple(expected)}"
        )
        assert p.compare(Polynomial(expected), tolerance), (
            f"Coefficients differ:\n{p.coefficients}\n!=\n{tuple(expected)}"
        )

    return _assert_close
