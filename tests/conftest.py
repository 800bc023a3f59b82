"""Shared fixtures and utilities for complexnum tests."""

import numpy as np
import pytest

from complexnum import Complex


def _assert_complex_close(actual: Complex, expected: complex, rel: float = 1e-12, abs_tol: float = 1e-12) -> None:
    """Assert that a Complex matches a Python/numpy complex component by component."""
    expected = complex(expected)
    assert actual.re == pytest.approx(expected.real, rel=rel, abs=abs_tol), \
        f"real part of {actual!r} differs from {expected}"
    assert actual.im == pytest.approx(expected.imag, rel=rel, abs=abs_tol), \
        f"imaginary part of {actual!r} differs from {expected}"


@pytest.fixture
def assert_complex_close():
    """Fixture providing a component-wise approximate comparison."""
    return _assert_complex_close


@pytest.fixture
def sample_points():
    """A spread of nonzero points covering all four quadrants and both axes."""
    return [
        Complex(1, 2),
        Complex(-1.5, 0.5),
        Complex(-0.3, -2),
        Complex(2.5, -1),
        Complex(0, 3),
        Complex(0, -0.75),
        Complex(4, 0),
        Complex(-2, 0),
    ]


@pytest.fixture
def as_numpy():
    """Convert a Complex to numpy's complex128 for use as a reference value."""
    def _convert(z: Complex) -> np.complex128:
        return np.complex128(complex(z))

    return _convert
