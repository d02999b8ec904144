"""Assertion helpers shared by the test modules."""

import pytest


def assert_vec_close(actual, expected, tol=1e-9):
    """Compare two vectors component-wise."""
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)
