"""
Tests for the package-level API.
"""

import pytest

import valuelib


def test_end_to_end_through_package_root():
    pv = valuelib.present_value(
        [(1000.0, "2026-01-01"), (1500.0, "2027-01-01"), (2000.0, "2028-01-01")], 0.05
    )
    assert pv == pytest.approx(4242.63, abs=0.01)
    assert valuelib.price_option(100.0, 100.0, 1.0, 0.05, 0.2, 0.03).call == pytest.approx(8.653, abs=1e-3)
    assert valuelib.growth_value_single_stage(100.0, 0.05, 0.05) is None


def test_error_taxonomy():
    assert issubclass(valuelib.InvalidDateError, ValueError)
    assert issubclass(valuelib.EmptyScheduleError, ValueError)
    assert issubclass(valuelib.InvalidRateError, ValueError)
    assert issubclass(valuelib.InvalidParameterError, ValueError)
    assert issubclass(valuelib.NonConvergenceError, RuntimeError)
