"""
Tests for single- and two-stage Gordon Growth Model valuation.
"""

import pytest

from valuelib.equity import (
    SingleStageInputs,
    TwoStageInputs,
    growth_value_single_stage,
    growth_value_two_stage,
)

# ---------------------------------------------------------------------------
# Single stage
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("g", [0.05, 0.0, -0.05, 0.099])
def test_single_stage_closed_form(g):
    expected = 100.0 * (1.0 + g) / (0.1 - g)
    assert growth_value_single_stage(100.0, 0.1, g) == pytest.approx(expected)


def test_single_stage_reference_value():
    assert growth_value_single_stage(100.0, 0.1, 0.05) == pytest.approx(2100.0)
    assert growth_value_single_stage(100.0, 0.1, 0.0) == pytest.approx(1000.0)


@pytest.mark.parametrize("g", [0.1, 0.12, 0.5])
def test_single_stage_undefined_when_growth_reaches_return(g):
    assert growth_value_single_stage(100.0, 0.1, g) is None


def test_single_stage_inputs_bundle():
    assert SingleStageInputs(100.0, 0.1, 0.05).value() == growth_value_single_stage(100.0, 0.1, 0.05)
    assert SingleStageInputs(100.0, 0.05, 0.05).value() is None

# ---------------------------------------------------------------------------
# Two stage
# ---------------------------------------------------------------------------

def _two_stage_direct(c0, y, g1, g2, n):
    explicit = sum(c0 * (1 + g1) ** t / (1 + y) ** t for t in range(1, n + 1))
    terminal = c0 * (1 + g1) ** (n + 1) * (1 + g2) / (y - g2)
    return explicit + terminal / (1 + y) ** n


def test_two_stage_value():
    value = growth_value_two_stage(100.0, 0.1, 0.2, 0.05, 3)
    assert value == pytest.approx(_two_stage_direct(100.0, 0.1, 0.2, 0.05, 3))
    assert value == pytest.approx(3629.5718, abs=1e-3)


def test_two_stage_without_high_growth_periods_is_terminal_term_only():
    value = growth_value_two_stage(100.0, 0.1, 0.2, 0.05, 0)
    assert value == pytest.approx(growth_value_single_stage(120.0, 0.1, 0.05))
    assert value == pytest.approx(2520.0)


def test_two_stage_with_equal_growth_rates():
    value = growth_value_two_stage(100.0, 0.1, 0.05, 0.05, 5)
    assert value == pytest.approx(_two_stage_direct(100.0, 0.1, 0.05, 0.05, 5))


def test_two_stage_allows_high_growth_above_required_return():
    value = growth_value_two_stage(100.0, 0.1, 0.25, 0.03, 5)
    assert value is not None
    assert value == pytest.approx(_two_stage_direct(100.0, 0.1, 0.25, 0.03, 5))


@pytest.mark.parametrize("g2", [0.1, 0.15])
def test_two_stage_undefined_when_terminal_growth_reaches_return(g2):
    assert growth_value_two_stage(100.0, 0.1, 0.2, g2, 5) is None


@pytest.mark.parametrize("n", [-1, 2.5, True])
def test_two_stage_rejects_invalid_horizon(n):
    with pytest.raises(ValueError):
        growth_value_two_stage(100.0, 0.1, 0.2, 0.05, n)


def test_two_stage_inputs_bundle():
    inputs = TwoStageInputs(100.0, 0.1, 0.2, 0.05, 3)
    assert inputs.value() == growth_value_two_stage(100.0, 0.1, 0.2, 0.05, 3)


@pytest.mark.parametrize("y", [-1.0, -1.5])
def test_two_stage_rejects_required_return_at_or_below_minus_one(y):
    with pytest.raises(ValueError):
        growth_value_two_stage(100.0, y, 0.2, -2.0, 3)


def test_two_stage_rejects_overflowing_compounding():
    with pytest.raises(ValueError):
        growth_value_two_stage(100.0, 0.1, 5.0, 0.05, 500)
