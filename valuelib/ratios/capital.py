"""Cost of capital and free cashflow expressions."""

from __future__ import annotations


def capm_cost_of_equity(risk_free_rate: float, beta: float, equity_risk_premium: float) -> float:
    """Cost of equity = rf + beta * ERP."""
    return risk_free_rate + beta * equity_risk_premium


def wacc(
    equity_value: float,
    debt_value: float,
    cost_of_equity: float,
    cost_of_debt: float,
    tax_rate: float,
) -> float:
    """Weighted average cost of capital with after-tax cost of debt.

    WACC = E/(D+E) * Re + D/(D+E) * Rd * (1 - t)
    """
    total = equity_value + debt_value
    if total == 0:
        raise ValueError("equity_value + debt_value must be non-zero")
    return (
        equity_value / total * cost_of_equity
        + debt_value / total * cost_of_debt * (1.0 - tax_rate)
    )


def fcff(
    ebit: float,
    tax_rate: float,
    depreciation: float,
    capital_expenditure: float,
    change_in_working_capital: float,
) -> float:
    """Free cashflow to the firm = EBIT(1 - t) + D&A - CapEx - change in NWC."""
    return ebit * (1.0 - tax_rate) + depreciation - capital_expenditure - change_in_working_capital
