"""Ratio, multiple and cost-of-capital formulas."""

from .capital import capm_cost_of_equity, fcff, wacc
from .market import dividend_yield, price_to_book, price_to_earnings
from .statements import (
    asset_turnover,
    cash_ratio,
    current_ratio,
    debt_ratio,
    debt_to_equity,
    gross_margin,
    interest_coverage,
    inventory_turnover,
    net_margin,
    operating_margin,
    quick_ratio,
    receivables_turnover,
    return_on_assets,
    return_on_equity,
)

__all__ = [
    "asset_turnover",
    "capm_cost_of_equity",
    "cash_ratio",
    "current_ratio",
    "debt_ratio",
    "debt_to_equity",
    "dividend_yield",
    "fcff",
    "gross_margin",
    "interest_coverage",
    "inventory_turnover",
    "net_margin",
    "operating_margin",
    "price_to_book",
    "price_to_earnings",
    "quick_ratio",
    "receivables_turnover",
    "return_on_assets",
    "return_on_equity",
    "wacc",
]
