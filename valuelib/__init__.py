"""Valuation toolkit.

Key modules:
- tmv: dated present value (XNPV) and internal rate of return (XIRR)
- options: Black-Scholes-Merton European option pricing
- equity: Gordon Growth Model, single- and two-stage
- ratios: statement ratios, price multiples, cost of capital
- utils: dates, day counts, normal distribution, root finding
"""

from .equity import growth_value_single_stage, growth_value_two_stage
from .options import InvalidParameterError, OptionParameters, OptionResult, price_option
from .tmv import (
    Cashflow,
    EmptyScheduleError,
    InvalidRateError,
    internal_rate_of_return,
    present_value,
)
from .utils import InvalidDateError, NonConvergenceError, RootFindingError, norm_cdf

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Types
    "Cashflow",
    "OptionParameters",
    "OptionResult",
    # Main functions
    "present_value",
    "internal_rate_of_return",
    "price_option",
    "growth_value_single_stage",
    "growth_value_two_stage",
    "norm_cdf",
    # Exceptions
    "EmptyScheduleError",
    "InvalidDateError",
    "InvalidParameterError",
    "InvalidRateError",
    "NonConvergenceError",
    "RootFindingError",
]
