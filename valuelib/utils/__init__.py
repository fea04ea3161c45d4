"""Shared date, day-count, distribution and root-finding helpers."""

from .date import InvalidDateError, add_months, to_date
from .daycount import DAYS_IN_YEAR, get_day_count, register_day_count
from .distributions import norm_cdf
from .rootfinding import NonConvergenceError, RootFindingError, RootResult, newton_raphson

__all__ = [
    "DAYS_IN_YEAR",
    "InvalidDateError",
    "NonConvergenceError",
    "RootFindingError",
    "RootResult",
    "add_months",
    "get_day_count",
    "newton_raphson",
    "norm_cdf",
    "register_day_count",
    "to_date",
]
