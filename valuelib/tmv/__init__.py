"""Time value of money: dated present value and internal rate of return."""

from .cashflows import (
    Cashflow,
    EmptyScheduleError,
    as_schedule,
    periodic_schedule,
    schedule_from_frame,
)
from .xirr import internal_rate_of_return
from .xnpv import InvalidRateError, present_value, year_fractions

__all__ = [
    "Cashflow",
    "EmptyScheduleError",
    "InvalidRateError",
    "as_schedule",
    "internal_rate_of_return",
    "periodic_schedule",
    "present_value",
    "schedule_from_frame",
    "year_fractions",
]
