"""Day count conventions for dated cashflow discounting."""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict

DAYS_IN_YEAR = 365

DayCountFunc = Callable[[date, date], float]


def _act_365f(start: date, end: date) -> float:
    """Return the signed ACT/365F year fraction between two dates.

    Follows the convention:
        yearfrac(d1, d2) = ActualDays(d1, d2) / 365

    The result is negative when ``end`` precedes ``start``.
    """
    days = (end - start).days
    return float(days) / DAYS_IN_YEAR


_REGISTRY: Dict[str, DayCountFunc] = {"ACT/365F": _act_365f}


def get_day_count(name: str) -> DayCountFunc:
    """Return a callable implementing the requested day-count convention."""
    key = name.upper()
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(f"Unsupported day count convention: {name}") from exc


def register_day_count(name: str, func: DayCountFunc) -> None:
    """Register a custom day-count convention."""
    key = name.upper()
    if key in _REGISTRY:
        raise ValueError(f"Day count '{name}' already registered")
    _REGISTRY[key] = func
