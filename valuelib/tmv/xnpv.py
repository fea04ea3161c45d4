"""Present value of an irregularly dated cashflow schedule."""

from __future__ import annotations

from typing import Iterable

import logging

import numpy as np

from valuelib.utils.daycount import DayCountFunc, get_day_count

from .cashflows import CashflowLike, as_schedule

logger = logging.getLogger(__name__)


class InvalidRateError(ValueError):
    """Raised when ``1 + rate`` is not positive."""


def year_fractions(schedule: Iterable[CashflowLike], day_count: str = "ACT/365F") -> np.ndarray:
    """Return the signed year fraction of each entry measured from the first entry's date."""
    flows = as_schedule(schedule)
    dc_func: DayCountFunc = get_day_count(day_count)
    anchor = flows[0].date
    logger.debug("Anchoring %s cashflows at %s", len(flows), anchor)
    return np.array([dc_func(anchor, cf.date) for cf in flows], dtype=float)


def present_value(
    schedule: Iterable[CashflowLike], rate: float, *, day_count: str = "ACT/365F"
) -> float:
    """Discount a dated schedule to the date of its first entry (XNPV).

    Each amount is divided by ``(1 + rate) ** t`` where ``t`` is the year
    fraction from the first entry's date, so the first amount is undiscounted
    and entries dated before it are compounded forward.
    """
    flows = as_schedule(schedule)
    growth = 1.0 + float(rate)
    if not growth > 0.0:
        raise InvalidRateError(f"discount rate must be greater than -100%, got {rate!r}")

    amounts = np.array([cf.amount for cf in flows], dtype=float)
    times = year_fractions(flows, day_count)
    return float(np.sum(amounts / np.power(growth, times)))
