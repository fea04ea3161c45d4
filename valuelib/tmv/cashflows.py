"""Dated cashflow value type and schedule builders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Sequence, Tuple, Union

import pandas as pd

from valuelib.utils.date import DateLike, add_months, to_date


class EmptyScheduleError(ValueError):
    """Raised when a cashflow schedule contains no entries."""


@dataclass(frozen=True)
class Cashflow:
    amount: float
    date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", float(self.amount))
        object.__setattr__(self, "date", to_date(self.date))

    @classmethod
    def of(cls, amount: float, date_like: DateLike) -> "Cashflow":
        return cls(float(amount), date_like)


CashflowLike = Union[Cashflow, Tuple[float, DateLike]]


def as_schedule(items: Iterable[CashflowLike]) -> List[Cashflow]:
    """Coerce ``Cashflow`` objects or ``(amount, date)`` pairs into a schedule.

    Input order is preserved; the first entry is the valuation anchor.
    """
    schedule: List[Cashflow] = []
    for item in items:
        if isinstance(item, Cashflow):
            schedule.append(item)
        else:
            amount, date_like = item
            schedule.append(Cashflow.of(amount, date_like))
    if not schedule:
        raise EmptyScheduleError("cashflow schedule must contain at least one entry")
    return schedule


def periodic_schedule(
    amounts: Sequence[float], start: DateLike, *, months: int = 12
) -> List[Cashflow]:
    """Date ``amounts`` every ``months`` calendar months, starting at ``start``."""
    if months <= 0:
        raise ValueError("months must be positive")
    anchor = to_date(start)
    return as_schedule(
        Cashflow(float(amt), add_months(anchor, i * months)) for i, amt in enumerate(amounts)
    )


def schedule_from_frame(
    frame: pd.DataFrame, *, amount_col: str = "amount", date_col: str = "date"
) -> List[Cashflow]:
    """Build a schedule from the rows of a DataFrame, keeping row order."""
    missing = [col for col in (amount_col, date_col) if col not in frame.columns]
    if missing:
        raise KeyError(f"DataFrame is missing cashflow columns: {missing}")
    return as_schedule(zip(frame[amount_col].tolist(), frame[date_col].tolist()))
