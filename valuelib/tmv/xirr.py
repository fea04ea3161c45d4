"""Internal rate of return of an irregularly dated cashflow schedule."""

from __future__ import annotations

from typing import Iterable

import logging

from valuelib.utils.rootfinding import newton_raphson

from .cashflows import CashflowLike, as_schedule
from .xnpv import present_value

logger = logging.getLogger(__name__)

DEFAULT_GUESS = 0.10
DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 10_000


def internal_rate_of_return(
    schedule: Iterable[CashflowLike],
    *,
    guess: float = DEFAULT_GUESS,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    day_count: str = "ACT/365F",
) -> float:
    """Solve for the rate at which ``present_value`` of the schedule is zero (XIRR).

    Newton-Raphson from ``guess``; the slope is a forward difference with a
    bump equal to ``tolerance``, and convergence is declared once successive
    rates differ by less than ``tolerance``.

    Raises:
        NonConvergenceError: If the iteration budget runs out, the slope
            vanishes, or an iterate drops to -100% or below.
    """
    flows = as_schedule(schedule)

    def objective(rate: float) -> float:
        return present_value(flows, rate, day_count=day_count)

    result = newton_raphson(
        objective,
        guess,
        tol_step=tolerance,
        max_iter=max_iterations,
        lower=-1.0,
    )
    logger.debug("XIRR converged to %s after %s iterations", result.root, result.iterations)
    return result.root
