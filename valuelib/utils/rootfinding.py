"""Root-finding utilities (Newton-Raphson on a forward-difference slope)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import logging
import math

logger = logging.getLogger(__name__)

Func = Callable[[float], float]


@dataclass
class RootResult:
    root: float
    iterations: int
    converged: bool
    method: str


class RootFindingError(RuntimeError):
    """Raised when root-finding fails."""


class NonConvergenceError(RootFindingError):
    """Raised when an iterative solver does not reach its tolerance."""


def newton_raphson(
    func: Func,
    initial_guess: float,
    *,
    tol_step: float = 1e-6,
    max_iter: int = 10_000,
    bump: Optional[float] = None,
    lower: float = -math.inf,
) -> RootResult:
    """Newton-Raphson root finder using a forward finite-difference derivative.

    Parameters
    ----------
    func:
        Objective function whose root is sought.
    initial_guess:
        Starting point for Newton iterations.
    tol_step:
        Convergence is declared when successive iterates differ by less than this.
    max_iter:
        Maximum number of Newton updates.
    bump:
        Step used for the forward difference ``(f(x + bump) - f(x)) / bump``.
        Defaults to ``tol_step``.
    lower:
        Exclusive lower bound of the function's domain. An iterate at or below
        it stops the solver.

    Raises
    ------
    NonConvergenceError
        If the iteration budget is exhausted, the slope is zero or non-finite,
        or an iterate is non-finite or leaves the domain.
    """
    h = tol_step if bump is None else bump
    if h <= 0.0:
        raise ValueError("finite-difference bump must be positive")
    if max_iter <= 0:
        raise ValueError("max_iter must be positive")

    x = float(initial_guess)
    for iteration in range(1, max_iter + 1):
        value = func(x)
        deriv = (func(x + h) - value) / h
        logger.debug("Newton iter %s: x=%s value=%s deriv=%s", iteration, x, value, deriv)
        if deriv == 0.0 or not math.isfinite(deriv):
            raise NonConvergenceError(
                f"Degenerate slope {deriv!r} at x={x!r} (iteration {iteration})"
            )
        x_new = x - value / deriv
        if not math.isfinite(x_new) or x_new <= lower:
            raise NonConvergenceError(
                f"Newton iterate {x_new!r} left the domain (> {lower}) at iteration {iteration}"
            )
        if abs(x_new - x) < tol_step:
            return RootResult(x_new, iteration, True, "newton")
        x = x_new

    raise NonConvergenceError(
        f"Newton-Raphson failed to converge within {max_iter} iterations; "
        f"last iterate {x!r}"
    )
