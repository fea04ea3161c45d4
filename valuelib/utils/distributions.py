"""Standard normal distribution helpers."""

from __future__ import annotations

import mpmath


def norm_cdf(d: float) -> float:
    """Return P(Z <= d) for a standard normal Z.

    Evaluated with mpmath at its working precision, then rounded to float.
    """
    return float(mpmath.ncdf(d))
