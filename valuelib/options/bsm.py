"""Black-Scholes-Merton pricing of European options with a continuous dividend yield.

Notation:
- s: Current price of the underlying
- k: Strike price
- t: Time to expiration (years)
- r: Risk-free rate (continuous)
- sigma: Volatility (annualized)
- q: Dividend yield (continuous)
"""

from __future__ import annotations

from math import exp, isfinite, log, sqrt
from typing import Tuple

from valuelib.utils.distributions import norm_cdf

from .types import InvalidParameterError, OptionParameters, OptionResult, validate_parameters


def d1_d2(
    s: float, k: float, t: float, r: float, sigma: float, q: float = 0.0
) -> Tuple[float, float]:
    """Return (d1, d2).

    d1 = [ln(S) - ln(K) + (r - q + sigma^2/2)T] / (sigma * sqrt(T))
    d2 = d1 - sigma * sqrt(T)
    """
    validate_parameters(s, k, t, r, sigma, q)
    vol_sqrt_t = sigma * sqrt(t)
    if not (vol_sqrt_t > 0.0 and isfinite(vol_sqrt_t)):
        raise InvalidParameterError(
            f"sigma * sqrt(t) must be positive and finite, got {vol_sqrt_t!r}"
        )
    try:
        d1 = (log(s) - log(k) + (r - q + sigma**2 / 2.0) * t) / vol_sqrt_t
    except OverflowError as exc:
        raise InvalidParameterError(f"d1 overflows for sigma={sigma!r}, t={t!r}") from exc
    if not isfinite(d1):
        raise InvalidParameterError(f"d1 is not finite: {d1!r}")
    return d1, d1 - vol_sqrt_t


def price_option(
    s: float, k: float, t: float, r: float, sigma: float, q: float = 0.0
) -> OptionResult:
    """Price a European call and put.

    Raises:
        InvalidParameterError: If an input is non-finite, t, sigma, s or k
            is not positive, or a discount factor or price overflows.
    """
    d1, d2 = d1_d2(s, k, t, r, sigma, q)
    n_d1 = norm_cdf(d1)
    n_d2 = norm_cdf(d2)

    try:
        carry = s * exp(-q * t)
        discounted_strike = k * exp(-r * t)
    except OverflowError as exc:
        raise InvalidParameterError(
            f"discount factor overflows for r={r!r}, q={q!r}, t={t!r}"
        ) from exc
    call = carry * n_d1 - discounted_strike * n_d2
    put = discounted_strike * norm_cdf(-d2) - carry * norm_cdf(-d1)
    if not (isfinite(call) and isfinite(put)):
        raise InvalidParameterError(f"option values are not finite: call={call!r}, put={put!r}")
    return OptionResult(call=call, put=put, n_d1=n_d1, n_d2=n_d2)


def price_option_from(params: OptionParameters) -> OptionResult:
    """Price from a validated ``OptionParameters`` bundle."""
    return price_option(
        params.spot,
        params.strike,
        params.time,
        params.rate,
        params.sigma,
        params.dividend_yield,
    )
