"""Data structures for option pricing."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import Iterator


class InvalidParameterError(ValueError):
    """Raised when option inputs fall outside the model's domain."""


@dataclass(frozen=True)
class OptionParameters:
    """Inputs to the Black-Scholes-Merton model.

    Attributes:
        spot: Current price of the underlying
        strike: Option strike price
        time: Time to expiration in years
        rate: Continuously compounded risk-free rate
        sigma: Annualized volatility
        dividend_yield: Continuous dividend yield
    """

    spot: float
    strike: float
    time: float
    rate: float
    sigma: float
    dividend_yield: float = 0.0

    def __post_init__(self) -> None:
        validate_parameters(
            self.spot, self.strike, self.time, self.rate, self.sigma, self.dividend_yield
        )


@dataclass(frozen=True)
class OptionResult:
    """European call and put values with the two cumulative-probability terms.

    Attributes:
        call: Call option value
        put: Put option value
        n_d1: N(d1)
        n_d2: N(d2)
    """

    call: float
    put: float
    n_d1: float
    n_d2: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


def validate_parameters(
    s: float, k: float, t: float, r: float, sigma: float, q: float
) -> None:
    names = ("spot", "strike", "time", "rate", "sigma", "dividend_yield")
    for name, value in zip(names, (s, k, t, r, sigma, q)):
        if not math.isfinite(value):
            raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    if t <= 0:
        raise InvalidParameterError("Time to expiration must be positive")
    if sigma <= 0:
        raise InvalidParameterError("Volatility must be positive")
    if s <= 0:
        raise InvalidParameterError("Spot price must be positive")
    if k <= 0:
        raise InvalidParameterError("Strike price must be positive")
