"""European option pricing."""

from .bsm import d1_d2, price_option, price_option_from
from .types import InvalidParameterError, OptionParameters, OptionResult

__all__ = [
    "InvalidParameterError",
    "OptionParameters",
    "OptionResult",
    "d1_d2",
    "price_option",
    "price_option_from",
]
