"""Dividend discount valuation with the Gordon Growth Model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import logging
import math

logger = logging.getLogger(__name__)


def growth_value_single_stage(c0: float, y: float, g: float) -> Optional[float]:
    """Value a perpetuity growing at ``g`` and discounted at ``y``.

    Returns ``c0 * (1 + g) / (y - g)``, or ``None`` when ``y <= g`` since the
    perpetuity then has no finite value. The numerator is the next period's
    cashflow ``c0 * (1 + g)``, so ``(100, 0.1, 0.05)`` gives 2100, not 2200.
    """
    if y <= g:
        logger.debug("GGM undefined: required return %s <= growth %s", y, g)
        return None
    return c0 * (1.0 + g) / (y - g)


def growth_value_two_stage(
    c0: float, y: float, g1: float, g2: float, n: int
) -> Optional[float]:
    """Value a cashflow growing at ``g1`` for ``n`` periods, then at ``g2`` forever.

    The explicit horizon is the sum of ``c0 * (1 + g1)**t / (1 + y)**t`` for
    ``t = 1..n``. The cashflow at ``n + 1``, still grown at ``g1``, is
    capitalized with the single-stage formula at ``g2`` into a terminal value
    at the end of period ``n`` and discounted back ``n`` periods.

    Returns ``None`` when ``y <= g2``. Raises ``ValueError`` when ``1 + y <= 0``
    (no discount factor exists) or when compounding overflows.
    """
    if isinstance(n, bool) or int(n) != n or n < 0:
        raise ValueError(f"number of high-growth periods must be a non-negative integer, got {n!r}")
    n = int(n)
    if not 1.0 + y > 0.0:
        raise ValueError(f"required return must be greater than -100%, got {y!r}")

    try:
        terminal_cashflow = c0 * (1.0 + g1) ** (n + 1)
        terminal_value = growth_value_single_stage(terminal_cashflow, y, g2)
        if terminal_value is None:
            return None
        explicit = sum(c0 * (1.0 + g1) ** t / (1.0 + y) ** t for t in range(1, n + 1))
        value = explicit + terminal_value / (1.0 + y) ** n
    except (OverflowError, ZeroDivisionError) as exc:
        raise ValueError(f"two-stage value overflows over {n} periods") from exc
    if not math.isfinite(value):
        raise ValueError(f"two-stage value is not finite over {n} periods: {value!r}")
    return value


@dataclass(frozen=True)
class SingleStageInputs:
    cashflow: float
    required_return: float
    growth: float

    def value(self) -> Optional[float]:
        return growth_value_single_stage(self.cashflow, self.required_return, self.growth)


@dataclass(frozen=True)
class TwoStageInputs:
    cashflow: float
    required_return: float
    high_growth: float
    terminal_growth: float
    periods: int

    def value(self) -> Optional[float]:
        return growth_value_two_stage(
            self.cashflow,
            self.required_return,
            self.high_growth,
            self.terminal_growth,
            self.periods,
        )
