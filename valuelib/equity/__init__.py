"""Equity valuation models."""

from .ggm import (
    SingleStageInputs,
    TwoStageInputs,
    growth_value_single_stage,
    growth_value_two_stage,
)

__all__ = [
    "SingleStageInputs",
    "TwoStageInputs",
    "growth_value_single_stage",
    "growth_value_two_stage",
]
