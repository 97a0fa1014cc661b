"""Input range checks reported as quality issues."""

from .inputs import (
    check_inputs,
    validate_budget_share,
    validate_cycle_distribution,
    validate_finite,
    validate_percentage,
    validate_positive,
    validate_range,
)

__all__ = [
    "check_inputs",
    "validate_budget_share",
    "validate_cycle_distribution",
    "validate_finite",
    "validate_percentage",
    "validate_positive",
    "validate_range",
]
