"""Configuration schema for the ROI calculation model constants."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from .common import FloatRangeValidatorMixin, PercentageMappingMixin


SCENARIO_NAMES = ("conservative", "expected", "aggressive")


class IRRSolverConfig(BaseModel):
    """Newton-Raphson settings for the internal rate of return."""

    initial_guess: float = Field(default=0.1, description="Starting monthly rate")
    max_iterations: int = Field(default=100, ge=1, description="Iteration cap before giving up")
    tolerance: float = Field(default=1e-7, gt=0.0, description="Convergence threshold on the rate")


class RoiModelConfig(PercentageMappingMixin, FloatRangeValidatorMixin, BaseModel):
    """Constants used by the ROI calculation engine.

    Defaults reproduce the published three-year model. Every engine entry
    point accepts an instance of this class; when omitted the defaults below
    are used and no configuration file is read.
    """

    discount_rate: float = Field(default=0.10, description="Annual discount rate for NPV")
    projection_months: int = Field(default=36, ge=1, description="Projection horizon in months")
    hours_per_year: float = Field(default=2080.0, gt=0.0, description="Working hours per FTE-year")
    hours_per_day: float = Field(default=8.0, gt=0.0, description="Working hours per day")
    weeks_per_month: float = Field(default=4.33, gt=0.0, description="Weeks per calendar month")

    scenario_multipliers: dict[str, float] = Field(
        default_factory=lambda: {
            "conservative": 0.6,
            "expected": 1.0,
            "aggressive": 1.4,
        },
        description="Uniform value multipliers per scenario",
    )
    maturity_multipliers: list[float] = Field(
        default_factory=lambda: [1.0, 1.05, 1.10],
        description="Year-over-year knowledge maturity bump, indexed by projection year",
    )

    contribution_margin_pct: float = Field(
        default=20.0, description="Share of incremental revenue counted as value"
    )
    ongoing_opex_pct: float = Field(
        default=0.0,
        description="Annual run cost as % of investment, accrued after the build phase",
    )
    knowledge_premium_pct: float = Field(
        default=5.0, description="Knowledge compound premium as % of the other streams"
    )
    time_recovery_fraction: float = Field(
        default=0.6, description="Share of automatable hours actually recovered"
    )
    labor_savings_cap_pct: float = Field(
        default=40.0, description="Cap on combined labor streams as % of team cost"
    )
    campaign_speed_cap_pct: float = Field(
        default=10.0, description="Cap on cycle-time value as % of team cost"
    )

    ramp_model: Literal["uniform", "per_stream"] = Field(
        default="uniform", description="Adoption curve applied to the timeline"
    )
    irr: IRRSolverConfig = Field(default_factory=IRRSolverConfig)

    @field_validator("scenario_multipliers")
    @classmethod
    def validate_scenario_multipliers(cls, value: Mapping[str, Any]) -> dict[str, float]:
        normalized = cls._coerce_percentage_mapping(
            value, field_name="scenario_multipliers", lower_bound=0.0, upper_bound=10.0
        )
        missing = [name for name in SCENARIO_NAMES if name not in normalized]
        if missing:
            raise ValueError(f"scenario_multipliers missing scenarios: {', '.join(missing)}")
        return normalized

    @field_validator("maturity_multipliers")
    @classmethod
    def validate_maturity_multipliers(cls, value: list[Any]) -> list[float]:
        if not value:
            raise ValueError("maturity_multipliers must contain at least one year")
        return [
            cls._coerce_float(v, field_name="maturity_multipliers", lower_bound=0.0) for v in value
        ]

    @field_validator("discount_rate", "time_recovery_fraction")
    @classmethod
    def validate_fraction(cls, value: float) -> float:
        if not (0.0 <= value <= 1.0):
            raise ValueError(f"Value must be between 0.0 and 1.0, got {value}")
        return value

    @field_validator(
        "contribution_margin_pct",
        "ongoing_opex_pct",
        "knowledge_premium_pct",
        "labor_savings_cap_pct",
        "campaign_speed_cap_pct",
    )
    @classmethod
    def validate_percentage(cls, value: float) -> float:
        if not (0.0 <= value <= 100.0):
            raise ValueError(f"Percentage must be between 0.0 and 100.0, got {value}")
        return value

    def maturity_multiplier(self, month: int) -> float:
        """Multiplier for the projection year containing ``month`` (months 1-12 are year 1)."""
        if month <= 0:
            return self.maturity_multipliers[0]
        year_index = min((month - 1) // 12, len(self.maturity_multipliers) - 1)
        return self.maturity_multipliers[year_index]
