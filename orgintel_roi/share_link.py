"""Shareable-link codec for quick-calculator inputs.

A share token is the compact JSON of ``ShareConfig`` encoded as URL-safe
base64 with the ``=`` padding stripped, so it can be dropped into a query
string unchanged.
"""

from __future__ import annotations

import base64
import binascii
from typing import NamedTuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .engine.constants import assumptions_for_intensity
from .exceptions import ShareLinkError, wrap_exception
from .models import (
    AgentIntensity,
    ImprovementAssumptions,
    OrganizationProfile,
    Scenario,
    TransformationInvestment,
    ValueStream,
)


SHARE_QUERY_PARAM = "roi"
SHARE_PATH = "/graph"


class ShareConfig(BaseModel):
    """Inputs carried by a share link, serialized under short keys."""

    annual_revenue: float = Field(alias="rev")
    industry: str = Field(default="", alias="ind")
    company_name: str = Field(default="", alias="name")
    marketing_headcount: int = Field(alias="hc")
    marketing_budget_pct: float = Field(alias="budPct")
    avg_loaded_fte_cost: float = Field(alias="fteCost")
    intensity: AgentIntensity = AgentIntensity.MEDIUM
    scenario: Scenario = Scenario.EXPECTED
    total_investment_amount: float = Field(alias="invest")
    implementation_weeks: int = Field(alias="weeks")
    disabled_streams: tuple[ValueStream, ...] = Field(default=(), alias="ds")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SharedInputs(NamedTuple):
    org: OrganizationProfile
    investment: TransformationInvestment
    assumptions: ImprovementAssumptions
    scenario: Scenario
    disabled_streams: frozenset[ValueStream]


def encode_share_config(config: ShareConfig) -> str:
    """Encode a share config as a padding-free URL-safe base64 token."""
    payload = config.model_dump_json(by_alias=True).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")


def decode_share_config(token: str) -> ShareConfig:
    """Decode a share token.

    Raises:
        ShareLinkError: If the token is not base64, not UTF-8 JSON, or does
            not describe a valid ShareConfig
    """
    token = token.strip()
    if not token:
        raise ShareLinkError("Share token is empty", token=token, operation="decode_share_config")

    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError, ValueError) as e:
        raise wrap_exception(
            e,
            ShareLinkError,
            message="Share token is not valid base64",
            token=token,
            operation="decode_share_config",
        ) from e

    try:
        return ShareConfig.model_validate_json(raw)
    except ValidationError as e:
        logger.debug(f"Rejected share token with {e.error_count()} validation errors")
        raise wrap_exception(
            e,
            ShareLinkError,
            message="Share token does not contain a valid configuration",
            token=token,
            operation="decode_share_config",
        ) from e


def build_share_url(config: ShareConfig, base_url: str = "") -> str:
    return f"{base_url.rstrip('/')}{SHARE_PATH}?{SHARE_QUERY_PARAM}={encode_share_config(config)}"


def share_config_from_inputs(
    org: OrganizationProfile,
    investment: TransformationInvestment,
    intensity: AgentIntensity | str = AgentIntensity.MEDIUM,
    scenario: Scenario | str = Scenario.EXPECTED,
    disabled_streams: frozenset[ValueStream] | None = None,
) -> ShareConfig:
    return ShareConfig(
        annual_revenue=org.annual_revenue,
        industry=org.industry or "",
        company_name=org.company_name or "",
        marketing_headcount=org.marketing_headcount,
        marketing_budget_pct=org.marketing_budget_pct,
        avg_loaded_fte_cost=org.avg_loaded_fte_cost,
        intensity=AgentIntensity(intensity),
        scenario=Scenario(scenario),
        total_investment_amount=investment.total_investment_amount,
        implementation_weeks=investment.implementation_weeks,
        disabled_streams=tuple(sorted(disabled_streams or (), key=list(ValueStream).index)),
    )


def share_config_to_inputs(config: ShareConfig) -> SharedInputs:
    """Engine input records described by a share config.

    Spend, operations and pain profiles are not carried by the link; callers
    use their defaults.
    """
    return SharedInputs(
        org=OrganizationProfile(
            annual_revenue=config.annual_revenue,
            marketing_budget_pct=config.marketing_budget_pct,
            marketing_headcount=config.marketing_headcount,
            avg_loaded_fte_cost=config.avg_loaded_fte_cost,
            industry=config.industry or None,
            company_name=config.company_name or None,
        ),
        investment=TransformationInvestment(
            total_investment_amount=config.total_investment_amount,
            implementation_weeks=config.implementation_weeks,
        ),
        assumptions=assumptions_for_intensity(config.intensity),
        scenario=config.scenario,
        disabled_streams=frozenset(config.disabled_streams),
    )
