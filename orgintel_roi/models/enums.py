"""Enumerations shared by the ROI engine records."""

from enum import Enum


class Scenario(str, Enum):
    """Stress-test scenario applied uniformly to every value stream."""

    CONSERVATIVE = "conservative"
    EXPECTED = "expected"
    AGGRESSIVE = "aggressive"


class ValueStream(str, Enum):
    """Independently toggleable category of annual financial benefit."""

    TOOLING_OPTIMIZATION = "tooling_optimization"
    ROAS_IMPROVEMENT = "roas_improvement"
    CONTENT_VELOCITY = "content_velocity"
    CYCLE_TIME = "cycle_time"
    TIME_SAVINGS = "time_savings"
    REWORK_REDUCTION = "rework_reduction"
    ATTRIBUTION_IMPROVEMENT = "attribution_improvement"
    PERSONALIZATION_LIFT = "personalization_lift"
    KNOWLEDGE_COMPOUND = "knowledge_compound"


# Streams drawing on team time; scaled together by the labor guardrail.
LABOR_STREAMS = frozenset(
    {
        ValueStream.CONTENT_VELOCITY,
        ValueStream.CYCLE_TIME,
        ValueStream.TIME_SAVINGS,
        ValueStream.REWORK_REDUCTION,
    }
)


class AgentIntensity(str, Enum):
    """How deeply the organization adopts AI agents; orthogonal to Scenario."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeUnit(str, Enum):
    """Unit of the post-transformation duration in a workflow comparison."""

    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
