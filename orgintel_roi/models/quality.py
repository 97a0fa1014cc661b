"""Pydantic models for input range reporting."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QualitySeverity(str, Enum):
    """Severity levels for input issues."""

    ERROR = "error"
    WARNING = "warning"


class QualityIssue(BaseModel):
    """Individual input range issue."""

    field: str = Field(..., description="Dotted input field name, e.g. 'pain.rework_rate_pct'")
    value: Any | None = Field(None, description="Actual value that caused the issue")
    expected: Any | None = Field(None, description="Expected range or format")
    message: str = Field(..., description="Human-readable message")
    severity: QualitySeverity = Field(..., description="Issue severity level")
    rule: str | None = Field(None, description="Rule that failed")

    model_config = ConfigDict(frozen=True, use_enum_values=True)
