"""Central exception hierarchy for the ROI engine package.

The calculation engine itself never raises for numeric problems: undefined
results are returned as ``NaN``/``inf`` sentinels inside the output records.
The exceptions below cover the ambient layers around the engine, i.e.
configuration loading and decoding of shared input links.

Exception Hierarchy:
    OrgIntelROIError (base)
    ├── ConfigurationError
    └── InputError
        └── ShareLinkError

Usage:
    from orgintel_roi.exceptions import ShareLinkError

    try:
        inputs = decode_share_config(token)
    except ShareLinkError as e:
        logger.warning(f"Ignoring shared link: {e.message}", extra=e.to_dict())
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Error codes for programmatic handling.

    Categories:
        1xxx - Configuration errors
        2xxx - Input decoding errors
    """

    # Configuration errors (1xxx)
    CONFIG_LOAD_FAILED = 1001
    CONFIG_VALIDATION_FAILED = 1002

    # Input errors (2xxx)
    INPUT_INVALID = 2001
    SHARE_LINK_INVALID = 2002


class OrgIntelROIError(Exception):
    """Base exception for all ROI engine errors.

    Attributes:
        message: Human-readable error description
        component: Package component (e.g., "config", "share_link")
        operation: Operation being performed (e.g., "decode_share_config")
        details: Additional context as dictionary
        status_code: Numeric error code from ErrorCode enum
        cause: Original exception if wrapping another error

    Example:
        raise OrgIntelROIError(
            "Failed to load model settings",
            component="config",
            operation="get_config",
            details={"environment": "development"},
            status_code=ErrorCode.CONFIG_LOAD_FAILED,
        )
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: ErrorCode | None = None,
        cause: Exception | None = None,
    ):
        self.message = message
        self.component = component or self.__class__.__module__
        self.operation = operation
        self.details = details or {}
        self.status_code = status_code
        self.cause = cause

        parts = [message]
        if component:
            parts.append(f"[component={component}]")
        if operation:
            parts.append(f"[operation={operation}]")
        if status_code:
            parts.append(f"[code={status_code}]")

        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with all exception attributes
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "component": self.component,
            "operation": self.operation,
            "details": self.details,
            "status_code": self.status_code.value if self.status_code else None,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(OrgIntelROIError):
    """Configuration loading or validation failed.

    Use this for:
    - Missing configuration files
    - YAML parse failures
    - Schema validation failures

    Example:
        raise ConfigurationError(
            "discount_rate must be between 0.0 and 1.0",
            config_key="roi_model.discount_rate",
            details={"config_file": "config/base.yaml"}
        )
    """

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key

        component = kwargs.pop("component", "config")

        super().__init__(
            message,
            component=component,
            details=details,
            status_code=kwargs.pop("status_code", ErrorCode.CONFIG_VALIDATION_FAILED),
            **kwargs,
        )


class InputError(OrgIntelROIError):
    """Raw input records could not be built from external data."""

    def __init__(self, message: str, **kwargs: Any):
        super().__init__(
            message,
            status_code=kwargs.pop("status_code", ErrorCode.INPUT_INVALID),
            **kwargs,
        )


class ShareLinkError(InputError):
    """A shareable-link token could not be decoded into input records.

    Example:
        raise ShareLinkError(
            "Share token is not valid base64",
            token="not-a-token",
            cause=original_exception,
        )
    """

    def __init__(self, message: str, token: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if token is not None:
            details["token_length"] = len(token)

        component = kwargs.pop("component", "share_link")

        super().__init__(
            message,
            component=component,
            details=details,
            status_code=kwargs.pop("status_code", ErrorCode.SHARE_LINK_INVALID),
            **kwargs,
        )


def wrap_exception(
    original: Exception,
    error_class: type[OrgIntelROIError],
    message: str | None = None,
    **kwargs: Any,
) -> OrgIntelROIError:
    """Wrap a generic exception in a structured package exception.

    Args:
        original: Original exception to wrap
        error_class: Package exception class to use
        message: Override message (defaults to original message)
        **kwargs: Additional arguments for exception constructor

    Returns:
        Instance of error_class with original exception as cause

    Example:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise wrap_exception(e, ShareLinkError, operation="decode_share_config") from e
    """
    return error_class(message or str(original), cause=original, **kwargs)


def get_error_code(exc: Exception) -> int | None:
    """Get error code from exception if available."""
    if isinstance(exc, OrgIntelROIError) and exc.status_code:
        return exc.status_code.value
    return None
