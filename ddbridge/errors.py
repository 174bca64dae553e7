"""ddbridge error hierarchy and exceptions."""

from __future__ import annotations


class DDBridgeError(Exception):
    """Base exception for all ddbridge errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(DDBridgeError):
    """Raised when configuration is invalid."""
    pass


class PropagationError(DDBridgeError):
    """Base class for Datadog headers that cannot be turned into a span context."""

    default_message = "invalid Datadog propagation headers"

    def __init__(self, value: str = "", message: str = None):
        super().__init__(message or self.default_message, {"value": value})
        self.value = value


class MalformedTraceIDError(PropagationError):
    """Trace ID header is not a 64-bit unsigned decimal."""

    default_message = "cannot parse Datadog trace ID as 64bit unsigned int from header"


class MalformedSpanIDError(PropagationError):
    """Parent ID header is not a 64-bit unsigned decimal."""

    default_message = "cannot parse Datadog span ID as 64bit unsigned int from header"


class InvalidTraceIDHeaderError(PropagationError):
    """Trace ID header parsed but does not form a valid trace ID."""

    default_message = "invalid Datadog trace ID header found"


class InvalidSpanIDHeaderError(PropagationError):
    """Parent ID header parsed but does not form a valid span ID."""

    default_message = "invalid Datadog span ID header found"


class InvalidSamplingPriorityHeaderError(PropagationError):
    """Sampling priority header is not an integer."""

    default_message = "invalid Datadog sampling priority header found"
