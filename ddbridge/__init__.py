"""ddbridge: Datadog header propagation for OpenTelemetry."""

from ddbridge.context import (
    FIELDS,
    DatadogPropagator,
    ExtractResult,
    extract_datadog_headers,
    extract_span_context,
    fields,
    format_datadog_headers,
    inject_datadog_headers,
)
from ddbridge.errors import (
    ConfigError,
    DDBridgeError,
    InvalidSamplingPriorityHeaderError,
    InvalidSpanIDHeaderError,
    InvalidTraceIDHeaderError,
    MalformedSpanIDError,
    MalformedTraceIDError,
    PropagationError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DDBridgeError",
    "DatadogPropagator",
    "ExtractResult",
    "FIELDS",
    "InvalidSamplingPriorityHeaderError",
    "InvalidSpanIDHeaderError",
    "InvalidTraceIDHeaderError",
    "MalformedSpanIDError",
    "MalformedTraceIDError",
    "PropagationError",
    "extract_datadog_headers",
    "extract_span_context",
    "fields",
    "format_datadog_headers",
    "inject_datadog_headers",
]
