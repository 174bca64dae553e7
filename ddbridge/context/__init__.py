"""Datadog header propagation for OpenTelemetry span contexts."""

from ddbridge.context.extractor import extract_span_context
from ddbridge.context.fields import (
    FIELDS,
    PARENT_ID_HEADER,
    SAMPLING_PRIORITY_HEADER,
    TRACE_ID_HEADER,
    fields,
)
from ddbridge.context.injector import encode_span_context, inject_span_context
from ddbridge.context.propagators import (
    DatadogPropagator,
    extract_datadog_headers,
    format_datadog_headers,
    inject_datadog_headers,
)
from ddbridge.context.result import ExtractResult

__all__ = [
    "DatadogPropagator",
    "ExtractResult",
    "FIELDS",
    "PARENT_ID_HEADER",
    "SAMPLING_PRIORITY_HEADER",
    "TRACE_ID_HEADER",
    "encode_span_context",
    "extract_datadog_headers",
    "extract_span_context",
    "fields",
    "format_datadog_headers",
    "inject_datadog_headers",
    "inject_span_context",
]
