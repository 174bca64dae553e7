"""Build an OpenTelemetry span context from Datadog header values."""

from __future__ import annotations

from opentelemetry.trace import INVALID_SPAN_ID, INVALID_TRACE_ID, SpanContext, TraceFlags

from ddbridge.codec.identifiers import datadog_id_to_otel, pad_hex_id
from ddbridge.codec.sampling import NOT_SAMPLED, decode_sampling
from ddbridge.context.result import ExtractResult
from ddbridge.errors import (
    InvalidSamplingPriorityHeaderError,
    InvalidSpanIDHeaderError,
    InvalidTraceIDHeaderError,
    MalformedSpanIDError,
    MalformedTraceIDError,
)
from ddbridge.utils.helpers import (
    SPAN_ID_HEX_WIDTH,
    TRACE_ID_HEX_WIDTH,
    parse_span_id,
    parse_trace_id,
)


def extract_span_context(
    trace_id: str,
    span_id: str,
    sampled: str,
    strict_sampling: bool = False,
) -> ExtractResult:
    """
    Decode the three Datadog header values into a remote span context.

    Values are checked in order (trace id, span id, sampling priority)
    and the first bad one decides the error.

    Args:
        trace_id: x-datadog-trace-id value
        span_id: x-datadog-parent-id value
        sampled: x-datadog-sampling-priority value
        strict_sampling: Reject an empty sampling priority instead of
            reading it as not sampled

    Returns:
        ExtractResult with either the span context or the error
    """
    try:
        trace_hex = datadog_id_to_otel(trace_id)
    except ValueError:
        return ExtractResult.failure(MalformedTraceIDError(trace_id))

    otel_trace_id = INVALID_TRACE_ID
    if trace_hex:
        try:
            # 64-bit Datadog ids fill the low half of the trace id
            otel_trace_id = parse_trace_id(pad_hex_id(trace_hex, TRACE_ID_HEX_WIDTH))
        except ValueError:
            otel_trace_id = INVALID_TRACE_ID
        if otel_trace_id == INVALID_TRACE_ID:
            return ExtractResult.failure(InvalidTraceIDHeaderError(trace_id))

    try:
        span_hex = datadog_id_to_otel(span_id)
    except ValueError:
        return ExtractResult.failure(MalformedSpanIDError(span_id))

    otel_span_id = INVALID_SPAN_ID
    if span_hex:
        try:
            otel_span_id = parse_span_id(pad_hex_id(span_hex, SPAN_ID_HEX_WIDTH))
        except ValueError:
            otel_span_id = INVALID_SPAN_ID
        if otel_span_id == INVALID_SPAN_ID:
            return ExtractResult.failure(InvalidSpanIDHeaderError(span_id))

    if not sampled and not strict_sampling:
        sampled = NOT_SAMPLED
    try:
        is_sampled = decode_sampling(sampled)
    except ValueError:
        return ExtractResult.failure(InvalidSamplingPriorityHeaderError(sampled))

    return ExtractResult.success(
        SpanContext(
            trace_id=otel_trace_id,
            span_id=otel_span_id,
            is_remote=True,
            trace_flags=TraceFlags(TraceFlags.SAMPLED if is_sampled else TraceFlags.DEFAULT),
        )
    )
