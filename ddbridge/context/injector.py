"""Serialize an OpenTelemetry span context into Datadog header values."""

from __future__ import annotations

from typing import Dict, Optional

from opentelemetry.propagators.textmap import CarrierT, Setter, default_setter
from opentelemetry.trace import SpanContext

from ddbridge.codec.identifiers import otel_id_to_datadog
from ddbridge.codec.sampling import encode_sampling
from ddbridge.context.fields import PARENT_ID_HEADER, SAMPLING_PRIORITY_HEADER, TRACE_ID_HEADER
from ddbridge.utils.helpers import format_span_id, format_trace_id


def encode_span_context(span_context: Optional[SpanContext]) -> Optional[Dict[str, str]]:
    """
    Encode a span context as Datadog header values.

    Returns:
        Header name to value mapping, or None when the context cannot be
        represented and nothing should be written
    """
    if span_context is None or not span_context.is_valid:
        return None

    trace_id = otel_id_to_datadog(format_trace_id(span_context.trace_id))
    parent_id = otel_id_to_datadog(format_span_id(span_context.span_id))
    if not trace_id or not parent_id:
        return None

    return {
        TRACE_ID_HEADER: trace_id,
        PARENT_ID_HEADER: parent_id,
        SAMPLING_PRIORITY_HEADER: encode_sampling(span_context.trace_flags.sampled),
    }


def inject_span_context(
    span_context: Optional[SpanContext],
    carrier: CarrierT,
    setter: Setter[CarrierT] = default_setter,
) -> bool:
    """
    Write the Datadog headers for span_context into carrier.

    Either all three headers are written or none.

    Returns:
        True if the headers were written
    """
    headers = encode_span_context(span_context)
    if headers is None:
        return False
    for key, value in headers.items():
        setter.set(carrier, key, value)
    return True
