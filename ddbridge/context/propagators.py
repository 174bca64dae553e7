"""Datadog header propagation for OpenTelemetry.

Example Datadog format:

    x-datadog-trace-id: 16701352862047361693
    x-datadog-parent-id: 2939011537882399028
    x-datadog-sampling-priority: 1
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from opentelemetry import context as context_api
from opentelemetry.propagators.textmap import (
    CarrierT,
    Getter,
    Setter,
    TextMapPropagator,
    default_getter,
    default_setter,
)
from opentelemetry.trace import NonRecordingSpan, SpanContext
from opentelemetry.trace import get_current_span, set_span_in_context

from ddbridge import runtime_config
from ddbridge.context.extractor import extract_span_context
from ddbridge.context.fields import (
    PARENT_ID_HEADER,
    SAMPLING_PRIORITY_HEADER,
    TRACE_ID_HEADER,
    fields as datadog_fields,
)
from ddbridge.context.injector import encode_span_context, inject_span_context

logger = logging.getLogger(__name__)


def _get_header(getter: Getter[CarrierT], carrier: CarrierT, key: str) -> str:
    values = getter.get(carrier, key)
    if not values:
        return ""
    return values[0]


def _log_discard(message: str) -> None:
    level = logging.WARNING if runtime_config.get_debug() else logging.DEBUG
    logger.log(level, message)


class DatadogPropagator(TextMapPropagator):
    """
    Propagator for the Datadog x-datadog-* headers.

    Only the low 64 bits of the trace id cross the wire. Malformed
    headers never raise; extraction leaves the context unchanged.
    """

    def __init__(self, strict_sampling: Optional[bool] = None) -> None:
        """
        Args:
            strict_sampling: Reject an empty sampling priority header.
                None defers to runtime_config at extraction time.

        Raises:
            ConfigError: If the DDBRIDGE_* environment is invalid
        """
        runtime_config.ensure_loaded()
        self._strict_sampling = strict_sampling

    @property
    def strict_sampling(self) -> bool:
        if self._strict_sampling is None:
            return runtime_config.get_strict_sampling()
        return self._strict_sampling

    def extract(
        self,
        carrier: CarrierT,
        context: Optional[context_api.Context] = None,
        getter: Getter[CarrierT] = default_getter,
    ) -> context_api.Context:
        if context is None:
            context = context_api.Context()

        trace_id = _get_header(getter, carrier, TRACE_ID_HEADER)
        span_id = _get_header(getter, carrier, PARENT_ID_HEADER)
        sampled = _get_header(getter, carrier, SAMPLING_PRIORITY_HEADER)
        if not (trace_id or span_id or sampled):
            return context

        result = extract_span_context(trace_id, span_id, sampled, self.strict_sampling)
        if not result.ok:
            _log_discard(f"Ignoring Datadog headers: {result.error}")
            return context

        span_context = result.span_context
        if not span_context.is_valid:
            _log_discard(
                f"Ignoring Datadog headers without a usable span context: "
                f"trace_id={trace_id!r} parent_id={span_id!r}"
            )
            return context

        return set_span_in_context(NonRecordingSpan(span_context), context)

    def inject(
        self,
        carrier: CarrierT,
        context: Optional[context_api.Context] = None,
        setter: Setter[CarrierT] = default_setter,
    ) -> None:
        span_context = get_current_span(context).get_span_context()
        inject_span_context(span_context, carrier, setter)

    @property
    def fields(self) -> List[str]:
        """Header names set by inject(), in propagation order."""
        return datadog_fields()


def format_datadog_headers(span_context: SpanContext) -> Dict[str, str]:
    """
    Format the Datadog headers for a span context.

    Returns an empty dict when the span context cannot be propagated.
    """
    return encode_span_context(span_context) or {}


def inject_datadog_headers(headers: Dict[str, str], span_context: SpanContext) -> None:
    """
    Inject Datadog headers for span_context into headers dict.

    Uses the OpenTelemetry propagator API internally.
    """
    ctx = set_span_in_context(NonRecordingSpan(span_context))
    DatadogPropagator().inject(carrier=headers, context=ctx)


def extract_datadog_headers(headers: Dict[str, str]) -> Optional[SpanContext]:
    """
    Extract a remote span context from Datadog headers.

    Returns None when the headers are missing or unusable.
    """
    ctx = DatadogPropagator().extract(carrier=headers)
    otel_context = get_current_span(context=ctx).get_span_context()
    if otel_context.is_valid:
        return otel_context
    return None
