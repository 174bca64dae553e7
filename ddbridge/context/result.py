"""Outcome of decoding Datadog headers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from opentelemetry.trace import SpanContext

from ddbridge.errors import PropagationError


@dataclass(frozen=True)
class ExtractResult:
    """Either a decoded span context or the error that stopped decoding."""

    span_context: Optional[SpanContext] = None
    error: Optional[PropagationError] = None

    @classmethod
    def success(cls, span_context: SpanContext) -> "ExtractResult":
        return cls(span_context=span_context)

    @classmethod
    def failure(cls, error: PropagationError) -> "ExtractResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SpanContext:
        """Return the span context, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.span_context
